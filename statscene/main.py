from fastapi import FastAPI

from statscene.api.routes.scene import router
from statscene.core.middleware import SceneRateLimitMiddleware
from statscene.core.middleware import scene_route_limits
from statscene.core.observability import configure_logging
from statscene.core.observability import init_sentry
from statscene.render.config import RenderConfig
from statscene.settings import Settings


def create_app(
    settings: Settings | None = None, render_config: RenderConfig | None = None
) -> FastAPI:
    """Build the FastAPI application serving rendered stats scenes."""

    app_settings = settings or Settings()
    configure_logging(app_settings)
    init_sentry(app_settings)

    app = FastAPI(title="statscene")
    app.state.settings = app_settings
    app.state.render_config = render_config or RenderConfig()
    app.add_middleware(
        SceneRateLimitMiddleware, limits=scene_route_limits(app_settings)
    )
    app.include_router(router)
    return app


app = create_app()
