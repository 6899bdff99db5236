from typing import Literal

from fastapi import APIRouter
from fastapi import HTTPException
from fastapi import Query
from fastapi import Request
from fastapi import Response
from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials

from statscene.core.security import bearer_scheme
from statscene.core.security import extract_github_token
from statscene.render.composer import compose_scene
from statscene.render.config import RenderConfig
from statscene.render.models import StatsRecord
from statscene.render.svg import to_svg
from statscene.services.scene_service import GitHubAPIError
from statscene.services.scene_service import InvalidGitHubTokenError
from statscene.services.scene_service import get_authenticated_user_scene
from statscene.settings import Settings


SVG_MEDIA_TYPE = "image/svg+xml"

router = APIRouter()


def _render_config(request: Request) -> RenderConfig:
    return request.app.state.render_config


@router.get("/")
async def root() -> dict[str, str]:
    """Return a basic service greeting."""

    return {"message": "statscene"}


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.get("/scene/me")
def get_authenticated_user_scene_svg(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> Response:
    """Render the stats scene of the GitHub user owning the bearer token."""

    token = extract_github_token(credentials)
    settings: Settings = request.app.state.settings

    try:
        scene = get_authenticated_user_scene(
            token=token,
            graphql_url=settings.github_graphql_url,
            config=_render_config(request),
            api_url=settings.github_api_url,
        )
    except InvalidGitHubTokenError as exc:
        raise HTTPException(status_code=401, detail="GitHub token is invalid") from exc
    except GitHubAPIError as exc:
        raise HTTPException(
            status_code=502, detail="GitHub API request failed"
        ) from exc

    return Response(content=to_svg(scene), media_type=SVG_MEDIA_TYPE)


@router.post("/scene/render", response_model=None)
def render_scene(
    record: StatsRecord,
    request: Request,
    output_format: Literal["svg", "json"] = Query(default="svg", alias="format"),
) -> Response | dict[str, object]:
    """Render a scene from an already-parsed stats record."""

    scene = compose_scene(record, _render_config(request))
    if output_format == "json":
        return scene.model_dump(mode="json")
    return Response(content=to_svg(scene), media_type=SVG_MEDIA_TYPE)
