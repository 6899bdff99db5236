import logging
from collections.abc import Mapping
from typing import Any

import httpx

from statscene.github_api import fetch_authenticated_user
from statscene.github_api import fetch_profile_stats
from statscene.render.composer import compose_scene
from statscene.render.config import RenderConfig
from statscene.render.models import CalendarCell
from statscene.render.models import LanguageStat
from statscene.render.models import Scene
from statscene.render.models import StatsRecord
from statscene.render.models import Summary


logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE_COLOR = "#cccccc"

METRIC_FIELDS = (
    "totalCommitContributions",
    "totalIssueContributions",
    "totalPullRequestContributions",
    "totalPullRequestReviewContributions",
    "totalRepositoryContributions",
)


class InvalidGitHubTokenError(Exception):
    """Raised when GitHub rejects the provided token."""


class GitHubAPIError(Exception):
    """Raised when GitHub requests fail for non-auth reasons."""


def _int(value: object) -> int:
    return value if isinstance(value, int) and value >= 0 else 0


def build_calendar(weeks: list[Any]) -> list[list[CalendarCell]]:
    """Convert GraphQL calendar weeks into heatmap cells, skipping bad days."""

    grid: list[list[CalendarCell]] = []
    for week in weeks:
        if not isinstance(week, Mapping):
            continue
        days = week.get("contributionDays")
        if not isinstance(days, list):
            continue
        grid.append(
            [
                CalendarCell(count=_int(day.get("contributionCount")))
                for day in days
                if isinstance(day, Mapping)
            ]
        )
    return grid


def aggregate_repositories(
    nodes: list[Any],
) -> tuple[dict[str, LanguageStat], int, int]:
    """Sum language sizes, stars and forks over owned repositories.

    The color of the first occurrence of a language wins; a missing one becomes
    DEFAULT_LANGUAGE_COLOR.
    """

    sizes: dict[str, int] = {}
    colors: dict[str, str] = {}
    stars = 0
    forks = 0

    for repo in nodes:
        if not isinstance(repo, Mapping):
            continue
        stars += _int(repo.get("stargazerCount"))
        forks += _int(repo.get("forkCount"))

        languages = repo.get("languages")
        edges = languages.get("edges") if isinstance(languages, Mapping) else None
        for edge in edges or []:
            node = edge.get("node") if isinstance(edge, Mapping) else None
            if not isinstance(node, Mapping) or not isinstance(node.get("name"), str):
                continue
            name = node["name"]
            sizes[name] = sizes.get(name, 0) + _int(edge.get("size"))
            raw_color = node.get("color")
            colors.setdefault(
                name, raw_color if isinstance(raw_color, str) else DEFAULT_LANGUAGE_COLOR
            )

    languages_stats = {
        name: LanguageStat(size=size, color=colors[name]) for name, size in sizes.items()
    }
    return languages_stats, stars, forks


def build_stats_record(user: Mapping[str, Any]) -> StatsRecord:
    """Build the renderer input record from a GraphQL `user` object."""

    collection = user["contributionsCollection"]
    calendar = collection["contributionCalendar"]
    languages, stars, forks = aggregate_repositories(user["repositories"]["nodes"])

    return StatsRecord(
        calendar=build_calendar(calendar["weeks"]),
        languages=languages,
        metrics=[_int(collection.get(field)) for field in METRIC_FIELDS],
        summary=Summary(
            total_contributions=_int(calendar.get("totalContributions")),
            total_stars=stars,
            total_forks=forks,
        ),
    )


def get_authenticated_user_scene(
    token: str,
    graphql_url: str,
    config: RenderConfig,
    api_url: str = "https://api.github.com",
) -> Scene:
    """Build the stats scene for the GitHub user linked to token."""

    try:
        github_user = fetch_authenticated_user(token, api_url)
        username = str(github_user["login"])
        user = fetch_profile_stats(
            username=username,
            token=token,
            graphql_url=graphql_url,
        )
    except httpx.HTTPStatusError as exc:
        if exc.response.status_code in {401, 403}:
            raise InvalidGitHubTokenError from exc
        raise GitHubAPIError from exc
    except Exception as exc:
        raise GitHubAPIError from exc

    logger.info("Rendering stats scene for %s", username)
    return compose_scene(build_stats_record(user), config)
