import httpx
import pytest

from statscene.render.config import RenderConfig
from statscene.services.scene_service import GitHubAPIError
from statscene.services.scene_service import InvalidGitHubTokenError
from statscene.services.scene_service import aggregate_repositories
from statscene.services.scene_service import build_stats_record
from statscene.services.scene_service import get_authenticated_user_scene


def _user_payload() -> dict[str, object]:
    return {
        "contributionsCollection": {
            "totalCommitContributions": 120,
            "totalIssueContributions": 4,
            "totalPullRequestContributions": 9,
            "totalPullRequestReviewContributions": 2,
            "totalRepositoryContributions": 1,
            "contributionCalendar": {
                "totalContributions": 8,
                "weeks": [
                    {"contributionDays": [{"contributionCount": 0}, {"contributionCount": 5}]},
                    {"contributionDays": [{"contributionCount": 3}]},
                ],
            },
        },
        "repositories": {
            "nodes": [
                {
                    "stargazerCount": 10,
                    "forkCount": 2,
                    "languages": {
                        "edges": [
                            {"size": 800, "node": {"name": "Go", "color": "#00ADD8"}},
                            {"size": 50, "node": {"name": "Shell", "color": None}},
                        ]
                    },
                },
                {
                    "stargazerCount": 5,
                    "forkCount": 1,
                    "languages": {
                        "edges": [
                            {"size": 200, "node": {"name": "Go", "color": "#00ADD8"}},
                            {"size": 300, "node": {"name": "Rust", "color": "#dea584"}},
                        ]
                    },
                },
                {"stargazerCount": 0, "forkCount": 0, "languages": None},
            ]
        },
    }


def _status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://api.github.com/user")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("GitHub failed", request=request, response=response)


def test_aggregate_repositories_sums_sizes_stars_and_forks() -> None:
    languages, stars, forks = aggregate_repositories(_user_payload()["repositories"]["nodes"])

    assert stars == 15
    assert forks == 3
    assert {name: stat.size for name, stat in languages.items()} == {
        "Go": 1000,
        "Shell": 50,
        "Rust": 300,
    }
    assert languages["Shell"].color == "#cccccc"


def test_build_stats_record_maps_graphql_user() -> None:
    record = build_stats_record(_user_payload())

    assert record.metrics == [120, 4, 9, 2, 1]
    assert [[cell.count for cell in week] for week in record.calendar] == [[0, 5], [3]]
    assert record.summary.total_contributions == 8
    assert record.summary.total_stars == 15
    assert record.summary.total_forks == 3


def test_get_authenticated_user_scene_builds_scene(monkeypatch) -> None:
    def fake_fetch_authenticated_user(token: str, api_url: str):
        assert token == "token-123"
        return {"id": 1, "login": "octocat"}

    def fake_fetch_profile_stats(username: str, token: str, graphql_url: str):
        assert username == "octocat"
        assert graphql_url == "https://example.test/graphql"
        return _user_payload()

    monkeypatch.setattr(
        "statscene.services.scene_service.fetch_authenticated_user",
        fake_fetch_authenticated_user,
    )
    monkeypatch.setattr(
        "statscene.services.scene_service.fetch_profile_stats",
        fake_fetch_profile_stats,
    )

    scene = get_authenticated_user_scene(
        token="token-123",
        graphql_url="https://example.test/graphql",
        config=RenderConfig(),
    )

    assert len(scene.layer("heatmap").shapes) == 9
    assert len(scene.layer("donut").of_kind("path")) == 3


@pytest.mark.parametrize("status_code", [401, 403])
def test_get_authenticated_user_scene_maps_auth_errors(monkeypatch, status_code) -> None:
    def fake_fetch_authenticated_user(token: str, api_url: str):
        raise _status_error(status_code)

    monkeypatch.setattr(
        "statscene.services.scene_service.fetch_authenticated_user",
        fake_fetch_authenticated_user,
    )

    with pytest.raises(InvalidGitHubTokenError):
        get_authenticated_user_scene("bad", "https://example.test/graphql", RenderConfig())


def test_get_authenticated_user_scene_maps_other_failures(monkeypatch) -> None:
    def fake_fetch_authenticated_user(token: str, api_url: str):
        return {"id": 1, "login": "octocat"}

    def fake_fetch_profile_stats(username: str, token: str, graphql_url: str):
        raise ValueError("GitHub GraphQL returned errors")

    monkeypatch.setattr(
        "statscene.services.scene_service.fetch_authenticated_user",
        fake_fetch_authenticated_user,
    )
    monkeypatch.setattr(
        "statscene.services.scene_service.fetch_profile_stats",
        fake_fetch_profile_stats,
    )

    with pytest.raises(GitHubAPIError):
        get_authenticated_user_scene("token", "https://example.test/graphql", RenderConfig())
