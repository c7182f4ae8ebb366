"""URL and snippet construction for the three card views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple
from urllib.parse import quote

from .models import DEFAULT_LOCALE, CardOptions, Theme, ViewKind

STATS_ENDPOINT = "https://github-readme-stats.vercel.app/api"
LANGUAGES_ENDPOINT = "https://github-readme-stats.vercel.app/api/top-langs/"
STREAK_ENDPOINT = "https://streak-stats.demolab.com/"

ALT_TEXT = "GitHub Stats"


@dataclass(frozen=True)
class ViewPolicy:
    base_url: str
    primary_param: str
    supports_all_commits: bool = False


POLICIES: Dict[ViewKind, ViewPolicy] = {
    ViewKind.STATS: ViewPolicy(STATS_ENDPOINT, "username", supports_all_commits=True),
    ViewKind.LANGUAGES: ViewPolicy(LANGUAGES_ENDPOINT, "username"),
    ViewKind.STREAK: ViewPolicy(STREAK_ENDPOINT, "user"),
}


def _encode(value: str) -> str:
    return quote(value, safe="")


def optional_params(options: CardOptions, policy: ViewPolicy) -> List[Tuple[str, str]]:
    """Return the optional query parameters in their fixed order."""
    params: List[Tuple[str, str]] = []
    if options.theme is not Theme.DEFAULT:
        params.append(("theme", options.theme.value))
    if options.locale != DEFAULT_LOCALE:
        params.append(("locale", options.locale))
    if options.hide_border:
        params.append(("hide_border", "true"))
    if policy.supports_all_commits and options.include_all_commits:
        params.append(("include_all_commits", "true"))
    return params


def build_url(options: CardOptions, view: ViewKind | str = ViewKind.STATS) -> str:
    """Build the image URL for ``view``.

    The identifier parameter always comes first. An empty identifier still
    yields a well-formed URL with an empty value; callers decide whether to
    show it.
    """
    policy = POLICIES[ViewKind.parse(view)]
    query = [f"{policy.primary_param}={_encode(options.identifier)}"]
    query.extend(f"{key}={_encode(value)}" for key, value in optional_params(options, policy))
    return f"{policy.base_url}?{'&'.join(query)}"


def build_stats_url(options: CardOptions) -> str:
    return build_url(options, ViewKind.STATS)


def build_languages_url(options: CardOptions) -> str:
    return build_url(options, ViewKind.LANGUAGES)


def build_streak_url(options: CardOptions) -> str:
    return build_url(options, ViewKind.STREAK)


def markdown_snippet(url: str) -> str:
    return f"![{ALT_TEXT}]({url})"


def html_snippet(url: str) -> str:
    # The URL is embedded verbatim so the snippet matches the copied link.
    return f'<img src="{url}" alt="{ALT_TEXT}" />'
