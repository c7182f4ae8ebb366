"""Property-based checks for URL parameter rules across every card view."""

from __future__ import annotations

import sys
from pathlib import Path
from urllib.parse import parse_qsl, urlsplit

from hypothesis import given
from hypothesis import strategies as st

sys.path.append(str(Path(__file__).resolve().parents[1]))

from statscard.core.builder import build_url
from statscard.core.models import LOCALES, CardOptions, Theme, ViewKind
from statscard.core.state import CardSession, CopyKind

IDENTIFIERS = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-",
    min_size=1,
    max_size=39,
)

OPTIONS = st.builds(
    CardOptions,
    identifier=IDENTIFIERS,
    theme=st.sampled_from(list(Theme)),
    locale=st.sampled_from([code for code, _ in LOCALES]),
    hide_border=st.booleans(),
    include_all_commits=st.booleans(),
)

VIEWS = st.sampled_from(list(ViewKind))


def _params(url: str) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def _values(url: str, key: str) -> list[str]:
    return [value for name, value in _params(url) if name == key]


@given(options=OPTIONS, view=VIEWS)
def test_theme_present_only_when_not_default(options: CardOptions, view: ViewKind) -> None:
    themes = _values(build_url(options, view), "theme")
    if options.theme is Theme.DEFAULT:
        assert themes == []
    else:
        assert themes == [options.theme.value]


@given(options=OPTIONS, view=VIEWS)
def test_locale_present_only_when_not_english(options: CardOptions, view: ViewKind) -> None:
    locales = _values(build_url(options, view), "locale")
    if options.locale == "en":
        assert locales == []
    else:
        assert locales == [options.locale]


@given(options=OPTIONS, view=VIEWS)
def test_hide_border_follows_flag(options: CardOptions, view: ViewKind) -> None:
    flags = _values(build_url(options, view), "hide_border")
    assert flags == (["true"] if options.hide_border else [])


@given(options=OPTIONS, view=VIEWS)
def test_include_all_commits_only_on_stats(options: CardOptions, view: ViewKind) -> None:
    flags = _values(build_url(options, view), "include_all_commits")
    if view is ViewKind.STATS and options.include_all_commits:
        assert flags == ["true"]
    else:
        assert flags == []


@given(options=OPTIONS, view=VIEWS)
def test_identifier_is_first_param(options: CardOptions, view: ViewKind) -> None:
    name, value = _params(build_url(options, view))[0]
    assert name == ("user" if view is ViewKind.STREAK else "username")
    assert value == options.identifier


@given(options=OPTIONS, view=VIEWS)
def test_snippets_embed_active_url(options: CardOptions, view: ViewKind) -> None:
    session = CardSession(options=options)
    session.switch_view(view)
    url = session.copy_payload(CopyKind.URL)
    assert url == build_url(options, view)
    assert session.copy_payload(CopyKind.MARKDOWN) == f"![GitHub Stats]({url})"
    assert session.copy_payload(CopyKind.HTML) == f'<img src="{url}" alt="GitHub Stats" />'


@given(options=OPTIONS, views=st.lists(VIEWS, min_size=1, max_size=6))
def test_switching_views_never_touches_options(options: CardOptions, views: list[ViewKind]) -> None:
    session = CardSession(options=options)
    for view in views:
        session.switch_view(view)
    assert session.options == options
    assert session.active_view is views[-1]
