from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from statscard.core.generator import PLACEHOLDER_TEXT, render_preview, render_previews
from statscard.core.models import CardOptions, ViewKind
from statscard.core.state import CardSession


def test_preview_shows_placeholder_without_username() -> None:
    html = render_preview(CardSession(), ViewKind.STATS)
    assert PLACEHOLDER_TEXT in html
    assert "<img" not in html


def test_preview_embeds_escaped_url_and_loading_hint() -> None:
    session = CardSession(options=CardOptions(identifier="octocat", theme="dracula"))
    html = render_preview(session, ViewKind.STATS)
    assert 'src="https://github-readme-stats.vercel.app/api?username=octocat&amp;theme=dracula"' in html
    assert 'alt="GitHub Stats"' in html
    assert 'loading="eager"' in html

    streak = render_preview(session, "streak")
    assert 'alt="GitHub Streak"' in streak
    assert 'loading="lazy"' in streak


def test_preview_dark_palette() -> None:
    html = render_preview(CardSession(), ViewKind.LANGUAGES, dark=True)
    assert "#09090b" in html


def test_render_previews_writes_one_page_per_view(tmp_path: Path) -> None:
    session = CardSession(options=CardOptions(identifier="octocat"))
    session.switch_view(ViewKind.LANGUAGES)
    paths = render_previews(session, tmp_path / "out")
    assert set(paths) == set(ViewKind)
    languages = paths[ViewKind.LANGUAGES].read_text(encoding="utf-8")
    assert 'alt="Top Languages"' in languages
    assert 'loading="eager"' in languages
    assert 'loading="lazy"' in paths[ViewKind.STATS].read_text(encoding="utf-8")
