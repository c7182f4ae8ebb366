"""Preview page rendering helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from jinja2 import DictLoader, Environment, select_autoescape

from .models import ViewKind
from .state import CardSession

PLACEHOLDER_TEXT = "Enter a username to preview"

PREVIEW_ALT: Dict[ViewKind, str] = {
    ViewKind.STATS: "GitHub Stats",
    ViewKind.LANGUAGES: "Top Languages",
    ViewKind.STREAK: "GitHub Streak",
}

PREVIEW_TEMPLATE = """\
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ alt }}</title>
<style>
  html, body { margin: 0; height: 100%; }
  body {
    display: flex;
    align-items: center;
    justify-content: center;
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
    background: {{ colors.background }};
    color: {{ colors.muted }};
  }
  .frame {
    box-sizing: border-box;
    width: 100%;
    min-height: 200px;
    margin: 12px;
    border-radius: 8px;
    display: flex;
    align-items: center;
    justify-content: center;
  }
  .frame.card { background: {{ colors.surface }}; overflow: hidden; }
  .frame.empty { border: 2px dashed {{ colors.border }}; }
  .frame img { width: 100%; height: auto; }
</style>
</head>
<body>
{% if url %}
  <div class="frame card">
    <img src="{{ url }}" alt="{{ alt }}" loading="{{ loading }}">
  </div>
{% else %}
  <div class="frame empty"><p>{{ placeholder }}</p></div>
{% endif %}
</body>
</html>
"""

LIGHT_COLORS = {
    "background": "#ffffff",
    "surface": "#f4f4f5",
    "border": "#e4e4e7",
    "muted": "#71717a",
}
DARK_COLORS = {
    "background": "#09090b",
    "surface": "#18181b",
    "border": "#27272a",
    "muted": "#a1a1aa",
}


def _env() -> Environment:
    return Environment(
        loader=DictLoader({"preview.html.j2": PREVIEW_TEMPLATE}),
        autoescape=select_autoescape(["html", "xml", "html.j2"]),
    )


def render_preview(session: CardSession, view: ViewKind | str, dark: bool = False) -> str:
    """Return the preview document for one card view.

    The image is left out entirely while the session has no identifier.
    """
    view = ViewKind.parse(view)
    tpl = _env().get_template("preview.html.j2")
    return tpl.render(
        url=session.url(view) if session.can_render() else "",
        alt=PREVIEW_ALT[view],
        loading=session.selector.loading_hint(view),
        placeholder=PLACEHOLDER_TEXT,
        colors=DARK_COLORS if dark else LIGHT_COLORS,
    )


def render_previews(session: CardSession, output_dir: str | Path, dark: bool = False) -> Dict[ViewKind, Path]:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    paths: Dict[ViewKind, Path] = {}
    for view in ViewKind:
        path = output_dir / f"{view.value}.html"
        path.write_text(render_preview(session, view, dark=dark), encoding="utf-8")
        paths[view] = path
    return paths
