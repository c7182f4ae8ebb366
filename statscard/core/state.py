"""Session state: the current options plus the active card view."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

import structlog

from . import builder
from .models import CardOptions, ViewKind

logger = structlog.get_logger(__name__)


class CopyKind(str, Enum):
    MARKDOWN = "Markdown"
    URL = "URL"
    HTML = "HTML"

    @classmethod
    def parse(cls, value: "CopyKind | str") -> "CopyKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown copy format {value!r}; expected one of: {valid}") from None


def _initial_priority() -> Dict[ViewKind, bool]:
    return {view: view is ViewKind.STATS for view in ViewKind}


@dataclass
class ViewSelector:
    """Tracks which card view is active.

    The active view's image loads eagerly; the other two load lazily.
    """

    active: ViewKind = ViewKind.STATS
    load_priority: Dict[ViewKind, bool] = field(default_factory=_initial_priority)

    def switch(self, view: ViewKind | str) -> ViewKind:
        view = ViewKind.parse(view)
        self.active = view
        self.load_priority = {kind: kind is view for kind in ViewKind}
        logger.debug("view_switched", view=view.value)
        return view

    def loading_hint(self, view: ViewKind | str) -> str:
        return "eager" if self.load_priority[ViewKind.parse(view)] else "lazy"


@dataclass
class CardSession:
    options: CardOptions = field(default_factory=CardOptions)
    selector: ViewSelector = field(default_factory=ViewSelector)

    @property
    def active_view(self) -> ViewKind:
        return self.selector.active

    def update(self, **changes: object) -> CardOptions:
        self.options = self.options.replace(**changes)
        return self.options

    def switch_view(self, view: ViewKind | str) -> ViewKind:
        return self.selector.switch(view)

    def can_render(self) -> bool:
        return bool(self.options.identifier.strip())

    def url(self, view: Optional[ViewKind | str] = None) -> str:
        return builder.build_url(self.options, self.active_view if view is None else view)

    def markdown(self) -> str:
        return builder.markdown_snippet(self.url())

    def html(self) -> str:
        return builder.html_snippet(self.url())

    def copy_payload(self, kind: CopyKind | str) -> str:
        kind = CopyKind.parse(kind)
        if kind is CopyKind.MARKDOWN:
            return self.markdown()
        if kind is CopyKind.HTML:
            return self.html()
        return self.url()
