"""Data models for the stats card builder."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple


class Theme(str, Enum):
    """Card themes understood by the image endpoints."""

    DEFAULT = "default"
    TRANSPARENT = "transparent"
    DARK = "dark"
    RADICAL = "radical"
    MERKO = "merko"
    GRUVBOX = "gruvbox"
    TOKYONIGHT = "tokyonight"
    ONEDARK = "onedark"
    COBALT = "cobalt"
    SYNTHWAVE = "synthwave"
    HIGHCONTRAST = "highcontrast"
    DRACULA = "dracula"

    @classmethod
    def parse(cls, value: "Theme | str") -> "Theme":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown theme {value!r}; expected one of: {valid}") from None


class ViewKind(str, Enum):
    """The three card types a URL can be generated for."""

    STATS = "stats"
    LANGUAGES = "languages"
    STREAK = "streak"

    @classmethod
    def parse(cls, value: "ViewKind | str") -> "ViewKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(v.value for v in cls)
            raise ValueError(f"Unknown view {value!r}; expected one of: {valid}") from None


DEFAULT_LOCALE = "en"

# (code, label) in the order shown by the language picker
LOCALES: List[Tuple[str, str]] = [
    ("en", "English"),
    ("tr", "Türkçe"),
    ("es", "Español"),
    ("fr", "Français"),
    ("de", "Deutsch"),
    ("zh-cn", "简体中文"),
    ("ja", "日本語"),
    ("pt-br", "Português (Brasil)"),
    ("ru", "Русский"),
    ("ko", "한국어"),
    ("ar", "العربية"),
]


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"Expected a boolean, got {value!r}")


@dataclass(frozen=True)
class CardOptions:
    """User-selected card options.

    Instances are immutable; every edit produces a new value through
    :meth:`replace`.
    """

    identifier: str = ""
    theme: Theme = Theme.DEFAULT
    locale: str = DEFAULT_LOCALE
    hide_border: bool = False
    include_all_commits: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "theme", Theme.parse(self.theme))

    def replace(self, **changes: object) -> "CardOptions":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "username": self.identifier,
            "theme": self.theme.value,
            "locale": self.locale,
            "hideBorder": self.hide_border,
            "includeAllCommits": self.include_all_commits,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CardOptions":
        return cls(
            identifier=data.get("username", ""),
            theme=Theme.parse(data.get("theme", Theme.DEFAULT)),
            locale=data.get("locale", DEFAULT_LOCALE),
            hide_border=_as_bool(data.get("hideBorder", False)),
            include_all_commits=_as_bool(data.get("includeAllCommits", False)),
        )
