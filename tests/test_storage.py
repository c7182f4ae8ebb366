from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from statscard.core.storage import DEFAULT_SETTINGS, SettingsManager, app_data_dir


def test_defaults_written_on_first_load(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    settings = SettingsManager(path)
    assert settings.get("app_theme") == "light"
    assert settings.get_int("copy_feedback_ms", 0) == 2000
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_SETTINGS


def test_set_persists_value(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    SettingsManager(path).set("app_theme", "dark")
    assert SettingsManager(path).get("app_theme") == "dark"


def test_corrupt_file_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    settings = SettingsManager(path)
    assert settings.get("preview_debounce_ms") == "300"


def test_get_int_falls_back_on_bad_value(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"copy_feedback_ms": "soon"}), encoding="utf-8")
    assert SettingsManager(path).get_int("copy_feedback_ms", 1500) == 1500


def test_env_overrides_app_theme(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STATSCARD_APP_THEME", "dark")
    assert SettingsManager(tmp_path / "settings.json").get("app_theme") == "dark"


def test_app_data_dir_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "data"
    monkeypatch.setenv("STATSCARD_DATA_DIR", str(target))
    assert app_data_dir() == target
    assert target.is_dir()


def test_explicit_set_beats_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STATSCARD_APP_THEME", "dark")
    settings = SettingsManager(tmp_path / "settings.json")
    assert settings.get("app_theme", "light") == "dark"
    settings.set("app_theme", "light")
    assert settings.get("app_theme", "light") == "light"
