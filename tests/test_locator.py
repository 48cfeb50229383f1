from pathlib import Path

import pytest

from alacycle.config.locator import ConfigLocator
from alacycle.core.errors import ConfigFileNotFound
from alacycle.core.settings import Settings


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("colors: *a\n", encoding="utf-8")
    return path


def test_candidate_order(tmp_path):
    env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg"), "HOME": str(tmp_path / "home")}
    candidates = ConfigLocator(Settings(), env).candidates()
    assert candidates == [
        tmp_path / "xdg" / "alacritty" / "alacritty.yml",
        tmp_path / "xdg" / "alacritty.yml",
        tmp_path / "home" / ".config" / "alacritty" / "alacritty.yml",
        tmp_path / "home" / ".alacritty.yml",
    ]


def test_unset_variables_are_skipped(tmp_path):
    env = {"HOME": str(tmp_path)}
    candidates = ConfigLocator(Settings(), env).candidates()
    assert len(candidates) == 2
    assert ConfigLocator(Settings(), {"XDG_CONFIG_HOME": ""}).candidates() == []


def test_first_existing_wins(tmp_path):
    env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg"), "HOME": str(tmp_path / "home")}
    _touch(tmp_path / "home" / ".alacritty.yml")
    expected = _touch(tmp_path / "xdg" / "alacritty.yml")
    assert ConfigLocator(Settings(), env).locate() == expected


def test_home_fallback(tmp_path):
    expected = _touch(tmp_path / ".alacritty.yml")
    assert ConfigLocator(Settings(), {"HOME": str(tmp_path)}).locate() == expected


def test_app_name_changes_search(tmp_path):
    expected = _touch(tmp_path / ".config" / "myterm" / "myterm.yml")
    locator = ConfigLocator(Settings(app_name="myterm"), {"HOME": str(tmp_path)})
    assert locator.locate() == expected


def test_nothing_found_lists_searched_paths(tmp_path):
    with pytest.raises(ConfigFileNotFound) as exc_info:
        ConfigLocator(Settings(), {"HOME": str(tmp_path)}).locate()
    assert len(exc_info.value.searched) == 2
    assert ".alacritty.yml" in str(exc_info.value)


def test_explicit_path_bypasses_search(tmp_path):
    explicit = _touch(tmp_path / "custom.yml")
    _touch(tmp_path / ".alacritty.yml")
    locator = ConfigLocator(Settings(config_path=explicit), {"HOME": str(tmp_path)})
    assert locator.locate() == explicit


def test_explicit_path_must_exist(tmp_path):
    with pytest.raises(ConfigFileNotFound):
        ConfigLocator(Settings(config_path=tmp_path / "missing.yml"), {}).locate()


def test_settings_from_env(tmp_path):
    settings = Settings.from_env({
        "ALACYCLE_APP": "kitty",
        "ALACYCLE_CONFIG": str(tmp_path / "c.yml"),
        "ALACYCLE_BACKUP": "true",
    })
    assert settings.app_name == "kitty"
    assert settings.config_path == tmp_path / "c.yml"
    assert settings.backup is True

    defaults = Settings.from_env({})
    assert defaults.app_name == "alacritty"
    assert defaults.config_path is None
    assert defaults.backup is False


def test_settings_override_ignores_none():
    settings = Settings(app_name="kitty").override(app_name=None, backup=True)
    assert settings.app_name == "kitty"
    assert settings.backup is True
