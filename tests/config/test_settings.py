"""Tests for MenagerieSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from menagerie.config.settings import MenagerieSettings
from menagerie.domain.types import ParsePolicy


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MENAGERIE_CONFIG", raising=False)
    monkeypatch.delenv("MENAGERIE_COLLECT__PARSE_POLICY", raising=False)
    monkeypatch.delenv("MENAGERIE_COLLECT__SENTINEL", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = MenagerieSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.collect.parse_policy is ParsePolicy.RETRY
        assert settings.prompts.name == "Name: "

    def test_frozen(self, tmp_path: Path) -> None:
        settings = MenagerieSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "menagerie.toml"
        toml.write_text('[collect]\nparse_policy = "abort"\n[prompts]\nname = "Pet name? "\n')
        settings = MenagerieSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml
        assert settings.collect.parse_policy is ParsePolicy.ABORT
        assert settings.prompts.name == "Pet name? "
        assert settings.prompts.age == "Age: "  # default preserved

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[collect]\nsentinel = "done"\n')
        settings = MenagerieSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.collect.sentinel == "done"
        assert settings.config_path == custom

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="not found"):
            MenagerieSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "menagerie.toml").write_text("[collect\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            MenagerieSettings.from_cli(start=tmp_path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / "menagerie.toml").write_text('[collect]\nparse_policy = "shrug"\n')
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            MenagerieSettings.from_cli(start=tmp_path)


class TestEnvAndFlags:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "menagerie.toml").write_text('[collect]\nsentinel = "done"\n')
        monkeypatch.setenv("MENAGERIE_COLLECT__SENTINEL", "stop")
        settings = MenagerieSettings.from_cli(start=tmp_path)
        assert settings.collect.sentinel == "stop"

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = MenagerieSettings.from_cli(start=tmp_path, json_output=True, quiet=True)
        assert settings.json_output is True
        assert settings.quiet is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "menagerie.toml").write_text("quiet = true\n")
        settings = MenagerieSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False
