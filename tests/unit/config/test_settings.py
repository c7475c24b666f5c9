"""
Unit tests for pigeon.config.settings — ResolverSettings.
"""

from pathlib import Path

import pytest

from pigeon.config.settings import ResolverSettings


@pytest.mark.unit
def test_defaults():
    s = ResolverSettings()
    assert s.env_prefix == "PIGEON"
    assert s.extensions == (".yml", ".yaml", ".json")
    assert s.slack_token_alias is True
    assert s.config_home is None


@pytest.mark.unit
def test_search_paths_order(tmp_path):
    cwd = tmp_path / "cwd"
    home = tmp_path / "home"
    paths = ResolverSettings().search_paths(cwd=cwd, home=home)
    assert paths == [
        cwd.resolve() / ".pigeon.yml",
        cwd.resolve() / ".pigeon.yaml",
        cwd.resolve() / ".pigeon.json",
        home / ".pigeon" / "config.yml",
        home / ".pigeon" / "config.yaml",
        home / ".pigeon" / "config.json",
    ]


@pytest.mark.unit
def test_search_paths_use_cwd_and_home(project_dir, home_dir):
    paths = ResolverSettings().search_paths()
    assert paths[0] == project_dir.resolve() / ".pigeon.yml"
    assert paths[-1] == home_dir / ".pigeon" / "config.json"


@pytest.mark.unit
def test_from_env_config_home(monkeypatch, tmp_path):
    monkeypatch.setenv("PIGEON_CONFIG_HOME", str(tmp_path / "cfg"))
    s = ResolverSettings.from_env()
    assert s.config_home == tmp_path / "cfg"
    paths = s.search_paths(cwd=tmp_path)
    assert paths[3] == tmp_path / "cfg" / "config.yml"


@pytest.mark.unit
def test_from_env_without_config_home():
    assert ResolverSettings.from_env().config_home is None


@pytest.mark.unit
def test_custom_naming(tmp_path):
    s = ResolverSettings(project_file_stem=".courier", user_config_dir=".courier", extensions=(".json",))
    paths = s.search_paths(cwd=tmp_path, home=tmp_path)
    assert paths == [tmp_path.resolve() / ".courier.json", tmp_path / ".courier" / "config.json"]


@pytest.mark.unit
def test_from_env_explicit_mapping(monkeypatch, tmp_path):
    monkeypatch.setenv("PIGEON_CONFIG_HOME", str(tmp_path / "process"))
    assert ResolverSettings.from_env({}).config_home is None
    s = ResolverSettings.from_env({"PIGEON_CONFIG_HOME": str(tmp_path / "mine")})
    assert s.config_home == tmp_path / "mine"
