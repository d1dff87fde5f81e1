import pytest

from typebox.config import DEFAULT_TEXT, ConfigError, TextboxSettings, load_config


def test_load_config_overrides(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("data_root: /tmp/data\ntextbox:\n  columns: 30\n", encoding="utf-8")
    monkeypatch.setenv("TYPEBOX_CONFIG", str(config_path))

    config = load_config()
    assert config["data_root"] == "/tmp/data"
    assert config["textbox"]["columns"] == 30
    assert config["textbox"]["rows"] == 5

    monkeypatch.delenv("TYPEBOX_CONFIG", raising=False)


def test_explicit_path_wins_over_env(tmp_path, monkeypatch):
    env_path = tmp_path / "env.yaml"
    env_path.write_text("log_level: DEBUG\n", encoding="utf-8")
    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("log_level: WARNING\n", encoding="utf-8")
    monkeypatch.setenv("TYPEBOX_CONFIG", str(env_path))

    assert load_config(explicit)["log_level"] == "WARNING"


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml_raises(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("textbox: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(bad)


def test_settings_from_config_uses_builtin_text():
    settings = TextboxSettings.from_config({"textbox": {"columns": 40, "rows": 3, "show_typed": True}})
    assert settings.columns == 40
    assert settings.rows == 3
    assert settings.show_typed
    assert settings.text == DEFAULT_TEXT


@pytest.mark.parametrize("textbox", [{"columns": 0}, {"rows": -2}, {"columns": "wide"}, {"rows": True}])
def test_settings_reject_bad_dimensions(textbox):
    with pytest.raises(ConfigError):
        TextboxSettings.from_config({"textbox": textbox})


def test_settings_reject_non_mapping_textbox():
    with pytest.raises(ConfigError):
        TextboxSettings.from_config({"textbox": 12})
