import json

from digraph_editor.config import EditorSettings, load_config, load_settings, get_config_path


def test_defaults_without_file_or_env(tmp_path):
    settings = load_settings(config_path=tmp_path / "config.json", environ={})
    assert settings == EditorSettings()


def test_config_file_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"port": 9000, "title": "My Graphs", "dark_mode": False}), encoding="utf-8")

    settings = load_settings(config_path=path, environ={})
    assert settings.port == 9000
    assert settings.title == "My Graphs"
    assert settings.dark_mode is False


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"port": 9000, "log_level": "debug"}), encoding="utf-8")

    settings = load_settings(config_path=path, environ={
        "DIGRAPH_EDITOR_PORT": "9100",
        "DIGRAPH_EDITOR_DARK_MODE": "off",
    })
    assert settings.port == 9100
    assert settings.dark_mode is False
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"canvas_width": 800}), encoding="utf-8")

    settings = load_settings(config_path=path, environ={
        "DIGRAPH_EDITOR_CANVAS_WIDTH": "wide",
        "DIGRAPH_EDITOR_PORT": "-1",
        "DIGRAPH_EDITOR_LOG_LEVEL": "loud",
    })
    # bad env value falls through to config.json, then to defaults
    assert settings.canvas_width == 800
    assert settings.port == 8080
    assert settings.log_level == "INFO"
    assert "Ignoring" in caplog.text


def test_canvas_smaller_than_margin_resets(tmp_path):
    settings = load_settings(config_path=tmp_path / "none.json", environ={
        "DIGRAPH_EDITOR_CANVAS_WIDTH": "40",
    })
    assert settings.canvas_width == 600
    assert settings.vertex_margin == 30


def test_unreadable_config_is_empty(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(path) == {}

    path.write_text(json.dumps([1, 2]), encoding="utf-8")
    assert load_config(path) == {}


def test_default_config_path_is_project_root():
    path = get_config_path()
    assert path.name == "config.json"
    assert (path.parent / "digraph_editor" / "config.py").exists()
