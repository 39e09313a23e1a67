import pytest

from rgb_inspector.config import AppConfig, load_config


def test_defaults_without_environment():
    config = load_config({})
    assert config == AppConfig()
    assert (config.svg_fallback_width, config.svg_fallback_height) == (800, 600)
    assert config.log_level == "INFO"
    assert "*.svg" in config.file_types[0][1]


def test_environment_overrides():
    config = load_config(
        {
            "RGB_INSPECTOR_LOG_LEVEL": " debug ",
            "RGB_INSPECTOR_SVG_WIDTH": "1024",
            "RGB_INSPECTOR_SVG_HEIGHT": "768",
        }
    )
    assert config.log_level == "DEBUG"
    assert config.svg_fallback_width == 1024
    assert config.svg_fallback_height == 768


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_invalid_svg_size(value):
    with pytest.raises(ValueError):
        load_config({"RGB_INSPECTOR_SVG_WIDTH": value})


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("RGB_INSPECTOR_SVG_HEIGHT", "300")
    assert load_config().svg_fallback_height == 300
