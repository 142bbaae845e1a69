import pytest

from elapsed.config import ByteOrder, load_config
from elapsed.errors import ConfigError


def test_defaults():
    config = load_config()
    assert config.directory == "/tmp"
    assert config.default_name == "timer$tart"
    assert config.extension == "elapsed"
    assert config.byte_order is ByteOrder.little
    assert config.max_name_length == 2048


def test_directory_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ELAPSED_DIR", str(tmp_path))
    assert load_config().directory == str(tmp_path)


def test_yaml_file_and_overrides(tmp_path):
    config_file = tmp_path / "elapsed.yaml"
    config_file.write_text("default_name: job\nbyte_order: big\n")

    config = load_config(config_file, extension="timer")
    assert config.default_name == "job"
    assert config.byte_order is ByteOrder.big
    assert config.extension == "timer"


def test_config_file_from_environment(monkeypatch, tmp_path):
    config_file = tmp_path / "elapsed.yaml"
    config_file.write_text("default_name: from-env\n")
    monkeypatch.setenv("ELAPSED_CONFIG", str(config_file))
    assert load_config().default_name == "from-env"


@pytest.mark.parametrize(
    "overrides",
    [
        {"byte_order": "middle"},
        {"max_name_length": 0},
        {"log_level": "chatty"},
        {"directory": ""},
    ],
)
def test_invalid_values(overrides):
    with pytest.raises(ConfigError) as exc_info:
        load_config(**overrides)
    assert exc_info.value.exit_code == 1


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")
