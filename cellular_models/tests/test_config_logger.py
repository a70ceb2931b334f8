import json
import logging

import pytest

from cellular_models.src.utils import config_loader
from cellular_models.src.utils.logger import get_logger


def test_load_yaml_and_json(tmp_path):
    yaml_path = tmp_path / "config.yaml"
    yaml_path.write_text("allocation_granularity: 16\nlogging:\n  level: debug\n")
    json_path = tmp_path / "config.json"
    json_path.write_text(json.dumps({"max_coordinate": 100}))
    assert config_loader.load_config(str(yaml_path)) == {
        "allocation_granularity": 16,
        "logging": {"level": "debug"},
    }
    assert config_loader.load_config(str(json_path)) == {"max_coordinate": 100}


def test_unsupported_config_format(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("")
    with pytest.raises(ValueError):
        config_loader.load_config(str(path))


def test_missing_model_config_is_empty(tmp_path):
    assert config_loader.load_model_config(tmp_path / "missing.yaml") == {}


def test_shipped_defaults():
    shipped = config_loader.load_model_config()
    assert shipped["allocation_granularity"] == 8
    assert shipped["max_coordinate"] == 2**31 - 1


def test_setters_update_settings(monkeypatch):
    monkeypatch.setattr(config_loader, "MODEL_CONFIG", {})
    monkeypatch.setattr(config_loader, "ALLOCATION_GRANULARITY", 8)
    monkeypatch.setattr(config_loader, "MAX_COORDINATE", 2**31 - 1)
    config_loader.set_allocation_granularity(32)
    config_loader.set_max_coordinate(1000)
    assert config_loader.ALLOCATION_GRANULARITY == 32
    assert config_loader.MAX_COORDINATE == 1000
    assert config_loader.MODEL_CONFIG == {"allocation_granularity": 32, "max_coordinate": 1000}
    with pytest.raises(ValueError):
        config_loader.set_allocation_granularity(0)


def test_print_runtime_config(capsys):
    config_loader.print_runtime_config()
    out = capsys.readouterr().out
    assert "allocation_granularity" in out
    assert "max_coordinate" in out


def test_get_logger_reuses_handlers(tmp_path):
    log_file = tmp_path / "logs" / "models.log"
    logger = get_logger("cellular_models.test_logger", str(log_file))
    again = get_logger("cellular_models.test_logger")
    assert logger is again
    assert len(logger.handlers) == 2
    assert logger.level == logging.INFO
    logger.info("written")
    for handler in logger.handlers:
        handler.flush()
    assert "written" in log_file.read_text()


def test_set_log_level_reaches_existing_loggers(monkeypatch):
    from cellular_models.src.model5d import anisotropic

    monkeypatch.setattr(config_loader, "MODEL_CONFIG", {})
    previous = config_loader.LOG_LEVEL
    try:
        config_loader.set_log_level("debug")
        assert anisotropic.logger.level == logging.DEBUG
        assert config_loader.MODEL_CONFIG == {"logging": {"level": "DEBUG"}}
        assert get_logger("cellular_models.test_level").level == logging.DEBUG
    finally:
        config_loader.set_log_level(previous)
    assert anisotropic.logger.level == logging.getLevelName(previous)
