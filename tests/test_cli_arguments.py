import logging
import configparser
from unittest.mock import patch

import pytest

import collection_manager


def test_defaults():
    args = collection_manager.parse_arguments([])

    assert not args.version
    assert not args.demo
    assert args.log_level is None
    assert args.config is None


def test_log_level_is_case_insensitive():
    args = collection_manager.parse_arguments(["--log-level", "debug", "--demo"])

    assert args.log_level == "DEBUG"
    assert args.demo


def test_invalid_log_level_exits():
    with pytest.raises(SystemExit):
        collection_manager.parse_arguments(["--log-level", "LOUD"])


def test_version_prints_and_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        collection_manager.main(["--version"])

    assert exc_info.value.code == 0
    assert "Music Collection Manager" in capsys.readouterr().out


def test_create_config_applies_log_level_override(tmp_path):
    config_path = tmp_path / "config.ini"
    args = collection_manager.parse_arguments(["--config", str(config_path), "--log-level", "warning"])

    config = collection_manager._create_config(args)

    assert config.config_path == str(config_path)
    assert config.log_level == logging.WARNING
    assert config.session_log_level == "WARNING"
    assert config.log_level_str == "INFO"


def test_log_level_override_is_not_saved(tmp_path):
    config_path = tmp_path / "config.ini"
    args = collection_manager.parse_arguments(["--config", str(config_path), "--log-level", "debug"])

    config = collection_manager._create_config(args)
    config.save()

    parser = configparser.ConfigParser(interpolation=None)
    parser.read(str(config_path), encoding="utf-8-sig")
    assert parser.get("General", "log_level") == "INFO"
    assert config.log_level == logging.DEBUG


def test_main_runs_gui_with_demo_flag(tmp_path):
    config_path = tmp_path / "config.ini"

    with patch("collection_manager._setup_logging_early", return_value=(str(tmp_path / "app.log"), logging.getLogger())), \
            patch("utils.exception_handler.install_global_exception_handler"), \
            patch("collection_manager._run_gui", return_value=0) as run_gui:
        with pytest.raises(SystemExit) as exc_info:
            collection_manager.main(["--config", str(config_path), "--demo"])

    assert exc_info.value.code == 0
    config, log_file_path, demo = run_gui.call_args[0]
    assert config.config_path == str(config_path)
    assert demo is True
