import logging

import pytest

from user_catalog.config import AppConfig
from user_catalog.utils import logging as logging_utils


def test_app_config_defaults_without_environment():
    config = AppConfig.from_env({})

    assert config == AppConfig()
    assert config.window_title == "Usuarios"
    assert config.log_level == "INFO"


def test_app_config_reads_overrides():
    config = AppConfig.from_env(
        {
            "USER_CATALOG_WINDOW_TITLE": "Equipo",
            "USER_CATALOG_LOG_LEVEL": "warning",
        }
    )

    assert config.window_title == "Equipo"
    assert config.log_level == "WARNING"


def test_app_config_debug_flag_forces_debug():
    assert AppConfig.from_env({"USER_CATALOG_DEBUG": "yes"}).log_level == "DEBUG"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("error", logging.ERROR),
        ("15", 15),
        ("", logging.INFO),
        ("nonsense", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_coerce_level(value, expected):
    assert logging_utils.coerce_level(value, logging.INFO) == expected


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_configure_root_uses_default_without_overrides(restore_root_level):
    level = logging_utils.configure_root("WARNING", environ={})

    assert level == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_configure_root_env_level_wins(restore_root_level):
    level = logging_utils.configure_root(
        logging.INFO, environ={"USER_CATALOG_LOG_LEVEL": "ERROR"}
    )

    assert level == logging.ERROR


def test_configure_root_debug_flag(restore_root_level):
    level = logging_utils.configure_root(logging.INFO, environ={"USER_CATALOG_DEBUG": "1"})

    assert level == logging.DEBUG
    assert logging_utils.level_name(level) == "DEBUG"
