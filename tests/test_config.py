import logging

from nebula_userprops.utils.config import load_settings, load_yaml_config
from nebula_userprops.utils.logger import get_logger, setup_logger


def test_settings_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = load_settings(tmp_path / "missing.yaml")
    assert settings.LOCATION is None
    assert settings.ENCODING == "utf-8"
    assert settings.HTTP_TIMEOUT == 10.0


def test_settings_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NEBULA_USERS_LOCATION", "file:/etc/nebula/users.properties")
    monkeypatch.setenv("NEBULA_USERS_LOG_LEVEL", "DEBUG")
    settings = load_settings(tmp_path / "missing.yaml")
    assert settings.LOCATION == "file:/etc/nebula/users.properties"
    assert settings.LOG_LEVEL == "DEBUG"


def test_yaml_section_overrides_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NEBULA_USERS_LOCATION", "from-env.properties")
    config = tmp_path / "serviceconfig.yaml"
    config.write_text(
        "users:\n"
        "  location: classpath:myapp/config/users.properties\n"
        "  http_timeout: 3\n",
        encoding="utf-8",
    )
    assert load_yaml_config(config)["users"]["http_timeout"] == 3

    settings = load_settings(config)
    assert settings.LOCATION == "classpath:myapp/config/users.properties"
    assert settings.HTTP_TIMEOUT == 3.0


def test_yaml_without_users_section(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "serviceconfig.yaml"
    config.write_text("server:\n  port: 5000\n", encoding="utf-8")
    assert load_settings(config).LOCATION is None


def test_setup_logger_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "users.log"
    logger = setup_logger("nebula_userprops.test_file", with_console=False, level="DEBUG", log_file=log_file)
    try:
        logger.debug("loaded %d users", 3)
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "| DEBUG | nebula_userprops.test_file | loaded 3 users" in content
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


def test_setup_logger_replaces_handlers():
    logger = setup_logger("nebula_userprops.test_console")
    logger = setup_logger("nebula_userprops.test_console", level=logging.WARNING)
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_get_logger_uses_settings_level(monkeypatch):
    from nebula_userprops.utils import config

    monkeypatch.setattr(config.settings, "LOG_LEVEL", "ERROR")
    logger = get_logger("nebula_userprops.test_settings")
    assert logger.level == logging.ERROR
