from loguru import logger

from storefront.config import get_config, set_config_for_test
from storefront.logging_config import get_logger, reset_logging


def test_defaults(monkeypatch):
    for var in ["DATA_SOURCE", "DATA_DIR", "DATA_BASE_URL", "LOG_LEVEL", "DEFAULT_PAGE"]:
        monkeypatch.delenv(var, raising=False)
    set_config_for_test()
    config = get_config()
    assert config.data_source == "file"
    assert config.data_dir == "data"
    assert config.data_base_url is None
    assert config.default_page == "dashboard"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATA_SOURCE", "http")
    monkeypatch.setenv("DATA_BASE_URL", "https://example.org/data")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
    set_config_for_test()
    config = get_config()
    assert config.data_source == "http"
    assert config.data_base_url == "https://example.org/data"
    assert config.http_timeout == 2.5


def test_set_config_for_test_replaces_singleton():
    set_config_for_test(app_title="Test Board")
    assert get_config().app_title == "Test Board"
    assert get_config() is get_config()


def test_logger_is_bound_to_name():
    set_config_for_test(log_level="INFO")
    reset_logging()
    messages = []
    sink_id = logger.add(lambda m: messages.append(m.record), level="INFO")
    try:
        get_logger("storefront.tests").info("hello")
        get_logger("storefront.tests").debug("hidden from this sink")
    finally:
        logger.remove(sink_id)
    assert [r["message"] for r in messages] == ["hello"]
    assert messages[0]["extra"]["name"] == "storefront.tests"
