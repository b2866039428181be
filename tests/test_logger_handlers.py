import logging
import sys

from tauview import logger as tv_logger


def _stderr_handlers(base: logging.Logger) -> list[logging.Handler]:
    return [
        h
        for h in base.handlers
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
    ]


def test_setup_logger_idempotent_handlers():
    """Calling setup_logger() repeatedly should leave exactly one stderr StreamHandler."""
    base = tv_logger.setup_logger(level=logging.DEBUG)
    _ = tv_logger.setup_logger(level=logging.DEBUG)

    assert len(_stderr_handlers(base)) == 1
    assert base.propagate is False


def test_env_level_overrides_argument(monkeypatch):
    monkeypatch.setenv("TAUVIEW_LOG_LEVEL", "error")
    base = tv_logger.setup_logger(level=logging.DEBUG)
    assert base.level == logging.ERROR

    monkeypatch.delenv("TAUVIEW_LOG_LEVEL")
    base = tv_logger.setup_logger(level=logging.INFO)
    assert base.level == logging.INFO


def test_category_filter_uses_logger_suffix(monkeypatch):
    monkeypatch.setenv("TAUVIEW_LOG_CATS", "scanner, backend")
    base = tv_logger.setup_logger()
    handler = _stderr_handlers(base)[0]

    def _record(name: str) -> logging.LogRecord:
        return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)

    assert handler.filter(_record("tauview.scanner"))
    assert handler.filter(_record("tauview.backend"))
    assert not handler.filter(_record("tauview.engine"))

    monkeypatch.delenv("TAUVIEW_LOG_CATS")
    tv_logger.setup_logger()
    assert handler.filter(_record("tauview.engine"))


def test_get_logger_returns_child():
    child = tv_logger.get_logger("cursor")
    assert child.name == "tauview.cursor"
    assert tv_logger.get_logger().name == "tauview"
