import logging

import pytest

from sampo import log


def _reset_loggers():
    for name in (log.CORE_LOGGER_NAME, log.CLIENT_LOGGER_NAME):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def clean_loggers():
    _reset_loggers()
    yield
    _reset_loggers()


def test_logger_names():
    assert log.get_core_logger().name == "SAMPO"
    assert log.get_client_logger().name == "APP"


def test_setup_writes_to_file(clean_loggers, tmp_path):
    path = tmp_path / "Sampo.log"
    assert log.setup_logging(path) is True
    log.get_client_logger().log(log.TRACE, "hello")
    text = path.read_text(encoding="utf-8")
    assert "[TRACE] APP: hello" in text


def test_setup_only_once(clean_loggers, tmp_path):
    assert log.setup_logging(tmp_path / "a.log") is True
    assert log.setup_logging(tmp_path / "b.log") is False
    assert not (tmp_path / "b.log").exists()


def test_level_is_trace(clean_loggers, tmp_path):
    log.setup_logging(tmp_path / "x.log")
    assert log.get_core_logger().isEnabledFor(log.TRACE)
    assert log.get_client_logger().level == log.TRACE


def test_file_is_truncated(clean_loggers, tmp_path):
    path = tmp_path / "Sampo.log"
    path.write_text("old content\n", encoding="utf-8")
    log.setup_logging(path)
    log.get_core_logger().info("fresh")
    text = path.read_text(encoding="utf-8")
    assert "old content" not in text
    assert "SAMPO: fresh" in text


def test_console_output(clean_loggers, tmp_path, capsys):
    log.setup_logging(tmp_path / "c.log")
    log.get_client_logger().warning("shown")
    assert "APP: shown" in capsys.readouterr().out