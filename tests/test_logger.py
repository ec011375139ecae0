import logging

import pytest

from mu_physics.logger import CustomFilter, LogfileHandler, setup_logger


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.setLevel(level)
    root.handlers[:] = handlers


def test_invalid_level(root_logger):
    null_level = "NOT_ALLOWED"
    with pytest.raises(ValueError):
        setup_logger(level=null_level)


def test_level_from_config(root_logger, isolated_config):
    isolated_config.write_text('[logging]\nlevel = "DEBUG"\n')
    logger = setup_logger()
    assert logger is root_logger
    assert logger.level == logging.DEBUG


def test_default_level(root_logger):
    assert setup_logger().level == logging.INFO


def test_logfile(root_logger, tmp_path):
    logfile = tmp_path / "mu.log"
    setup_logger(level="INFO", logfile=str(logfile))
    logging.getLogger("mu_physics.physics.event").info("hello from the generator")
    for handler in root_logger.handlers:
        handler.flush()
    assert "hello from the generator" in logfile.read_text()

    (handler,) = [h for h in root_logger.handlers if isinstance(h, LogfileHandler)]
    handler.close()
    assert handler.console.file.closed


def test_filter():
    def record(name):
        return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)

    filt = CustomFilter(["numba"])
    assert filt.filter(record("mu_physics.physics.event"))
    assert filt.filter(record("numba.core"))
    assert not filt.filter(record("awkward"))
    assert not CustomFilter().filter(record("numba.core"))
