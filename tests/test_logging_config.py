import logging

import pytest

from bikefit import setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("bikefit")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_is_idempotent():
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG)
    assert logger.name == "bikefit"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_child_loggers_reach_file(tmp_path):
    log_file = tmp_path / "bikefit.log"
    setup_logging(logging.DEBUG, str(log_file))
    logging.getLogger("bikefit.joint_angles").debug("Skipping Knee: missing RIGHT_ANKLE")
    for handler in logging.getLogger("bikefit").handlers:
        handler.flush()
    assert "Skipping Knee" in log_file.read_text(encoding="utf-8")
