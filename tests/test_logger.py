import logging

import pytest

from classroom.logger import get_logger, logging_handler, package_logger


def test__get_logger__is_package_child() -> None:
    logger = get_logger("classroom.services.exercise_info")

    assert logger.name == "classroom.services.exercise_info"
    assert logger.getEffectiveLevel() == package_logger.level


def test__get_logger__single_handler_without_propagation() -> None:
    get_logger("classroom.services.exercise_info")
    get_logger("classroom.services.exercise_info")

    assert package_logger.handlers == [logging_handler]
    assert package_logger.propagate is False
    assert not get_logger("classroom.services.exercise_info").handlers


def test__get_logger__not_duplicated_by_root_handler(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        get_logger("classroom.test").warning("hello")

    assert "hello" not in caplog.text
