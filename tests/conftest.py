"""Общие фикстуры тестов."""

from typing import Iterator, List

import pytest
from loguru import logger

from rangebounds import LOGGER_NAME


@pytest.fixture
def loguru_messages() -> Iterator[List[str]]:
    """Включает логирование пакета и собирает сообщения loguru в список."""
    messages: List[str] = []
    logger.enable(LOGGER_NAME)
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
        logger.disable(LOGGER_NAME)
