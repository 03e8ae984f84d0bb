import logging

import pytest
from faker import Faker

from pushstream.testing import HandlerRecorder
from tests.helpers import EventHistory

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="function", autouse=True)
def setup_faker():
    Faker.seed(0)


@pytest.fixture(scope="function")
def fake() -> Faker:
    return Faker()


@pytest.fixture(scope="function")
def recorder() -> HandlerRecorder:
    return HandlerRecorder()


@pytest.fixture(scope="function")
def event_history() -> EventHistory:
    return EventHistory()
