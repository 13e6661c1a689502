from unittest.mock import MagicMock

import pytest

from binbot.config import ReminderSettings


@pytest.fixture
def settings():
    return ReminderSettings(
        lookup_url="https://bins.example/lookup.txt",
        notification_url="https://notify.example/message",
        address_code="100012345",
    )


@pytest.fixture
def make_session():
    def _make(text="", exc=None):
        session = MagicMock()
        if exc is not None:
            session.get.side_effect = exc
        else:
            response = MagicMock()
            response.text = text
            session.get.return_value = response
        return session
    return _make
