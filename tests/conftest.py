"""Pytest configuration and shared fixtures."""

import pytest

from taskgenie.domain.entities.ticket import Ticket


@pytest.fixture
def make_ticket():
    def _make(subject="General question", description="Please take a look", **kwargs):
        kwargs.setdefault("id", 1)
        return Ticket(subject=subject, description=description, **kwargs)

    return _make


@pytest.fixture
def deployment_ticket():
    return Ticket(
        id=101,
        subject="Server deployment failed",
        description="Docker container won't start on AWS",
    )


@pytest.fixture
def plugin_ticket():
    return Ticket(
        id=102,
        subject="Contact form plugin broken",
        description="After the last update the plugin shows a blank page",
    )


@pytest.fixture
def vague_ticket():
    return Ticket(id=103, subject="Hello there", description="Please call me back")
