"""Pytest configuration and fixtures."""

import pytest

from justact.ledger import Session


@pytest.fixture
def session() -> Session:
    """An empty session."""
    return Session()


@pytest.fixture
def populated_session() -> Session:
    """Two statements, one agreement, clock at 10, one enactment by carol."""
    s = Session()
    s.declare("alice", "hello")
    s.declare("bob", "world")
    s.bind(0, 10)
    s.set_time(10)
    s.enact("carol", 0, {0})
    return s
