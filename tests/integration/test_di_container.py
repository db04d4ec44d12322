"""Integration tests for the dependency injection container."""

import pytest

from trainer.config import reset_config
from trainer.di_container import DIContainer


@pytest.fixture
def container(monkeypatch):
    monkeypatch.setenv("TRIADS_DEFAULT_GENRE", "jazz_triplet")
    reset_config()
    yield DIContainer()
    reset_config()


def test_session_shares_engine(container):
    session = container.get_practice_session()

    assert session is container.get_practice_session()
    assert session.engine is container.get_pattern_engine()
    assert session.genre.id == "jazz_triplet"


def test_reset_builds_new_instances(container):
    engine = container.get_pattern_engine()
    container.reset()
    assert container.get_pattern_engine() is not engine
