"""Tests for the SQLModel-backed state gateway."""

import logging
from contextlib import contextmanager

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from habitweek.errors import StorageError
from habitweek.infra.persistence import SQLModelStateGateway
from habitweek.models import StateBlob

SAMPLE = {"habits": [{"id": "a", "name": "Run", "log": {"2024-01-15": True}}]}


@contextmanager
def _broken_session():
    raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))
    yield  # pragma: no cover


def test_load_without_stored_state_is_empty(gateway):
    assert gateway.load() == {"habits": []}


def test_save_then_load(gateway):
    assert gateway.save(SAMPLE) is True

    assert gateway.load() == SAMPLE


def test_save_overwrites_single_row(gateway, session_factory):
    gateway.save(SAMPLE)
    gateway.save({"habits": []})

    with session_factory() as session:
        rows = session.exec(select(StateBlob)).all()
    assert len(rows) == 1
    assert rows[0].key == "habitTrackerState"
    assert gateway.load() == {"habits": []}


def test_keys_are_isolated(session_factory):
    first = SQLModelStateGateway(session_factory, key="first")
    second = SQLModelStateGateway(session_factory, key="second")

    first.save(SAMPLE)

    assert second.load() == {"habits": []}


def test_unicode_names_survive(gateway):
    data = {"habits": [{"id": "a", "name": "Méditer 🧘", "log": {}}]}

    gateway.save(data)

    assert gateway.load() == data


def test_corrupt_json_falls_back_to_empty(gateway, caplog):
    gateway.write_raw("{not json")

    with caplog.at_level(logging.WARNING, logger="habitweek"):
        assert gateway.load() == {"habits": []}
    assert "not valid JSON" in caplog.text


def test_wrong_shape_falls_back_to_empty(gateway):
    gateway.write_raw('{"notHabits": []}')

    assert gateway.load() == {"habits": []}


def test_database_failure_on_load_falls_back_to_empty(caplog):
    gateway = SQLModelStateGateway(_broken_session)

    with caplog.at_level(logging.WARNING, logger="habitweek"):
        assert gateway.load() == {"habits": []}
    assert "Error loading state" in caplog.text


def test_read_raw_wraps_database_errors():
    gateway = SQLModelStateGateway(_broken_session)

    with pytest.raises(StorageError) as excinfo:
        gateway.read_raw()

    assert isinstance(excinfo.value.__cause__, OperationalError)


def test_failed_save_reports_false_and_keeps_previous(gateway, monkeypatch):
    gateway.save(SAMPLE)

    def fail(_payload):
        raise StorageError("disk full")

    monkeypatch.setattr(gateway, "write_raw", fail)

    assert gateway.save({"habits": []}) is False
    monkeypatch.undo()
    assert gateway.load() == SAMPLE


def test_unserializable_state_is_not_saved(gateway):
    assert gateway.save({"habits": [{"id": "a", "log": {"x": {1, 2}}}]}) is False
    assert gateway.load() == {"habits": []}
