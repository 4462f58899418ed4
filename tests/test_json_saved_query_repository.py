"""Tests for JsonSavedQueryRepository."""

import json

from willitrain.domain.entities.saved_query import SavedQuery
from willitrain.infrastructure.repositories.json_saved_query_repository import (
    JsonSavedQueryRepository,
)


def make_query(query_id, location="Central Park"):
    return SavedQuery(
        id=query_id,
        location=location,
        date="2025-07-04",
        time="12:00:00",
        lat="40.7829",
        lon="-73.9654",
        conditions=["rain", "snow", "wind"],
        temperature=78,
        weather_icon="rainy",
    )


def test_empty_when_file_missing(tmp_path):
    repo = JsonSavedQueryRepository(str(tmp_path / "queries.json"))
    assert repo.list_queries() == []


def test_add_puts_newest_first(tmp_path):
    repo = JsonSavedQueryRepository(str(tmp_path / "queries.json"))

    repo.add_query(make_query("a"))
    repo.add_query(make_query("b"))

    assert [q.id for q in repo.list_queries()] == ["b", "a"]
    assert repo.list_queries()[1] == make_query("a")


def test_stored_format_uses_weather_icon_key(tmp_path):
    data_file = tmp_path / "queries.json"
    repo = JsonSavedQueryRepository(str(data_file))

    repo.add_query(make_query("a"))

    stored = json.loads(data_file.read_text(encoding="utf-8"))
    assert stored[0]["weatherIcon"] == "rainy"
    assert stored[0]["conditions"] == ["rain", "snow", "wind"]


def test_delete(tmp_path):
    repo = JsonSavedQueryRepository(str(tmp_path / "queries.json"))
    repo.add_query(make_query("a"))
    repo.add_query(make_query("b"))

    assert repo.delete_query("a") is True
    assert repo.delete_query("missing") is False
    assert [q.id for q in repo.list_queries()] == ["b"]


def test_corrupt_file_lists_as_empty(tmp_path):
    data_file = tmp_path / "queries.json"
    data_file.write_text("{not json", encoding="utf-8")

    assert JsonSavedQueryRepository(str(data_file)).list_queries() == []


def test_creates_parent_directory(tmp_path):
    data_file = tmp_path / "nested" / "queries.json"
    repo = JsonSavedQueryRepository(str(data_file))

    repo.add_query(make_query("a"))

    assert data_file.exists()
