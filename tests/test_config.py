"""Tests for configuration helpers."""

from studio_tracker.config import parse_names


def test_parse_names_keeps_order_and_drops_blanks() -> None:
    assert parse_names(" Ramon, Anne,,Ramon ,Gabriel ") == ["Ramon", "Anne", "Gabriel"]


def test_parse_names_handles_missing_value() -> None:
    assert parse_names(None) == []
    assert parse_names("") == []
