"""Tests for container wiring."""

from pathlib import Path

import pytest

from studio_tracker.adapters.json_file_record_store import JsonFileRecordStore
from studio_tracker.config import Settings
from studio_tracker.containers import build_container, build_record_store


def test_build_container_creates_services(tmp_path: Path) -> None:
    settings = Settings(record_store_path=str(tmp_path / "records.json"))

    container = build_container(settings)

    assert isinstance(container.records.store, JsonFileRecordStore)
    assert container.stats_service.studio_name == "ALCHYMIST"
    assert container.studio_settings_service.default_sellers == ["Ingrid", "Wiliam"]


def test_build_record_store_requires_supabase_credentials() -> None:
    with pytest.raises(ValueError):
        build_record_store(Settings(record_store="supabase"))


def test_build_record_store_rejects_unknown_backend() -> None:
    with pytest.raises(ValueError):
        build_record_store(Settings(record_store="redis"))
