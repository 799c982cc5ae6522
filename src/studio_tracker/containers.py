"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from studio_tracker.adapters.json_file_record_store import JsonFileRecordStore
from studio_tracker.adapters.supabase_record_store import SupabaseRecordStore
from studio_tracker.config import Settings, parse_names
from studio_tracker.services.clock import Clock, zoned_clock
from studio_tracker.services.records import RecordStore, StudioRecords
from studio_tracker.services.rosters import RosterService
from studio_tracker.services.sales import SaleService
from studio_tracker.services.sessions import SessionService
from studio_tracker.services.stats import StatsService
from studio_tracker.services.studio_settings import StudioSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    records: StudioRecords
    session_service: SessionService
    sale_service: SaleService
    roster_service: RosterService
    studio_settings_service: StudioSettingsService
    stats_service: StatsService


def build_record_store(settings: Settings) -> RecordStore:
    """Create the record store selected by configuration."""
    if settings.record_store == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase record store requires URL and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseRecordStore(client)
    if settings.record_store == "file":
        return JsonFileRecordStore(Path(settings.record_store_path))
    raise ValueError(f"Unknown record store: {settings.record_store}")


def build_container(
    settings: Settings | None = None,
    store: RecordStore | None = None,
    clock: Clock | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    records = StudioRecords(store or build_record_store(resolved_settings))
    resolved_clock = clock or zoned_clock(resolved_settings.timezone)
    studio_settings_service = StudioSettingsService(
        records=records,
        default_photographers=parse_names(resolved_settings.default_photographers),
        default_sellers=parse_names(resolved_settings.default_sellers),
    )
    return AppContainer(
        settings=resolved_settings,
        records=records,
        session_service=SessionService(records, resolved_clock),
        sale_service=SaleService(records, resolved_clock),
        roster_service=RosterService(records),
        studio_settings_service=studio_settings_service,
        stats_service=StatsService(
            records, resolved_clock, studio_name=resolved_settings.studio_name
        ),
    )
