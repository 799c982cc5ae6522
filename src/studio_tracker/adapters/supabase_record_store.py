"""Supabase-backed record store."""

from dataclasses import dataclass

from supabase import Client

from studio_tracker.services.records import RecordStore

TABLE_NAME = "studio_records"


@dataclass
class SupabaseRecordStore(RecordStore):
    """Stores each collection as a jsonb value in one row per key."""

    client: Client

    def get(self, name: str) -> object | None:
        """Return the stored value for a key."""
        response = (
            self.client.table(TABLE_NAME)
            .select("value")
            .eq("key", name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set(self, name: str, value: object) -> None:
        """Insert or replace the value for a key."""
        self.client.table(TABLE_NAME).upsert(
            {"key": name, "value": value}, on_conflict="key"
        ).execute()

    def clear(self) -> None:
        """Delete every stored key."""
        self.client.table(TABLE_NAME).delete().neq("key", "").execute()
