"""Photographer and seller rosters."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from studio_tracker.domain.errors import NotFoundError, ValidationError
from studio_tracker.services.records import StudioRecords

_logger = logging.getLogger(__name__)


@dataclass
class RosterService:
    """Adds and removes roster names. Removal never touches sessions or sales."""

    records: StudioRecords

    def list_photographers(self) -> list[str]:
        return self.records.load_photographers() or []

    def list_sellers(self) -> list[str]:
        return self.records.load_sellers() or []

    def add_photographer(self, name: str) -> list[str]:
        return _add_name(
            self.list_photographers(),
            name,
            "photographer",
            self.records.save_photographers,
        )

    def remove_photographer(self, name: str) -> list[str]:
        return _remove_name(
            self.list_photographers(),
            name,
            "photographer",
            self.records.save_photographers,
        )

    def add_seller(self, name: str) -> list[str]:
        return _add_name(self.list_sellers(), name, "seller", self.records.save_sellers)

    def remove_seller(self, name: str) -> list[str]:
        return _remove_name(
            self.list_sellers(), name, "seller", self.records.save_sellers
        )


def _add_name(
    roster: list[str], name: str, role: str, save: Callable[[list[str]], None]
) -> list[str]:
    cleaned = name.strip()
    if not cleaned:
        raise ValidationError(f"Enter the {role}'s name.")
    if cleaned in roster:
        raise ValidationError(f"This {role} is already registered.")
    updated = [*roster, cleaned]
    save(updated)
    _logger.info("Roster updated: added %s=%s", role, cleaned)
    return updated


def _remove_name(
    roster: list[str], name: str, role: str, save: Callable[[list[str]], None]
) -> list[str]:
    if name not in roster:
        raise NotFoundError(f"The {role} '{name}' is not registered.")
    updated = [entry for entry in roster if entry != name]
    save(updated)
    _logger.info("Roster updated: removed %s=%s", role, name)
    return updated
