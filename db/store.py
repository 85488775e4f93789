"""
Dashboard Store
===============
In-memory state container for the employee roster and the facility
inputs. One instance is owned by the application object; routes reach
it through the ``get_store`` dependency.
"""

from typing import Any, Iterable

from fastapi import Request

from config.settings import Settings
from db.models import EmployeeRecord, FacilityInputs, ScopeFactors
from utils.helpers import logger


class DashboardStore:
    """Append-only roster (newest first) plus the facility inputs."""

    def __init__(
        self,
        facility: FacilityInputs | None = None,
        factors: ScopeFactors | None = None,
    ) -> None:
        self._roster: list[EmployeeRecord] = []
        self._facility = facility or FacilityInputs()
        self.factors = factors or ScopeFactors()
        self._last_id = 0

    # ── Roster ────────────────────────────────────────────
    def roster(self) -> tuple[EmployeeRecord, ...]:
        """Snapshot of the roster, newest first."""
        return tuple(self._roster)

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def prepend(self, record: EmployeeRecord) -> None:
        """Insert a user-submitted record at the front of the roster."""
        self._roster.insert(0, record)
        self._last_id = max(self._last_id, record.id)
        logger.info("Roster entry %s added (%d employees)", record.id, len(self._roster))

    def replace_roster(self, records: Iterable[EmployeeRecord]) -> None:
        """Swap in a freshly generated roster, e.g. on reload."""
        self._roster = list(records)
        self._last_id = max((record.id for record in self._roster), default=0)
        logger.info("Roster replaced (%d employees)", len(self._roster))

    # ── Facility inputs ───────────────────────────────────
    def facility(self) -> FacilityInputs:
        return self._facility

    def update_facility(self, changes: dict[str, Any]) -> FacilityInputs:
        """Merge ``changes`` into the facility inputs, clamping negatives to 0."""
        merged = {**self._facility.model_dump(), **changes}
        self._facility = FacilityInputs.model_validate(merged)
        logger.info("Facility inputs updated: %s", sorted(changes))
        return self._facility


def create_store(config: Settings) -> DashboardStore:
    """Build an empty store seeded with the configured facility defaults."""
    facility = FacilityInputs(
        electricity_kwh=config.DEFAULT_ELECTRICITY_KWH,
        grid_factor=config.DEFAULT_GRID_FACTOR,
        cloud_cpu_hours=config.DEFAULT_CLOUD_CPU_HOURS,
        cloud_storage_gb=config.DEFAULT_CLOUD_STORAGE_GB,
        server_count=config.DEFAULT_SERVER_COUNT,
    )
    factors = ScopeFactors(
        cloud_cpu=config.CLOUD_CPU_FACTOR,
        cloud_storage=config.CLOUD_STORAGE_FACTOR,
        server_embodied=config.SERVER_EMBODIED_FACTOR,
    )
    return DashboardStore(facility=facility, factors=factors)


def get_store(request: Request) -> DashboardStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
