"""
Emissions Allocator
===================
Derives category totals and per-employee footprints from a roster
snapshot and the facility inputs.

Everything here is a pure function: inputs are never mutated and no
rounding is applied. Rounding is a display concern (see
``utils.helpers.format_kg``).
"""

from collections.abc import Iterable, Sequence

from config.factors import COMMUTE_MODES, DEFAULT_SCOPE_FACTORS, UNKNOWN_MODE_FACTOR
from db.models import (
    CommuteModeId,
    EmployeeRecord,
    EnrichedEmployee,
    FacilityInputs,
    ScopeFactors,
)
from utils.helpers import logger


# ── Scope 2 ───────────────────────────────────────────────
def compute_electricity_carbon(inputs: FacilityInputs) -> float:
    """Facility electricity carbon in kg CO2e."""
    return inputs.electricity_kwh * inputs.grid_factor


# ── Scope 3 ───────────────────────────────────────────────
def compute_cloud_carbon(
    inputs: FacilityInputs, factors: ScopeFactors = DEFAULT_SCOPE_FACTORS
) -> float:
    return (
        inputs.cloud_cpu_hours * factors.cloud_cpu
        + inputs.cloud_storage_gb * factors.cloud_storage
    )


def compute_hardware_carbon(
    inputs: FacilityInputs, factors: ScopeFactors = DEFAULT_SCOPE_FACTORS
) -> float:
    return inputs.server_count * factors.server_embodied


# ── Allocation ────────────────────────────────────────────
def total_hours(roster: Iterable[EmployeeRecord]) -> float:
    return sum(employee.hours_logged for employee in roster)


def compute_allocation_rate(
    total_electricity_carbon: float, roster: Sequence[EmployeeRecord]
) -> float:
    """
    Electricity carbon attributed per logged office hour (kg CO2e/h).

    The rate is 0 when the roster is empty or no hours are logged.
    """
    hours = total_hours(roster)
    if hours <= 0:
        return 0.0
    return total_electricity_carbon / hours


def commute_factor(mode_id: str) -> float:
    """Return the kg CO2e/km factor for ``mode_id``, 0 for unknown modes."""
    try:
        mode = CommuteModeId(mode_id)
    except ValueError:
        logger.debug("Unknown commute mode %r, using factor %s", mode_id, UNKNOWN_MODE_FACTOR)
        return UNKNOWN_MODE_FACTOR
    return COMMUTE_MODES[mode].factor


def enrich_employee(employee: EmployeeRecord, allocation_rate: float) -> EnrichedEmployee:
    """Attach round-trip commute carbon and the electricity share."""
    commute_carbon = employee.commute.distance * 2 * commute_factor(employee.commute.mode)
    electricity_share = employee.hours_logged * allocation_rate
    return EnrichedEmployee(
        **employee.model_dump(include=set(EmployeeRecord.model_fields)),
        commute_carbon=commute_carbon,
        electricity_share=electricity_share,
        total_carbon=commute_carbon + electricity_share,
    )


def enrich_roster(
    roster: Sequence[EmployeeRecord], allocation_rate: float
) -> list[EnrichedEmployee]:
    return [enrich_employee(employee, allocation_rate) for employee in roster]


# ── Aggregates ────────────────────────────────────────────
def total_commute_carbon(enriched: Iterable[EnrichedEmployee]) -> float:
    return sum(employee.commute_carbon for employee in enriched)


def aggregate_by_department(enriched: Iterable[EnrichedEmployee]) -> dict[str, float]:
    """Sum ``total_carbon`` per department. Empty departments are absent."""
    totals: dict[str, float] = {}
    for employee in enriched:
        totals[employee.department] = totals.get(employee.department, 0.0) + employee.total_carbon
    return totals


def company_total(
    electricity: float, commute: float, cloud: float, hardware: float
) -> float:
    return electricity + commute + cloud + hardware
