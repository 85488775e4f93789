"""
API Schemas
===========
Pydantic models for request / response validation on API endpoints.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from db.models import CommuteModeId, EmployeeRecord, EnrichedEmployee

MAX_ROSTER_SIZE = 10_000


# ── Employee Portal ───────────────────────────────────────
class DistanceEstimateRequest(BaseModel):
    """Starting point chosen in the journey step of the logging form."""

    location_type: Literal["home", "custom"] = "home"
    custom_address: str = ""


class DistanceEstimateResponse(BaseModel):
    location_type: str
    distance: float


class CommuteLogRequest(BaseModel):
    """A single commute + hours entry submitted from the employee portal."""

    mode: CommuteModeId = CommuteModeId.METRO
    distance: float = 12.5  # km, one way
    hours: float = 8


class CommuteLogResponse(BaseModel):
    """Stored entry plus the commute impact shown on the success screen."""

    entry: EmployeeRecord
    session_impact: float  # kg CO2e, round trip commute only
    message: str = "Commute logged."


# ── Admin Dashboard ───────────────────────────────────────
class FacilityUpdate(BaseModel):
    """Partial update of the facility inputs. Negatives are clamped to 0."""

    electricity_kwh: Optional[float] = None
    grid_factor: Optional[float] = None
    cloud_cpu_hours: Optional[float] = None
    cloud_storage_gb: Optional[float] = None
    server_count: Optional[float] = None


class RegenerateRequest(BaseModel):
    size: Optional[int] = Field(default=None, ge=0, le=MAX_ROSTER_SIZE)
    seed: Optional[int] = None


class DepartmentTotal(BaseModel):
    name: str
    value: float


class DashboardSnapshot(BaseModel):
    """Full admin view: category totals, allocation and per-employee footprint."""

    electricity_carbon: float  # Scope 2
    cloud_carbon: float  # Scope 3
    hardware_carbon: float  # Scope 3
    commute_carbon: float  # Scope 3
    company_total: float
    total_hours: float
    allocation_rate: float  # kg CO2e per logged hour
    employees: list[EnrichedEmployee]
    departments: dict[str, float]

    def department_totals(self) -> list[DepartmentTotal]:
        """Chart-ready department breakdown."""
        return [DepartmentTotal(name=name, value=value) for name, value in self.departments.items()]
