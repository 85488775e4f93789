"""
Domain Models
=============
Pydantic models for the records held in the in-memory dashboard store
and the values derived from them.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommuteModeId(str, Enum):
    """Closed set of commute modes an employee can log."""

    CAR = "car"
    EV = "ev"
    METRO = "metro"
    BUS = "bus"
    AUTO = "auto"
    BIKE = "bike"


class Department(str, Enum):
    ENGINEERING = "Engineering"
    SALES = "Sales"
    MARKETING = "Marketing"
    HR = "HR"


class CommuteMode(BaseModel):
    """A commute mode and its emission factor (kg CO2e per km)."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: CommuteModeId
    label: str
    factor: float = Field(ge=0)


class ScopeFactors(BaseModel):
    """Scope 3 factors for cloud usage and embodied hardware carbon."""

    model_config = ConfigDict(frozen=True)

    cloud_cpu: float = 0.025  # kg CO2e per vCPU hour
    cloud_storage: float = 0.006  # kg CO2e per GB/month
    server_embodied: float = 85  # kg CO2e per server per month


class CommuteRecord(BaseModel):
    """One-way commute logged by an employee."""

    model_config = ConfigDict(frozen=True)

    # Plain string: roster data may carry ids outside CommuteModeId
    mode: str
    distance: float = Field(ge=0)  # km, one way


class EmployeeRecord(BaseModel):
    """A single roster entry. Never mutated once created."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: int
    name: str
    department: Department
    commute: CommuteRecord
    hours_logged: float = Field(ge=0)
    timestamp: Optional[datetime] = None


class FacilityInputs(BaseModel):
    """Facility-level usage figures configured from the admin view.

    Every field is clamped to zero from below, both on construction and
    when a copy is re-validated after an update.
    """

    model_config = ConfigDict(frozen=True)

    electricity_kwh: float = 15000  # kWh/month
    grid_factor: float = 0.82  # kg CO2e per kWh
    cloud_cpu_hours: float = 4500  # vCPU hours/month
    cloud_storage_gb: float = 1800  # GB/month
    server_count: float = 6

    @field_validator("*")
    @classmethod
    def clamp_non_negative(cls, value: float) -> float:
        return max(0.0, value)


class EnrichedEmployee(EmployeeRecord):
    """Employee record with its derived footprint. Recomputed on every read."""

    commute_carbon: float
    electricity_share: float
    total_carbon: float
