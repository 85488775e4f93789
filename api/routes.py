"""
API Routes
==========
FastAPI router exposing the employee portal (commute logging) and the
admin dashboard (facility inputs, allocation and totals).
"""

from fastapi import APIRouter, Depends, status

from config.factors import COMMUTE_MODES, DEPARTMENTS
from config.settings import settings
from db.models import CommuteMode, EmployeeRecord, FacilityInputs
from db.store import DashboardStore, get_store
from schemas.api_schemas import (
    CommuteLogRequest,
    CommuteLogResponse,
    DashboardSnapshot,
    DepartmentTotal,
    DistanceEstimateRequest,
    DistanceEstimateResponse,
    FacilityUpdate,
    RegenerateRequest,
)
from services.commute_service import estimate_distance, log_commute
from services.dashboard_pipeline import build_dashboard
from services.mock_data import seed_store
from utils.helpers import format_kg, logger

router = APIRouter()


# ── Reference data ────────────────────────────────────────
@router.get("/modes", response_model=list[CommuteMode])
async def list_modes():
    return list(COMMUTE_MODES.values())


@router.get("/departments", response_model=list[str])
async def list_departments():
    return [department.value for department in DEPARTMENTS]


# ── Employee Portal ───────────────────────────────────────
@router.post("/commute/estimate", response_model=DistanceEstimateResponse)
async def estimate_commute(body: DistanceEstimateRequest):
    """Mock routing: resolve the chosen starting point to a distance."""
    distance = estimate_distance(body.location_type, body.custom_address, settings)
    return DistanceEstimateResponse(location_type=body.location_type, distance=distance)


@router.post(
    "/commute",
    response_model=CommuteLogResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_commute(
    body: CommuteLogRequest, store: DashboardStore = Depends(get_store)
):
    """Log today's commute and hours for the current user."""
    record, impact = log_commute(store, body, settings)
    return CommuteLogResponse(entry=record, session_impact=impact)


@router.get("/employees", response_model=list[EmployeeRecord])
async def list_employees(store: DashboardStore = Depends(get_store)):
    """Roster, newest first."""
    return list(store.roster())


@router.post("/employees/regenerate", response_model=list[EmployeeRecord])
async def regenerate_employees(
    body: RegenerateRequest, store: DashboardStore = Depends(get_store)
):
    """Replace the roster with a fresh mock one."""
    size = settings.MOCK_ROSTER_SIZE if body.size is None else body.size
    seed_store(store, size, body.seed)
    return list(store.roster())


# ── Admin Dashboard ───────────────────────────────────────
@router.get("/facility", response_model=FacilityInputs)
async def get_facility(store: DashboardStore = Depends(get_store)):
    return store.facility()


@router.patch("/facility", response_model=FacilityInputs)
async def update_facility(
    body: FacilityUpdate, store: DashboardStore = Depends(get_store)
):
    """Update any subset of the facility inputs; negatives become 0."""
    return store.update_facility(body.model_dump(exclude_none=True))


@router.get("/dashboard", response_model=DashboardSnapshot)
async def get_dashboard(store: DashboardStore = Depends(get_store)):
    """Recompute the full admin view from the current state."""
    snapshot = build_dashboard(store.roster(), store.facility(), store.factors)
    logger.info(
        "Dashboard computed: total %s, rate %.2f kg/hr",
        format_kg(snapshot.company_total),
        snapshot.allocation_rate,
    )
    return snapshot


@router.get("/dashboard/departments", response_model=list[DepartmentTotal])
async def get_department_totals(store: DashboardStore = Depends(get_store)):
    snapshot = build_dashboard(store.roster(), store.facility(), store.factors)
    return snapshot.department_totals()
