"""
Dashboard Pipeline — LangGraph
==============================
A LangGraph StateGraph that turns a roster snapshot and the facility
inputs into the admin dashboard view:

  Facility totals → Allocation rate → Enrichment → Aggregation → END

Every node only calls functions from ``services.emissions_allocator``;
the graph holds no state and is re-run in full on every read.
"""

from __future__ import annotations

from typing import Sequence, TypedDict

from langgraph.graph import END, StateGraph

from config.factors import DEFAULT_SCOPE_FACTORS
from db.models import EmployeeRecord, EnrichedEmployee, FacilityInputs, ScopeFactors
from schemas.api_schemas import DashboardSnapshot
from services import emissions_allocator as allocator


# ── Pipeline State ────────────────────────────────────────
class DashboardState(TypedDict, total=False):
    """Shared state passed between nodes in the LangGraph."""

    roster: Sequence[EmployeeRecord]
    inputs: FacilityInputs
    factors: ScopeFactors
    electricity_carbon: float
    cloud_carbon: float
    hardware_carbon: float
    total_hours: float
    allocation_rate: float
    employees: list[EnrichedEmployee]
    commute_carbon: float
    departments: dict[str, float]
    company_total: float


# ── Node Functions ────────────────────────────────────────
def facility_node(state: DashboardState) -> DashboardState:
    """Scope 2 electricity plus Scope 3 cloud and hardware totals."""
    inputs = state["inputs"]
    factors = state["factors"]
    return {
        **state,
        "electricity_carbon": allocator.compute_electricity_carbon(inputs),
        "cloud_carbon": allocator.compute_cloud_carbon(inputs, factors),
        "hardware_carbon": allocator.compute_hardware_carbon(inputs, factors),
    }


def allocation_node(state: DashboardState) -> DashboardState:
    roster = state["roster"]
    return {
        **state,
        "total_hours": allocator.total_hours(roster),
        "allocation_rate": allocator.compute_allocation_rate(
            state["electricity_carbon"], roster
        ),
    }


def enrichment_node(state: DashboardState) -> DashboardState:
    return {
        **state,
        "employees": allocator.enrich_roster(state["roster"], state["allocation_rate"]),
    }


def aggregation_node(state: DashboardState) -> DashboardState:
    """Commute total, department breakdown and the company total."""
    employees = state["employees"]
    commute_carbon = allocator.total_commute_carbon(employees)
    return {
        **state,
        "commute_carbon": commute_carbon,
        "departments": allocator.aggregate_by_department(employees),
        "company_total": allocator.company_total(
            state["electricity_carbon"],
            commute_carbon,
            state["cloud_carbon"],
            state["hardware_carbon"],
        ),
    }


# ── Build the Graph ───────────────────────────────────────
def build_pipeline():
    """Construct and compile the dashboard graph."""
    graph = StateGraph(DashboardState)

    graph.add_node("facility", facility_node)
    graph.add_node("allocation", allocation_node)
    graph.add_node("enrichment", enrichment_node)
    graph.add_node("aggregation", aggregation_node)

    graph.set_entry_point("facility")
    graph.add_edge("facility", "allocation")
    graph.add_edge("allocation", "enrichment")
    graph.add_edge("enrichment", "aggregation")
    graph.add_edge("aggregation", END)

    return graph.compile()


# Pre-compiled pipeline instance
pipeline = build_pipeline()


def build_dashboard(
    roster: Sequence[EmployeeRecord],
    inputs: FacilityInputs,
    factors: ScopeFactors = DEFAULT_SCOPE_FACTORS,
) -> DashboardSnapshot:
    """Run the full pipeline over a roster snapshot."""
    initial_state: DashboardState = {
        "roster": tuple(roster),
        "inputs": inputs,
        "factors": factors,
    }
    result = pipeline.invoke(initial_state)
    return DashboardSnapshot(
        electricity_carbon=result["electricity_carbon"],
        cloud_carbon=result["cloud_carbon"],
        hardware_carbon=result["hardware_carbon"],
        commute_carbon=result["commute_carbon"],
        company_total=result["company_total"],
        total_hours=result["total_hours"],
        allocation_rate=result["allocation_rate"],
        employees=result["employees"],
        departments=result["departments"],
    )
