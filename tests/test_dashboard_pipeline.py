"""Dashboard pipeline tests: the graph output matches the allocator math."""

import pytest

from db.models import FacilityInputs
from services.dashboard_pipeline import build_dashboard


class TestBuildDashboard:
    def test_scenario_totals(self, facility_inputs, make_employee):
        snapshot = build_dashboard([make_employee(mode="metro", distance=12.5, hours=8)], facility_inputs)

        assert snapshot.electricity_carbon == pytest.approx(12300)
        assert snapshot.cloud_carbon == pytest.approx(123.3)
        assert snapshot.hardware_carbon == pytest.approx(510)
        assert snapshot.total_hours == 8
        assert snapshot.allocation_rate == pytest.approx(1537.5)
        assert snapshot.commute_carbon == pytest.approx(1.0)
        assert snapshot.company_total == pytest.approx(12300 + 1.0 + 123.3 + 510)

    def test_employee_order_preserved(self, facility_inputs, make_employee):
        roster = [make_employee(id=i, hours=i) for i in (5, 3, 9, 1)]
        snapshot = build_dashboard(roster, facility_inputs)
        assert [e.id for e in snapshot.employees] == [5, 3, 9, 1]

    def test_electricity_fully_allocated(self, facility_inputs, make_employee):
        roster = [make_employee(id=1, hours=4), make_employee(id=2, hours=7, department="HR")]
        snapshot = build_dashboard(roster, facility_inputs)
        allocated = sum(e.electricity_share for e in snapshot.employees)
        assert allocated == pytest.approx(snapshot.electricity_carbon)
        assert sum(snapshot.departments.values()) == pytest.approx(
            snapshot.commute_carbon + snapshot.electricity_carbon
        )

    def test_empty_roster(self, facility_inputs):
        snapshot = build_dashboard([], facility_inputs)
        assert snapshot.allocation_rate == 0
        assert snapshot.employees == []
        assert snapshot.departments == {}
        assert snapshot.company_total == pytest.approx(12300 + 123.3 + 510)

    def test_zero_facility(self, make_employee):
        inputs = FacilityInputs(
            electricity_kwh=0, grid_factor=0, cloud_cpu_hours=0, cloud_storage_gb=0, server_count=0
        )
        snapshot = build_dashboard([make_employee(mode="car", distance=10)], inputs)
        assert snapshot.company_total == pytest.approx(3.8)

    def test_department_totals_for_chart(self, facility_inputs, make_employee):
        snapshot = build_dashboard([make_employee(department="Sales")], facility_inputs)
        chart = snapshot.department_totals()
        assert [d.name for d in chart] == ["Sales"]
        assert chart[0].value == pytest.approx(snapshot.employees[0].total_carbon)
