"""Employee portal: distance estimation and commute logging."""

import random
from datetime import datetime

import pytest
from pydantic import ValidationError

from config.settings import Settings
from db.models import CommuteModeId
from schemas.api_schemas import CommuteLogRequest
from services.commute_service import estimate_distance, log_commute


class TestEstimateDistance:
    def test_home(self, test_settings):
        assert estimate_distance("home", "", test_settings) == 12.5

    def test_custom_address(self, test_settings):
        distance = estimate_distance("custom", "MG Road, Bengaluru", test_settings, random.Random(2))
        assert 15 <= distance <= 34

    def test_padded_address_counts_raw_length(self, test_settings):
        distance = estimate_distance("custom", "  ab ", test_settings, random.Random(5))
        assert 15 <= distance <= 34

    def test_short_custom_address(self, test_settings):
        assert estimate_distance("custom", "abc", test_settings) == 0


class TestLogCommute:
    def test_prepends_current_user(self, store, test_settings, make_employee):
        store.replace_roster([make_employee(id=1), make_employee(id=2)])
        now = datetime(2024, 5, 2, 9, 0)

        record, impact = log_commute(
            store, CommuteLogRequest(mode=CommuteModeId.METRO, distance=12.5, hours=8), test_settings, now
        )

        assert store.roster()[0] == record
        assert record.id == 3
        assert record.name == "Arjun Reddy"
        assert record.department == "Engineering"
        assert record.timestamp == now
        assert impact == pytest.approx(1.0)

    def test_clamps_hours_and_distance(self, store, test_settings):
        record, impact = log_commute(
            store, CommuteLogRequest(mode=CommuteModeId.CAR, distance=-4, hours=30), test_settings
        )
        assert record.hours_logged == 24
        assert record.commute.distance == 0
        assert impact == 0

        record, _ = log_commute(store, CommuteLogRequest(hours=0), test_settings)
        assert record.hours_logged == 1

    def test_configured_department(self, store):
        config = Settings(CURRENT_USER_DEPARTMENT="Sales", LOG_LEVEL="WARNING")
        record, _ = log_commute(store, CommuteLogRequest(), config)
        assert record.department == "Sales"


class TestSettings:
    def test_unknown_department_rejected_on_load(self):
        with pytest.raises(ValidationError):
            Settings(CURRENT_USER_DEPARTMENT="Finance")
