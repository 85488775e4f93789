"""
Commute Service
===============
Backs the employee portal: mock route distance estimation and the
single commute-logging action.
"""

import random
from datetime import datetime
from typing import Optional

from config.settings import Settings
from db.models import CommuteRecord, EmployeeRecord
from db.store import DashboardStore
from schemas.api_schemas import CommuteLogRequest
from services.emissions_allocator import commute_factor
from utils.helpers import format_kg, logger

MIN_HOURS, MAX_HOURS = 1, 24
CUSTOM_ROUTE_KM = (15, 34)


def estimate_distance(
    location_type: str,
    custom_address: str,
    config: Settings,
    rng: Optional[random.Random] = None,
) -> float:
    """
    Mock one-way distance to the office in km.

    Home resolves to the configured home route. A custom address longer
    than three characters gets a random route; anything shorter is 0.
    """
    if location_type == "home":
        return config.HOME_COMMUTE_KM
    if len(custom_address) > 3:
        rng = rng or random.Random()
        return float(rng.randint(*CUSTOM_ROUTE_KM))
    return 0.0


def log_commute(
    store: DashboardStore,
    entry: CommuteLogRequest,
    config: Settings,
    now: Optional[datetime] = None,
) -> tuple[EmployeeRecord, float]:
    """
    Store a commute for the current user and return it with its impact.

    Hours are clamped to [1, 24] and distance to >= 0. The impact is the
    round trip commute carbon only; the electricity share depends on the
    whole roster and is left to the dashboard.
    """
    hours = min(MAX_HOURS, max(MIN_HOURS, entry.hours))
    distance = max(0.0, entry.distance)

    record = EmployeeRecord(
        id=store.next_id(),
        name=config.CURRENT_USER_NAME,
        department=config.CURRENT_USER_DEPARTMENT,
        commute=CommuteRecord(mode=entry.mode.value, distance=distance),
        hours_logged=hours,
        timestamp=now or datetime.now(),
    )
    store.prepend(record)

    impact = distance * 2 * commute_factor(record.commute.mode)
    logger.info(
        "Commute logged for %s: %s, %.1f km, %s h, impact %s",
        record.name,
        record.commute.mode,
        distance,
        hours,
        format_kg(impact, 2),
    )
    return record, impact
