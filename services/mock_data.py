"""
Mock Roster
===========
Generates the randomised employee roster the dashboard starts with.
"""

import random
from datetime import datetime, timedelta
from typing import Optional

from config.factors import COMMUTE_MODES, DEPARTMENTS
from db.models import CommuteRecord, EmployeeRecord
from db.store import DashboardStore
from utils.helpers import logger

INDIAN_NAMES = [
    "Aarav Patel", "Vihaan Sharma", "Aditya Verma", "Sai Kumar", "Arjun Reddy",
    "Reyansh Singh", "Muhammad Khan", "Ishaan Gupta", "Krishna Iyer", "Dhruv Malhotra",
    "Ananya Das", "Diya Rao", "Saanvi Nair", "Aadhya Joshi", "Kiara Shah",
    "Pari Mehta", "Myra Kapoor", "Riya Jain", "Anika Choudhury", "Navya Agarwal",
    "Kabir Chatterjee", "Vivaan Saxena", "Ayaan Bhat", "Vihaan Mishra", "Advik Deshmukh",
]

MIN_DISTANCE_KM, MAX_DISTANCE_KM = 5, 34
MIN_HOURS, MAX_HOURS = 4, 7
MAX_AGE_SECONDS = 10_000


def generate_roster(
    size: int,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> list[EmployeeRecord]:
    """
    Build ``size`` employees with ids 1..size.

    Department and mode are drawn uniformly; distance and hours are whole
    numbers; timestamps fall within the last ``MAX_AGE_SECONDS``.
    """
    rng = rng or random.Random()
    now = now or datetime.now()
    modes = list(COMMUTE_MODES)

    roster = []
    for i in range(size):
        roster.append(
            EmployeeRecord(
                id=i + 1,
                name=INDIAN_NAMES[i % len(INDIAN_NAMES)],
                department=rng.choice(DEPARTMENTS),
                commute=CommuteRecord(
                    mode=rng.choice(modes).value,
                    distance=rng.randint(MIN_DISTANCE_KM, MAX_DISTANCE_KM),
                ),
                hours_logged=rng.randint(MIN_HOURS, MAX_HOURS),
                timestamp=now - timedelta(seconds=rng.randint(0, MAX_AGE_SECONDS)),
            )
        )
    return roster


def seed_store(store: DashboardStore, size: int, seed: Optional[int] = None) -> None:
    """Replace the store's roster with freshly generated mock data."""
    logger.info("Generating mock roster (size=%d, seed=%s)", size, seed)
    store.replace_roster(generate_roster(size, random.Random(seed)))
