"""
Emission Factors
================
Fixed commute-mode factors shared by the allocator, the mock roster
and the API.
"""

from db.models import CommuteMode, CommuteModeId, Department, ScopeFactors

# kg CO2e per passenger-km
COMMUTE_MODES: dict[CommuteModeId, CommuteMode] = {
    CommuteModeId.CAR: CommuteMode(id=CommuteModeId.CAR, label="Car (Petrol)", factor=0.19),
    CommuteModeId.EV: CommuteMode(id=CommuteModeId.EV, label="Car (EV)", factor=0.07),
    CommuteModeId.METRO: CommuteMode(id=CommuteModeId.METRO, label="Metro", factor=0.04),
    CommuteModeId.BUS: CommuteMode(id=CommuteModeId.BUS, label="Bus", factor=0.08),
    CommuteModeId.AUTO: CommuteMode(id=CommuteModeId.AUTO, label="Auto-rickshaw", factor=0.12),
    CommuteModeId.BIKE: CommuteMode(id=CommuteModeId.BIKE, label="Bike/Walk", factor=0.0),
}

# Factor applied to any mode id outside CommuteModeId
UNKNOWN_MODE_FACTOR = 0.0

DEPARTMENTS: list[Department] = list(Department)

# Scope 3 factors (adjusted for India's grid intensity)
DEFAULT_SCOPE_FACTORS = ScopeFactors()
