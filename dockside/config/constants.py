"""
Core constants for dockside.

Cargo rules, unit conversions, console menu text and
environment-driven service settings.
"""

import os

# ---------------------------------------------------------------------------
# Cargo rules
# ---------------------------------------------------------------------------
# Share of maximum load a fluid unit may be filled to
FLUID_PERMISSIBLE_RATIO = 0.9
FLUID_HAZARDOUS_PERMISSIBLE_RATIO = 0.5

# Share of the load a gas unit keeps after clearing (residual gas)
GAS_RESIDUAL_FRACTION = 0.05

# Unit weights are in kg, vessel weight limits in tons
KG_PER_TON = 1000

# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------
EXIT_COMMAND = "exit"

MENU_OPTIONS = {
    "1": "Register a new ship",
    "2": "Create a new cargo unit",
    "3": "Assign cargo to a ship",
    "4": "Remove cargo from a ship",
    "5": "Display fleet and cargo details",
    "6": "Fill a cargo unit",
    "7": "Clear a cargo unit's load",
    "8": "Show hazard alerts",
}

UNIT_KIND_CHOICES = {
    "1": "fluid",
    "2": "gas",
    "3": "cool",
}

# ---------------------------------------------------------------------------
# Service settings (environment overrides)
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("DOCKSIDE_LOG_LEVEL", "WARNING").upper()
WEB_HOST = os.environ.get("DOCKSIDE_HOST", "0.0.0.0")
WEB_PORT = int(os.environ.get("DOCKSIDE_PORT", "8000"))
