import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
DAYS_PER_WEEK = _constants["DAYS_PER_WEEK"]

DEFAULT_MIN_REST_HOURS = _constants["DEFAULT_MIN_REST_HOURS"]
DEFAULT_MAX_CONSECUTIVE_DAYS = _constants["DEFAULT_MAX_CONSECUTIVE_DAYS"]
DEFAULT_WEEKLY_CONTRACT_HOURS = _constants["DEFAULT_WEEKLY_CONTRACT_HOURS"]
DEFAULT_LUNCH_MINUTES = _constants["DEFAULT_LUNCH_MINUTES"]
DEFAULT_MIN_ON_FLOOR = _constants["DEFAULT_MIN_ON_FLOOR"]
DEFAULT_LUNCH_WINDOWS = _constants["DEFAULT_LUNCH_WINDOWS"]
DEFAULT_PREFERRED_DAYS_OFF = _constants["DEFAULT_PREFERRED_DAYS_OFF"]

PREF_DAY_OFF_PENALTY = _constants["PREF_DAY_OFF_PENALTY"]
FAIRNESS_GAP_PENALTY = _constants["FAIRNESS_GAP_PENALTY"]
SOLVER_TIMEOUT_SECONDS = _constants["SOLVER_TIMEOUT_SECONDS"]
SOLVER_SEED = _constants["SOLVER_SEED"]

HOLIDAY_USER_AGENT = _constants["HOLIDAY_USER_AGENT"]
HOLIDAY_REQUEST_TIMEOUT = _constants["HOLIDAY_REQUEST_TIMEOUT"]
BRASIL_API_URL = _constants["BRASIL_API_URL"]
HOLIDAYS_REPO_URL = _constants["HOLIDAYS_REPO_URL"]
STATE_CODE = _constants["STATE_CODE"]

FIXED_NATIONAL_HOLIDAYS = [tuple(h) for h in _constants["FIXED_NATIONAL_HOLIDAYS"]]
FIXED_STATE_HOLIDAYS = [tuple(h) for h in _constants["FIXED_STATE_HOLIDAYS"]]
