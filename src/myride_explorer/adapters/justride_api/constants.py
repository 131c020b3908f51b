"""Constants for the JustRide web and data APIs.

Paths are relative to the relay mount (``api_base_url``); the relay strips
its prefix and forwards them to the ticketing host unchanged.
"""

LOGIN_PATH = "/broker/web-api/v1/{agency_id}/login"
TOKENS_PATH = "/broker/web-api/v1/{agency_id}/tokens"
HISTORY_PATH = "/edge/data/v2/{agency_id}/account/{account_id}/history"

# Service scope for the token that authorizes history requests
DATA_SERVICE = "data"

# The history endpoint rejects startTime=0
MIN_START_TIME = 1

DEFAULT_HISTORY_SIZE = 10
DEFAULT_RANGE_SIZE = 1000

LOGIN_FAILED = "Login failed"
TOKEN_FAILED = "Failed to get JWT token"
FETCH_FAILED = "Failed to fetch tap history"
