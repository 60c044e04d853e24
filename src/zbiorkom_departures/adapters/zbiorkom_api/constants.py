"""Constants for the zbiorkom.live API."""

DEPARTURES_PATH = "stops/getDepartures"

# Default request timeout in seconds
DEFAULT_TIMEOUT_SECONDS = 10

# Fallback badge color used by the zbiorkom.live board when a line has none
DEFAULT_LINE_COLOR = "#44739e"
