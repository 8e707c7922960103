"""Internal constants shared across the library."""

BASE_URL = "https://api.wmata.com/"
API_KEY_PARAM = "api_key"
USER_AGENT = "pywmata"

# Placeholder WMATA uses for "all stations" in prediction requests.
ALL_STATIONS = "All"
