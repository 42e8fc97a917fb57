"""Default connection settings for the api.weather.gov REST service."""

NOAA_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "weathergov/0.1.0"
# Response models are mapped against the JSON-LD shapes
DEFAULT_ACCEPT = "application/ld+json"
