# aerosurvey/constants/elevation.py

class ElevationServiceConstants:
    """Defaults for the external elevation service."""

    # Open-Meteo answers GET requests with one elevation per coordinate pair.
    API_URL = "https://api.open-meteo.com/v1/elevation"
    # Small batches keep GET query strings under URL length limits.
    BATCH_SIZE = 50
    COORDINATE_PRECISION = 6
    REQUEST_TIMEOUT_S = 30
    CACHE_NAME = ".cache"
    CACHE_EXPIRE_S = 3600 * 24 * 7  # 1 week
    RETRIES = 5
    BACKOFF_FACTOR = 0.2
