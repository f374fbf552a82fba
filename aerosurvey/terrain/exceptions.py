"""aerosurvey/terrain/exceptions.py"""


class TerrainError(Exception):
    """Base exception for terrain correction errors."""
    pass


class ElevationCountMismatchError(TerrainError):
    """Raised when elevation samples do not line up with the plan's waypoints."""
    def __init__(self, expected, received):
        self.expected = expected
        self.received = received
        super().__init__(f"Expected {expected} elevation samples, received {received}")
