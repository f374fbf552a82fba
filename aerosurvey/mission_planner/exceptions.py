# aerosurvey/mission_planner/exceptions.py
"""
Mission Planner Exceptions
Error kinds reported synchronously by a planning invocation. None of them are
retried; the caller adjusts inputs and plans again.
"""


class PlanningError(Exception):
    """Base class for all mission planning errors"""
    pass


class EmptyRegionError(PlanningError):
    """The survey area contains no usable polygon"""
    def __init__(self, message="Survey area contains no valid polygon features"):
        super().__init__(message)


class GeometryError(PlanningError):
    """Union, rotation or intersection failed on malformed geometry"""
    def __init__(self, operation, message="Geometry operation failed"):
        self.operation = operation
        super().__init__(f"{message} during {operation}")


class InvalidParametersError(PlanningError):
    """A flight, camera or filter parameter is out of range"""
    def __init__(self, parameter, value, message="Invalid parameter value"):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{message}: {parameter}={value}")


class NoCoverageError(PlanningError):
    """The region is valid but no waypoints could be placed in it"""
    def __init__(self, message="Could not generate waypoints. The survey area may be too small for the given parameters"):
        super().__init__(message)
