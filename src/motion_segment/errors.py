"""Exception types raised while building motion segments."""


class ConstructionError(ValueError):
    """Invalid parameters for a motion segment.

    Raised only while a segment is being constructed. A segment that was
    built successfully never raises during evaluation.
    """


class SingularSystemError(ConstructionError):
    """Boundary-condition system has no unique solution (zero pivot)."""
