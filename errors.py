class CapacityExceeded(RuntimeError):
    """Raised when an obstacle is appended to a full ObstacleSet.

    The spawner checks capacity before building an obstacle, so seeing this
    means the guard logic is broken. It is never caught inside the core.
    """


class MalformedTemplate(ValueError):
    """Raised when an obstacle template's glyph rows don't match its box."""
