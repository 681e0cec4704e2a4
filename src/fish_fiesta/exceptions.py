"""
Exception types for the Fish Fiesta core.
"""


class FishFiestaError(Exception):
    """Base class for errors raised by the game core."""
    pass


class InvalidConditionValueError(FishFiestaError, ValueError):
    """Raised when a level condition holds a token that is not a known enum member."""

    def __init__(self, condition_name: str, value: str):
        self.condition_name = condition_name
        self.value = value
        super().__init__(f"Invalid value {value!r} for condition {condition_name}")


class LevelStateError(FishFiestaError, RuntimeError):
    """Raised when a level is driven after it reached a terminal state."""
    pass
