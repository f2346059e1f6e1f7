# src/ellers/errors.py
"""
Error taxonomy for maze generation.

InvalidArgument is bad user input and is reported before anything is built.
InvariantViolation means the engine itself is wrong (or misused) and is
never recovered from: a maze produced past one would not be perfect.
"""


class InvalidArgument(ValueError):
    pass


class InvariantViolation(AssertionError):
    pass


class MazeClosed(InvariantViolation):
    """Raised when a row is requested after the closing row was produced."""
