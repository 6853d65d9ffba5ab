"""Consistency checks for game states."""

from .invariants import InvariantViolation, validate_state

__all__ = ["InvariantViolation", "validate_state"]
