from .state_checks import StateInvariantError, validate_state

__all__ = ["StateInvariantError", "validate_state"]
