# SPDX-License-Identifier: MIT


class HydrateError(Exception):
    """Base class for all application errors."""

    pass


class PersistenceError(HydrateError):
    """Raised when the record store fails to load or commit."""

    pass


class PermissionDenied(HydrateError):
    """Raised when notification authorization is refused."""

    pass


class SchedulingError(HydrateError):
    """Raised when a single reminder cannot be submitted."""

    pass


class InvariantViolation(HydrateError):
    """Raised when a settings value breaks a domain invariant."""

    pass


class NonPositiveGoalError(InvariantViolation, ZeroDivisionError):
    """Raised when a daily goal of zero or less is used as a divisor."""

    pass
