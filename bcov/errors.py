"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from BcovUserError.

Programming errors and bugs should NOT inherit from BcovUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations


class BcovUserError(Exception):
    """
    Base class for all user-facing errors in bundle-coverage.

    These errors indicate problems that the user can fix:
    a missing or malformed coverage profile, a broken config file, etc.
    """
    pass


class ProfileError(BcovUserError):
    """Профиль покрытия не читается или имеет неверную структуру верхнего уровня."""
    pass


class ConfigError(BcovUserError):
    """Ошибка загрузки bcov.yaml с указанием пути поля."""
    pass


__all__ = ["BcovUserError", "ProfileError", "ConfigError"]
