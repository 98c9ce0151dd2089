from __future__ import annotations

from .coverage import aggregate, package_name, reconcile, unused_modules

__all__ = ["reconcile", "unused_modules", "aggregate", "package_name"]
