from __future__ import annotations

from .profile import Asset, is_script_asset, load_profile, parse_profile

__all__ = ["Asset", "is_script_asset", "load_profile", "parse_profile"]
