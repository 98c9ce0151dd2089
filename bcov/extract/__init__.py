from __future__ import annotations

from .offsets import Utf16Offsets
from .webpack import BundleDocument, extract_modules

__all__ = ["BundleDocument", "Utf16Offsets", "extract_modules"]
