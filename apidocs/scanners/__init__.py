"""Scanners turning endpoint descriptors into documentation."""
from __future__ import annotations

from .documentation import DocumentationScanner
from .listings import ListingScanner
from .references import ListingReferenceScanner, ScanResult

__all__ = [
    "DocumentationScanner",
    "ListingReferenceScanner",
    "ListingScanner",
    "ScanResult",
]
