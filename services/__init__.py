# -*- coding: utf-8 -*-
"""
License Wizard Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "LicenseManager",
    "MemoryLicenseManager",
    "LicenseContent",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "LicenseManager":
        from .license_service import LicenseManager
        return LicenseManager
    elif name == "MemoryLicenseManager":
        from .license_service import MemoryLicenseManager
        return MemoryLicenseManager
    elif name == "LicenseContent":
        from .license_service import LicenseContent
        return LicenseContent
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
