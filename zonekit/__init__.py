"""Registry of DNS record types and wire-format checks of their record data."""

__version__ = "0.2.0"

__all__ = [
    "base32",
    "bits",
    "extended",
    "fields",
    "records",
    "registry",
    "validate",
]