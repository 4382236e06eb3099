"""
province_registry

Top-level package for the province/city registry service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep imports out of this module; `province_registry.api` pulls in FastAPI.
