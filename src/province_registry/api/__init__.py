"""
province_registry.api

API package for the province registry service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers validate input and delegate to `services.province_service`.
