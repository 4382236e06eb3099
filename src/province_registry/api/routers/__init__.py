"""
province_registry.api.routers

HTTP routers.
"""

# Package marker.
