"""
province_registry.services

Service-layer package.

Responsibilities:
- Own transaction boundaries and persistence decisions.
- Translate caller parameters into repository calls.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services take an AsyncSession and nothing else, so tests can hand them a
# session bound to a throwaway database.
