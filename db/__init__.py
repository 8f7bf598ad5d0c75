"""
db/ - Database Layer
====================
Holds the PostgreSQL connection pool behind an explicitly passed `Database` handle.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""

from db.connection import Database

__all__ = ["Database"]
