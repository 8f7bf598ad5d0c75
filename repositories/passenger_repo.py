"""
repositories/passenger_repo.py
------------------------------
Data access layer for passengers.
"""

from typing import Any

from models.passenger import Passenger
from repositories.base_repo import BaseRepository
from repositories.mapping import text_or_empty


class PassengerRepository(BaseRepository[Passenger]):
    """Repository for CRUD operations on the passengers table."""

    table = "passengers"
    entity_name = "Passenger"

    _FIND_ALL_SQL = "SELECT id, name FROM passengers ORDER BY id;"
    _FIND_BY_ID_SQL = "SELECT id, name FROM passengers WHERE id = %s;"

    def _columns(self, passenger: Passenger) -> dict[str, Any]:
        return {"name": passenger.name}

    @staticmethod
    def _row_to_entity(row: dict) -> Passenger:
        return Passenger(id=row["id"], name=text_or_empty(row, "name"))
