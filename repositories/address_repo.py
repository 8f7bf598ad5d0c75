"""
repositories/address_repo.py
----------------------------
Data access layer for addresses.
"""

from typing import Any

from models.address import Address
from repositories.base_repo import BaseRepository
from repositories.mapping import text_or_empty


class AddressRepository(BaseRepository[Address]):
    """Repository for CRUD operations on the addresses table."""

    table = "addresses"
    entity_name = "Address"

    _FIND_ALL_SQL = "SELECT id, text FROM addresses ORDER BY id;"
    _FIND_BY_ID_SQL = "SELECT id, text FROM addresses WHERE id = %s;"

    def _columns(self, address: Address) -> dict[str, Any]:
        return {"text": address.text}

    @staticmethod
    def _row_to_entity(row: dict) -> Address:
        return Address(id=row["id"], text=text_or_empty(row, "text"))
