"""
repositories/driver_repo.py
---------------------------
Data access layer for drivers.
A driver row references its car through the nullable `car_id` column;
reads join the `cars` table so a Driver comes back with its Car attached.
"""

from typing import Any

from models.car import Car
from models.driver import Driver
from repositories.base_repo import BaseRepository
from repositories.exceptions import InvalidEntityError
from repositories.mapping import flag_or_false, is_null, text_or_empty


class DriverRepository(BaseRepository[Driver]):
    """Repository for CRUD operations on the drivers table."""

    table = "drivers"
    entity_name = "Driver"

    _SELECT_SQL = """
        SELECT d.id, d.name, d.available, d.car_id,
               c.license_plate, c.model, c.color
        FROM drivers d
        LEFT JOIN cars c ON c.id = d.car_id
    """
    _FIND_ALL_SQL = _SELECT_SQL + " ORDER BY d.id;"
    _FIND_BY_ID_SQL = _SELECT_SQL + " WHERE d.id = %s;"

    def _validate(self, driver: Driver) -> None:
        """A driver may only reference a car that is already stored."""
        if driver.car is not None and driver.car.id is None:
            raise InvalidEntityError(
                f"Driver '{driver.name}' references a car that has not been saved yet"
            )

    def _columns(self, driver: Driver) -> dict[str, Any]:
        # Updates always write car_id so that removing a car clears the column.
        return {
            "name": driver.name,
            "available": driver.available,
            "car_id": driver.car.id if driver.car else None,
        }

    def _insert_values(self, driver: Driver) -> dict[str, Any]:
        values: dict[str, Any] = {
            "name": driver.name,
            "available": driver.available,
        }
        if driver.has_car():
            values["car_id"] = driver.car.id
        return values

    @staticmethod
    def _row_to_entity(row: dict) -> Driver:
        """
        Convert a joined drivers/cars row to a Driver.

        The car is read only when `car_id` is not NULL. A driver without a
        car gets `car=None`, never a Car with empty fields.
        """
        car = None
        if not is_null(row, "car_id"):
            car = Car(
                id=row["car_id"],
                license_plate=text_or_empty(row, "license_plate"),
                model=text_or_empty(row, "model"),
                color=text_or_empty(row, "color"),
            )
        return Driver(
            id=row["id"],
            name=text_or_empty(row, "name"),
            available=flag_or_false(row, "available"),
            car=car,
        )
