"""
repositories/car_repo.py
------------------------
Data access layer for cars.
"""

from typing import Any

from psycopg2 import errors

from models.car import Car
from repositories.base_repo import BaseRepository
from repositories.exceptions import EntityInUseError
from repositories.mapping import text_or_empty
from utils.logger import get_logger

logger = get_logger(__name__)


class CarRepository(BaseRepository[Car]):
    """Repository for CRUD operations on the cars table."""

    table = "cars"
    entity_name = "Car"

    _FIND_ALL_SQL = "SELECT id, license_plate, model, color FROM cars ORDER BY id;"
    _FIND_BY_ID_SQL = "SELECT id, license_plate, model, color FROM cars WHERE id = %s;"
    _IN_USE_SQL = "SELECT EXISTS (SELECT 1 FROM drivers WHERE car_id = %s) AS in_use;"

    def is_in_use(self, car_id: int) -> bool:
        """Returns True if any driver references the car."""
        with self.db.connection() as conn:
            with self._cursor(conn) as cur:
                cur.execute(self._IN_USE_SQL, (car_id,))
                return bool(cur.fetchone()["in_use"])

    def delete_by_id(self, car_id: int) -> None:
        """
        Delete a car that no driver references.

        Raises:
            EntityNotFoundError: If no car has this id.
            EntityInUseError: If a driver still references the car.
        """
        self._require_existing(car_id)
        if self.is_in_use(car_id):
            logger.warning(f"Refusing to delete Car #{car_id}: still assigned to a driver")
            raise EntityInUseError(f"Car with id {car_id} is still assigned to a driver")
        try:
            self._delete(car_id)
        except errors.ForeignKeyViolation as e:
            # A driver picked the car up between the check and the delete.
            raise EntityInUseError(f"Car with id {car_id} is still assigned to a driver") from e

    def _columns(self, car: Car) -> dict[str, Any]:
        return {
            "license_plate": car.license_plate,
            "model": car.model,
            "color": car.color,
        }

    @staticmethod
    def _row_to_entity(row: dict) -> Car:
        return Car(
            id=row["id"],
            license_plate=text_or_empty(row, "license_plate"),
            model=text_or_empty(row, "model"),
            color=text_or_empty(row, "color"),
        )
