"""
services/crud_service.py
------------------------
Thin services that forward validated entities to their repository.
"""

from typing import Generic, Optional, TypeVar

from models.address import Address
from models.car import Car
from models.passenger import Passenger
from repositories.base_repo import BaseRepository

T = TypeVar("T")


class CrudService(Generic[T]):
    """Forwards the four CRUD operations to a single repository."""

    def __init__(self, repo: BaseRepository[T]):
        self.repo = repo

    def find_all(self) -> list[T]:
        return self.repo.find_all()

    def find_by_id(self, entity_id: int) -> Optional[T]:
        return self.repo.find_by_id(entity_id)

    def save(self, entity: T) -> T:
        return self.repo.save(entity)

    def delete_by_id(self, entity_id: int) -> None:
        self.repo.delete_by_id(entity_id)


class CarService(CrudService[Car]):
    """Manages the car fleet."""


class PassengerService(CrudService[Passenger]):
    """Manages passengers."""


class AddressService(CrudService[Address]):
    """Manages stored addresses."""
