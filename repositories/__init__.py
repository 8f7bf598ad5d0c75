"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive raw rows from the database and return domain model objects.
"""

from repositories.address_repo import AddressRepository
from repositories.base_repo import BaseRepository, Insert, Update, plan_save
from repositories.car_repo import CarRepository
from repositories.driver_repo import DriverRepository
from repositories.exceptions import (
    EntityInUseError,
    EntityNotFoundError,
    InvalidEntityError,
    RepositoryError,
)
from repositories.passenger_repo import PassengerRepository

__all__ = [
    "BaseRepository",
    "Insert",
    "Update",
    "plan_save",
    "DriverRepository",
    "CarRepository",
    "PassengerRepository",
    "AddressRepository",
    "RepositoryError",
    "EntityNotFoundError",
    "EntityInUseError",
    "InvalidEntityError",
]
