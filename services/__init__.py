"""
services/ - Service Layer
=========================
Thin services sitting between the transport layer and the repositories.
"""

from services.crud_service import AddressService, CarService, CrudService, PassengerService
from services.driver_service import DriverService

__all__ = [
    "CrudService",
    "DriverService",
    "CarService",
    "PassengerService",
    "AddressService",
]
