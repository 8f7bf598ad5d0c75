"""
main.py
-------
Wiring for the dispatch backend.

Responsibilities:
    - Create the `Database` handle and open its connection pool.
    - Build every repository and service on top of that one handle.
    - Close the pool on shutdown.

The transport layer imports `build_services` and owns the handle's lifecycle.
Running this module directly checks connectivity and reports row counts.
"""

from dataclasses import dataclass

from db.connection import Database
from repositories.address_repo import AddressRepository
from repositories.car_repo import CarRepository
from repositories.driver_repo import DriverRepository
from repositories.passenger_repo import PassengerRepository
from services.crud_service import AddressService, CarService, PassengerService
from services.driver_service import DriverService
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Services:
    """All services, sharing one storage handle."""
    drivers: DriverService
    cars: CarService
    passengers: PassengerService
    addresses: AddressService


def build_services(db: Database) -> Services:
    """Create repositories and services bound to `db`."""
    car_repo = CarRepository(db)
    return Services(
        drivers=DriverService(DriverRepository(db), car_repo),
        cars=CarService(car_repo),
        passengers=PassengerService(PassengerRepository(db)),
        addresses=AddressService(AddressRepository(db)),
    )


def main() -> None:
    """Open the pool, log how many rows each aggregate holds, then close."""
    logger.info("Initializing database...")
    db = Database()
    db.open()
    try:
        services = build_services(db)
        logger.info(f"Drivers: {len(services.drivers.find_all())}")
        logger.info(f"Cars: {len(services.cars.find_all())}")
        logger.info(f"Passengers: {len(services.passengers.find_all())}")
        logger.info(f"Addresses: {len(services.addresses.find_all())}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
