"""
services/driver_service.py
--------------------------
Business logic for drivers.
Resolves the car a driver references before handing the driver to the repository.
"""

from dataclasses import replace

from models.driver import Driver
from repositories.car_repo import CarRepository
from repositories.driver_repo import DriverRepository
from repositories.exceptions import EntityNotFoundError
from services.crud_service import CrudService
from utils.logger import get_logger

logger = get_logger(__name__)


class DriverService(CrudService[Driver]):
    """
    Handles drivers and their car assignment.

    Workflow for save:
        1. If the driver references a car, load it by id.
        2. Fail with EntityNotFoundError when the car does not exist.
        3. Persist the driver with the stored car attached.
    """

    def __init__(self, repo: DriverRepository, car_repo: CarRepository):
        super().__init__(repo)
        self.car_repo = car_repo

    def save(self, driver: Driver) -> Driver:
        """
        Insert or update a driver.

        Args:
            driver: The driver to persist. Its car may carry only an id;
                    the stored car replaces it.

        Returns:
            The persisted driver, with its car as stored.
        """
        if driver.car is not None and driver.car.id is not None:
            car = self.car_repo.find_by_id(driver.car.id)
            if car is None:
                logger.warning(f"Driver '{driver.name}' references unknown car #{driver.car.id}")
                raise EntityNotFoundError("Car", driver.car.id)
            driver = replace(driver, car=car)
        return self.repo.save(driver)
