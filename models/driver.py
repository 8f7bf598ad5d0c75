"""
models/driver.py
----------------
Domain model for drivers and the car they own.
"""

from dataclasses import dataclass
from typing import Optional

from models.car import Car


@dataclass
class Driver:
    """
    Represents a driver that can be dispatched.

    Attributes:
        id: Database primary key (None for new records).
        name: Full name of the driver.
        available: Whether the driver can take a ride right now.
        car: The car the driver owns, or None when the driver has no car.
             A car attached to a driver must already be persisted.
    """
    name: str
    available: bool = False
    car: Optional[Car] = None
    id: Optional[int] = None

    def has_car(self) -> bool:
        """Returns True if a car is attached to this driver."""
        return self.car is not None

    def __str__(self) -> str:
        status = "available" if self.available else "busy"
        car = str(self.car) if self.car else "no car"
        return f"{self.name} [{status}] - {car}"
