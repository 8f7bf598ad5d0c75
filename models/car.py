"""
models/car.py
-------------
Domain model for cars that drivers operate.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Car:
    """
    Represents a car available to the dispatch fleet.

    Attributes:
        id: Database primary key (None for new records).
        license_plate: Registration plate, e.g. 'ABC123'.
        model: Manufacturer model name.
        color: Paint color.
    """
    license_plate: str
    model: str
    color: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.license_plate} ({self.color} {self.model})"
