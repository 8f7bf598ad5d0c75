"""
models/passenger.py
-------------------
Domain model for passengers.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Passenger:
    """
    Represents a passenger requesting rides.

    Attributes:
        id: Database primary key (None for new records).
        name: Name of the passenger.
    """
    name: str
    id: Optional[int] = None
