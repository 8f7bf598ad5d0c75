"""
models/address.py
-----------------
Domain model for pickup and drop-off addresses.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Address:
    """
    A free-text address.

    Attributes:
        id: Database primary key, assigned by storage (None for new records).
        text: The address as written, e.g. '221B Baker Street, London'.
    """
    text: str
    id: Optional[int] = None
