"""Domain models for water intake."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

ML_PER_OZ = 29.5735


class WaterUnit(str, Enum):
    """Units a water amount can be recorded in."""

    ML = "ml"
    OZ = "oz"


@dataclass(frozen=True)
class WaterEntry:
    """A logged amount of water."""

    id: UUID
    amount: float
    unit: WaterUnit
    logged_at: datetime

    @property
    def volume_ml(self) -> float:
        """Amount converted to milliliters."""
        if self.unit == WaterUnit.OZ:
            return self.amount * ML_PER_OZ
        return self.amount
