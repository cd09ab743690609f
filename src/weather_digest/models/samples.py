"""
Raw sample data models.

Contains DTOs for normalized source records and day buckets.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class HourlyRecord:
    """One timestamp of a source block with its canonical variable values."""

    timestamp: str
    values: Dict[str, Optional[float]] = field(default_factory=dict)

    def get(self, variable: str) -> Optional[float]:
        return self.values.get(variable)


@dataclass(frozen=True)
class TimedValue:
    """A finite sample tagged with its local minute of day."""

    minute: Optional[int]  # None for date-only timestamps
    value: float


@dataclass
class DayBucket:
    """Accumulator of finite samples for one local calendar day."""

    day_key: str
    samples: Dict[str, List[TimedValue]] = field(default_factory=dict)

    def add(self, variable: str, minute: Optional[int], value: float) -> None:
        self.samples.setdefault(variable, []).append(TimedValue(minute, value))

    def values(self, variable: str) -> List[float]:
        """All values collected for a variable, in insertion order."""
        return [sample.value for sample in self.samples.get(variable, [])]

    def values_between(self, variable: str, start: int, end: int) -> List[float]:
        """Values whose minute of day falls within [start, end] inclusive."""
        return [
            sample.value
            for sample in self.samples.get(variable, [])
            if sample.minute is not None and start <= sample.minute <= end
        ]
