"""Progress toward a spark: 300 draws, bought with crystals or tickets."""

from dataclasses import dataclass
from typing import Optional, Sequence

SPARK_DRAWS = 300
CRYSTALS_PER_DRAW = 300
DRAWS_PER_TEN_TICKET = 10


@dataclass(frozen=True)
class SparkProgress:
    draws: int

    @property
    def percent(self) -> float:
        return self.draws * 100 / SPARK_DRAWS

    @property
    def remaining(self) -> int:
        return max(SPARK_DRAWS - self.draws, 0)

    @property
    def remaining_crystals(self) -> int:
        return self.remaining * CRYSTALS_PER_DRAW

    @property
    def is_complete(self) -> bool:
        return self.draws >= SPARK_DRAWS


def calculate_spark(
    crystals: int, tickets: int = 0, ten_tickets: int = 0
) -> SparkProgress:
    if min(crystals, tickets, ten_tickets) < 0:
        raise ValueError("Spark amounts cannot be negative")
    draws = (
        crystals // CRYSTALS_PER_DRAW + tickets + ten_tickets * DRAWS_PER_TEN_TICKET
    )
    return SparkProgress(draws=draws)


def parse_spark_args(args: Sequence[str]) -> Optional[SparkProgress]:
    """Parse ``/spark`` arguments; None means the usage text should be shown."""
    if not 1 <= len(args) <= 3:
        return None
    try:
        amounts = [int(arg) for arg in args]
        return calculate_spark(*amounts)
    except ValueError:
        return None
