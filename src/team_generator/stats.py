"""Rating statistics: average, standard deviation and match count."""

import math
from typing import Iterable, List, Sequence, Union

from src.team_generator.models import PlayerStats, Rating

RatingLike = Union[Rating, float, int]


def _values(ratings: Iterable[RatingLike]) -> List[float]:
    """Extract numeric values from ratings or plain numbers."""
    return [float(r.value) if isinstance(r, Rating) else float(r) for r in ratings]


def calculate_average(ratings: Sequence[RatingLike]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    values = _values(ratings)
    if not values:
        return 0.0
    return sum(values) / len(values)


def calculate_std_dev(ratings: Sequence[RatingLike]) -> float:
    """Population standard deviation around the sequence's own mean.

    Fewer than two values have no meaningful spread, so 0.0 is returned.
    """
    values = _values(ratings)
    n = len(values)
    if n < 2:
        return 0.0
    mean = sum(values) / n
    variance = sum((v - mean) ** 2 for v in values) / n
    return math.sqrt(variance)


def calculate_stats(ratings: Sequence[RatingLike]) -> PlayerStats:
    """Average, standard deviation and match count in one record."""
    return PlayerStats(
        average=calculate_average(ratings),
        matches=len(ratings),
        std_dev=calculate_std_dev(ratings),
    )
