"""Cost factor bounds and validation."""

from __future__ import annotations

from passhash.domain.errors import InvalidCostFactorError

MIN_COST = 4
MAX_COST = 31
DEFAULT_COST = 10


def validate_cost(*, cost: int) -> int:
    """Return cost unchanged or raise when it is outside the accepted range."""

    if isinstance(cost, bool) or not isinstance(cost, int):
        raise InvalidCostFactorError(f"cost must be an integer, got {type(cost).__name__}")
    if cost < MIN_COST or cost > MAX_COST:
        raise InvalidCostFactorError(
            f"cost {cost} is outside the accepted range {MIN_COST}..{MAX_COST}"
        )
    return cost
