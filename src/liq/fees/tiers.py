"""Fee tier registry: closed set of tiers and their ratios in parts-per-million."""

from __future__ import annotations

from enum import Enum

from liq.fees.exceptions import InvalidFeeError, UnknownFeeTierError

FEE_DENOMINATOR = 1_000_000


class FeeTier(str, Enum):
    """Fee tiers offered by the exchange, tagged by their percentage."""

    TIER_0_02PCT = "0.02%"
    TIER_0_05PCT = "0.05%"
    TIER_0_1PCT = "0.1%"


_TIER_RATIOS: dict[FeeTier, int] = {
    FeeTier.TIER_0_02PCT: 200,
    FeeTier.TIER_0_05PCT: 500,
    FeeTier.TIER_0_1PCT: 1000,
}


def ratio_of(tier: FeeTier | str) -> int:
    """Return the tier ratio in units of ``1 / FEE_DENOMINATOR``.

    Accepts a ``FeeTier`` member or its tag (e.g. ``"0.05%"``).

    Raises:
        UnknownFeeTierError: If the selector is not a registered tier.
    """
    try:
        return _TIER_RATIOS[FeeTier(tier)]
    except (ValueError, KeyError):
        raise UnknownFeeTierError(f"Unknown fee tier: {tier!r}") from None


def parse_tier(value: str) -> FeeTier:
    """Resolve a tier from its tag or member name (case-insensitive)."""
    text = value.strip()
    for tier in FeeTier:
        if text == tier.value or text.upper() == tier.name:
            return tier
    raise UnknownFeeTierError(f"Unknown fee tier: {value!r}")


def total_fee(notional: int, tier: FeeTier | str) -> int:
    """Total fee owed on ``notional`` at ``tier``, rounded down."""
    if not isinstance(notional, int) or isinstance(notional, bool):
        raise TypeError("notional must be an int")
    if notional < 0:
        raise InvalidFeeError(f"notional must be >= 0, got {notional}")
    return notional * ratio_of(tier) // FEE_DENOMINATOR
