"""Maker/platform fee splitting for the LIQ Stack."""

__all__ = [
    "FEE_DENOMINATOR",
    "PROPORTION_DENOMINATOR",
    "FeeTier",
    "FeeSplit",
    "MakerProportionConfig",
    "FeeServiceConfig",
    "MakerShareConfig",
    "ShareConfigSnapshot",
    "FeeError",
    "UnauthorizedError",
    "InvalidShareError",
    "InvalidFeeError",
    "NotInitializedError",
    "AlreadyInitializedError",
    "UnknownFeeTierError",
    "SnapshotFormatError",
    "ratio_of",
    "parse_tier",
    "total_fee",
    "split_fee_frame",
    "summarize_splits",
]

from liq.fees.batch import split_fee_frame, summarize_splits
from liq.fees.config import PROPORTION_DENOMINATOR, FeeServiceConfig, MakerProportionConfig
from liq.fees.exceptions import (
    AlreadyInitializedError,
    FeeError,
    InvalidFeeError,
    InvalidShareError,
    NotInitializedError,
    SnapshotFormatError,
    UnauthorizedError,
    UnknownFeeTierError,
)
from liq.fees.maker_share import FeeSplit, MakerShareConfig
from liq.fees.snapshot import ShareConfigSnapshot
from liq.fees.tiers import FEE_DENOMINATOR, FeeTier, parse_tier, ratio_of, total_fee

__version__ = "0.1.0"
