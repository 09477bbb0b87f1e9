"""Vectorized fee splitting over polars frames of realized fees."""

from __future__ import annotations

import polars as pl

from liq.fees.config import PROPORTION_DENOMINATOR
from liq.fees.exceptions import InvalidFeeError
from liq.fees.maker_share import MakerShareConfig


def _check_grid_column(frame: pl.DataFrame, grid_col: str) -> None:
    grid_dtype = frame.schema[grid_col]
    if grid_dtype != pl.Boolean:
        raise TypeError(f"{grid_col} must be a boolean column, got {grid_dtype}")
    if frame[grid_col].null_count():
        raise InvalidFeeError(f"{grid_col} must not contain nulls")


def split_fee_frame(
    frame: pl.DataFrame,
    config: MakerShareConfig,
    fee_col: str = "fee",
    grid_col: str = "is_grid",
) -> pl.DataFrame:
    """Append ``maker_share`` and ``platform_share`` columns to ``frame``.

    All rows are split against one read of the current proportions, so a
    concurrent ``set_shares`` cannot produce a mixed result.
    """
    missing = [c for c in (fee_col, grid_col) if c not in frame.columns]
    if missing:
        raise ValueError(f"frame is missing required columns: {missing}")
    fee_dtype = frame.schema[fee_col]
    if not fee_dtype.is_integer():
        raise TypeError(f"{fee_col} must be an integer column, got {fee_dtype}")
    if frame[fee_col].null_count():
        raise InvalidFeeError(f"{fee_col} must not contain nulls")
    if frame.height and frame[fee_col].min() < 0:
        raise InvalidFeeError(f"{fee_col} must be >= 0")
    _check_grid_column(frame, grid_col)

    record = config.proportions()
    work_dtype = pl.UInt64 if fee_dtype == pl.UInt64 else pl.Int64
    fee = pl.col(fee_col).cast(work_dtype)
    ratio = (
        pl.when(pl.col(grid_col))
        .then(pl.lit(record.grid_proportion))
        .otherwise(pl.lit(record.order_proportion))
        .cast(work_dtype)
    )
    # floor(fee * ratio / D) == (fee // D) * ratio + (fee % D) * ratio // D; neither term overflows 64 bits.
    maker = (fee // PROPORTION_DENOMINATOR) * ratio + (fee % PROPORTION_DENOMINATOR) * ratio // PROPORTION_DENOMINATOR
    return frame.with_columns(maker.alias("maker_share")).with_columns(
        (pl.col(fee_col).cast(work_dtype) - pl.col("maker_share")).alias("platform_share")
    )


def summarize_splits(
    frame: pl.DataFrame,
    fee_col: str = "fee",
    grid_col: str = "is_grid",
) -> dict[str, int]:
    """Total fees, maker shares and platform shares, overall and per category."""
    for col in (fee_col, "maker_share", "platform_share", grid_col):
        if col not in frame.columns:
            raise ValueError(f"frame is missing required column: {col}")
    _check_grid_column(frame, grid_col)
    is_grid = pl.col(grid_col)
    row = frame.select(
        pl.col(fee_col).sum().alias("fee"),
        pl.col("maker_share").sum().alias("maker_share"),
        pl.col("platform_share").sum().alias("platform_share"),
        pl.col("maker_share").filter(is_grid).sum().alias("grid_maker_share"),
        pl.col("platform_share").filter(is_grid).sum().alias("grid_platform_share"),
        pl.col("maker_share").filter(~is_grid).sum().alias("order_maker_share"),
        pl.col("platform_share").filter(~is_grid).sum().alias("order_platform_share"),
    ).row(0, named=True)
    return {key: int(value or 0) for key, value in row.items()}
