import polars as pl
import pytest

from liq.fees.batch import split_fee_frame, summarize_splits
from liq.fees.exceptions import InvalidFeeError, NotInitializedError
from liq.fees.maker_share import MakerShareConfig

ADMIN = "admin-0x1"


@pytest.fixture
def service() -> MakerShareConfig:
    svc = MakerShareConfig(admin=ADMIN)
    svc.initialize(ADMIN)
    return svc


def test_split_frame_matches_scalar_split(service: MakerShareConfig) -> None:
    fees = [0, 1, 10, 999, 1000, 1001, 123_456_789]
    frame = pl.DataFrame({"fee": fees * 2, "is_grid": [True] * len(fees) + [False] * len(fees)})
    out = split_fee_frame(frame, service)
    for fee, is_grid, maker, platform in out.select("fee", "is_grid", "maker_share", "platform_share").iter_rows():
        assert (maker, platform) == service.split_fee(fee, is_grid=is_grid)


def test_split_frame_large_uint64_fee(service: MakerShareConfig) -> None:
    fee = 2**64 - 1
    frame = pl.DataFrame({"fee": pl.Series([fee], dtype=pl.UInt64), "is_grid": [True]})
    out = split_fee_frame(frame, service)
    assert out["maker_share"][0] == fee * 900 // 1000
    assert out["maker_share"][0] + out["platform_share"][0] == fee


def test_split_frame_custom_columns(service: MakerShareConfig) -> None:
    frame = pl.DataFrame({"realized": [10], "grid": [False]})
    out = split_fee_frame(frame, service, fee_col="realized", grid_col="grid")
    assert out.row(0, named=True)["maker_share"] == 4
    assert out.row(0, named=True)["platform_share"] == 6


def test_split_frame_missing_column(service: MakerShareConfig) -> None:
    with pytest.raises(ValueError, match="missing"):
        split_fee_frame(pl.DataFrame({"fee": [1]}), service)


def test_split_frame_rejects_negative(service: MakerShareConfig) -> None:
    with pytest.raises(InvalidFeeError):
        split_fee_frame(pl.DataFrame({"fee": [5, -1], "is_grid": [True, True]}), service)


def test_split_frame_rejects_nulls(service: MakerShareConfig) -> None:
    with pytest.raises(InvalidFeeError):
        split_fee_frame(pl.DataFrame({"fee": [5, None], "is_grid": [True, True]}), service)


def test_split_frame_rejects_float_fees(service: MakerShareConfig) -> None:
    with pytest.raises(TypeError):
        split_fee_frame(pl.DataFrame({"fee": [1.5], "is_grid": [True]}), service)


def test_split_frame_requires_initialized() -> None:
    with pytest.raises(NotInitializedError):
        split_fee_frame(pl.DataFrame({"fee": [1], "is_grid": [True]}), MakerShareConfig(admin=ADMIN))


def test_summarize_splits(service: MakerShareConfig) -> None:
    frame = pl.DataFrame({"fee": [10, 100, 10], "is_grid": [True, True, False]})
    summary = summarize_splits(split_fee_frame(frame, service))
    assert summary == {
        "fee": 120,
        "maker_share": 9 + 90 + 4,
        "platform_share": 1 + 10 + 6,
        "grid_maker_share": 99,
        "grid_platform_share": 11,
        "order_maker_share": 4,
        "order_platform_share": 6,
    }


def test_summarize_empty_frame(service: MakerShareConfig) -> None:
    frame = pl.DataFrame({"fee": pl.Series([], dtype=pl.Int64), "is_grid": pl.Series([], dtype=pl.Boolean)})
    summary = summarize_splits(split_fee_frame(frame, service))
    assert all(v == 0 for v in summary.values())


def test_split_frame_rejects_null_category(service: MakerShareConfig) -> None:
    frame = pl.DataFrame({"fee": [10, 10], "is_grid": [True, None]})
    with pytest.raises(InvalidFeeError, match="is_grid"):
        split_fee_frame(frame, service)


def test_split_frame_rejects_integer_category(service: MakerShareConfig) -> None:
    with pytest.raises(TypeError, match="boolean"):
        split_fee_frame(pl.DataFrame({"fee": [10, 10], "is_grid": [1, 0]}), service)


def test_summarize_rejects_null_category() -> None:
    frame = pl.DataFrame(
        {"fee": [10, 10], "is_grid": [True, None], "maker_share": [9, 4], "platform_share": [1, 6]}
    )
    with pytest.raises(InvalidFeeError):
        summarize_splits(frame)


def test_summarize_categories_add_up(service: MakerShareConfig) -> None:
    frame = pl.DataFrame({"fee": [10, 7, 1001, 3], "is_grid": [True, False, True, False]})
    summary = summarize_splits(split_fee_frame(frame, service))
    assert summary["fee"] == 1021
    assert summary["grid_maker_share"] + summary["order_maker_share"] == summary["maker_share"]
    assert summary["grid_platform_share"] + summary["order_platform_share"] == summary["platform_share"]
    assert summary["maker_share"] + summary["platform_share"] == summary["fee"]
