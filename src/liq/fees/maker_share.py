"""Maker/platform fee split service with administrator-gated configuration."""

from __future__ import annotations

import logging
import threading
from typing import NamedTuple

from liq.fees.config import PROPORTION_DENOMINATOR, MakerProportionConfig
from liq.fees.exceptions import (
    AlreadyInitializedError,
    InvalidFeeError,
    InvalidShareError,
    NotInitializedError,
    UnauthorizedError,
)
from liq.fees.snapshot import ShareConfigSnapshot

logger = logging.getLogger(__name__)


class FeeSplit(NamedTuple):
    maker_share: int
    platform_share: int


def _check_share(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidShareError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= PROPORTION_DENOMINATOR:
        raise InvalidShareError(f"{name} must be in [0, {PROPORTION_DENOMINATOR}], got {value}")
    return value


class MakerShareConfig:
    """Owns the maker proportion record for one deployment.

    The record is created once by ``initialize`` and afterwards replaced
    only by the administrator through ``set_shares``. Each stored record is
    an immutable ``MakerProportionConfig``; updates swap the whole record
    under a lock so readers always observe a consistent pair.
    """

    def __init__(self, admin: str) -> None:
        if not admin:
            raise ValueError("admin identity must not be empty")
        self._admin = admin
        self._lock = threading.Lock()
        self._record: MakerProportionConfig | None = None

    @property
    def admin(self) -> str:
        return self._admin

    @property
    def is_initialized(self) -> bool:
        return self._record is not None

    def _authorize(self, caller: str, action: str) -> None:
        if caller != self._admin:
            logger.warning(
                "Unauthorized fee configuration call",
                extra={"action": action, "caller": caller},
            )
            raise UnauthorizedError(f"{caller!r} is not allowed to {action}")

    def initialize(self, caller: str) -> None:
        """Create the record with the default split (grid 900, order 400).

        Raises:
            UnauthorizedError: If ``caller`` is not the administrator.
            AlreadyInitializedError: If the record already exists.
        """
        self._authorize(caller, "initialize")
        with self._lock:
            if self._record is not None:
                raise AlreadyInitializedError("maker share configuration already initialized")
            self._record = MakerProportionConfig()
            record = self._record
        logger.info(
            "Maker share configuration initialized",
            extra={
                "admin": self._admin,
                "grid_proportion": record.grid_proportion,
                "order_proportion": record.order_proportion,
            },
        )

    def set_shares(self, caller: str, grid: int, order: int) -> None:
        """Replace both maker proportions.

        Raises:
            UnauthorizedError: If ``caller`` is not the administrator.
            InvalidShareError: If either proportion is outside [0, 1000].
            NotInitializedError: If ``initialize`` has not run.
        """
        self._authorize(caller, "set_shares")
        new_record = MakerProportionConfig(
            grid_proportion=_check_share("grid", grid),
            order_proportion=_check_share("order", order),
        )
        with self._lock:
            if self._record is None:
                raise NotInitializedError("maker share configuration not initialized")
            previous = self._record
            self._record = new_record
        logger.info(
            "Maker shares updated",
            extra={
                "previous_grid_proportion": previous.grid_proportion,
                "previous_order_proportion": previous.order_proportion,
                "grid_proportion": grid,
                "order_proportion": order,
            },
        )

    def proportions(self) -> MakerProportionConfig:
        """Return the current record (read-only)."""
        record = self._record
        if record is None:
            raise NotInitializedError("maker share configuration not initialized")
        return record

    def split_fee(self, fee: int, is_grid: bool) -> FeeSplit:
        """Split ``fee`` into (maker_share, platform_share).

        The maker share is rounded down; the platform receives the remainder,
        so ``maker_share + platform_share == fee`` always holds.
        """
        record = self.proportions()
        if not isinstance(fee, int) or isinstance(fee, bool):
            raise TypeError("fee must be an int")
        if fee < 0:
            raise InvalidFeeError(f"fee must be >= 0, got {fee}")
        ratio = record.ratio_for(is_grid)
        # Python ints are unbounded: fee * ratio is exact before the floor division.
        maker_share = fee * ratio // PROPORTION_DENOMINATOR
        return FeeSplit(maker_share=maker_share, platform_share=fee - maker_share)

    def to_snapshot(self) -> ShareConfigSnapshot:
        record = self.proportions()
        return ShareConfigSnapshot(
            admin=self._admin,
            grid_proportion=record.grid_proportion,
            order_proportion=record.order_proportion,
        )

    @classmethod
    def from_snapshot(cls, snapshot: ShareConfigSnapshot) -> MakerShareConfig:
        """Restore an initialized service from a persisted snapshot."""
        service = cls(admin=snapshot.admin)
        service._record = MakerProportionConfig(
            grid_proportion=_check_share("grid", snapshot.grid_proportion),
            order_proportion=_check_share("order", snapshot.order_proportion),
        )
        logger.debug(
            "Maker share configuration restored",
            extra={
                "admin": snapshot.admin,
                "grid_proportion": snapshot.grid_proportion,
                "order_proportion": snapshot.order_proportion,
            },
        )
        return service
