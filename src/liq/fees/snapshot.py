"""Snapshot persistence for the maker share configuration using msgspec/MessagePack."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import msgspec
from pydantic import ValidationError

from liq.fees.config import MakerProportionConfig
from liq.fees.exceptions import SnapshotFormatError

logger = logging.getLogger(__name__)

# Schema version for snapshot format migrations
SNAPSHOT_SCHEMA_VERSION = 1
# Files written before versioning carry no schema_version field
LEGACY_SCHEMA_VERSION = 0


@dataclass(frozen=True)
class ShareConfigSnapshot:
    """Serializable copy of the maker proportion record and its owner."""

    admin: str
    grid_proportion: int
    order_proportion: int
    schema_version: int = SNAPSHOT_SCHEMA_VERSION

    def save(self, path: Path) -> None:
        """Persist snapshot to disk using MessagePack format.

        Args:
            path: Path to save snapshot file (recommended extension: .msgpack)
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as f:
            f.write(msgspec.msgpack.encode(_snapshot_to_dict(self)))
        logger.info(
            "Fee configuration snapshot saved",
            extra={"path": str(path), "admin": self.admin, "schema_version": self.schema_version},
        )

    @staticmethod
    def load(path: Path) -> ShareConfigSnapshot:
        """Load snapshot from a MessagePack file.

        Raises:
            SnapshotFormatError: If the file is corrupted, has missing fields,
                carries invalid proportions, or uses a newer schema.
        """
        with path.open("rb") as f:
            raw_data = f.read()
        try:
            data = msgspec.msgpack.decode(raw_data)
        except msgspec.DecodeError as e:
            raise SnapshotFormatError(f"Failed to decode snapshot file '{path}': {e}") from e

        if not isinstance(data, dict):
            raise SnapshotFormatError(
                f"Invalid snapshot format: expected dict, got {type(data).__name__}"
            )

        schema_version = data.get("schema_version", LEGACY_SCHEMA_VERSION)
        if not isinstance(schema_version, int):
            raise SnapshotFormatError(f"Invalid snapshot schema version: {schema_version!r}")
        if schema_version > SNAPSHOT_SCHEMA_VERSION:
            raise SnapshotFormatError(
                f"Snapshot schema version {schema_version} is newer than supported "
                f"version {SNAPSHOT_SCHEMA_VERSION}. Please upgrade liq-fees."
            )

        snapshot = _dict_to_snapshot(data, schema_version, path)
        logger.info(
            "Fee configuration snapshot loaded",
            extra={"path": str(path), "admin": snapshot.admin, "schema_version": snapshot.schema_version},
        )
        return snapshot


def _snapshot_to_dict(snapshot: ShareConfigSnapshot) -> dict[str, Any]:
    return {
        "schema_version": snapshot.schema_version,
        "admin": snapshot.admin,
        "grid_proportion": snapshot.grid_proportion,
        "order_proportion": snapshot.order_proportion,
    }


def _dict_to_snapshot(data: dict[str, Any], schema_version: int, path: Path) -> ShareConfigSnapshot:
    try:
        admin = data["admin"]
        record = MakerProportionConfig(
            grid_proportion=data["grid_proportion"],
            order_proportion=data["order_proportion"],
        )
    except KeyError as e:
        raise SnapshotFormatError(f"Snapshot '{path}' is missing field {e}") from e
    except ValidationError as e:
        raise SnapshotFormatError(f"Snapshot '{path}' has invalid proportions: {e}") from e
    if not isinstance(admin, str) or not admin:
        raise SnapshotFormatError(f"Snapshot '{path}' has an invalid admin identity")
    return ShareConfigSnapshot(
        admin=admin,
        grid_proportion=record.grid_proportion,
        order_proportion=record.order_proportion,
        schema_version=schema_version,
    )
