"""Configuration models for liq-fees."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

PROPORTION_DENOMINATOR = 1000
DEFAULT_GRID_PROPORTION = 900
DEFAULT_ORDER_PROPORTION = 400


class MakerProportionConfig(BaseModel):
    """Maker proportions in parts-per-thousand for grid fees and order fees."""

    model_config = ConfigDict(frozen=True, strict=True)

    grid_proportion: int = DEFAULT_GRID_PROPORTION
    order_proportion: int = DEFAULT_ORDER_PROPORTION

    @field_validator("grid_proportion", "order_proportion")
    @classmethod
    def validate_proportion(cls, v: int) -> int:
        if not 0 <= v <= PROPORTION_DENOMINATOR:
            raise ValueError(f"proportions must be in [0, {PROPORTION_DENOMINATOR}]")
        return v

    def ratio_for(self, is_grid: bool) -> int:
        return self.grid_proportion if is_grid else self.order_proportion


class FeeServiceConfig(BaseModel):
    """Deployment settings for a maker share service."""

    admin: str
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    @field_validator("admin")
    @classmethod
    def validate_admin(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("admin identity must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported log_level: {v}")
        return level
