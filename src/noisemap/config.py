"""Map configuration models and TOML loading."""

import tomllib
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from .traits import DEFAULT_ADDRESS_BITS

# Largest raster side accepted when max dimensions are enforced
RASTER_MAX_WIDTH = 32767
RASTER_MAX_HEIGHT = 32767


class WritePolicy(str, Enum):
    """What a map does with a write outside its bounds."""

    IGNORE = "ignore"
    CLAMP = "clamp"
    RAISE = "raise"


class MapConfig(BaseModel):
    """Allocation limits and write behavior for a single map."""

    has_max_dimension: bool = Field(
        default=False, description="Enforce max_width / max_height on allocation"
    )
    max_width: int = Field(
        default=RASTER_MAX_WIDTH, gt=0, description="Maximum width in cells"
    )
    max_height: int = Field(
        default=RASTER_MAX_HEIGHT, gt=0, description="Maximum height in cells"
    )
    address_bits: int = Field(
        default=DEFAULT_ADDRESS_BITS,
        ge=8,
        le=63,
        description="Addressable index range of a store, in bits",
    )
    max_bytes: int | None = Field(
        default=None, gt=0, description="Optional byte budget for a single store"
    )
    write_policy: WritePolicy = Field(
        default=WritePolicy.IGNORE, description="Out-of-range write behavior"
    )


class Config(BaseModel):
    """Complete noisemap configuration."""

    map: MapConfig = Field(default_factory=MapConfig)


def load_config(config_path: Path) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return Config.model_validate(data)
