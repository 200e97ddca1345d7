"""Runtime settings for the composition root.

Defaults match the house restaurant; each value can be overridden with an
``RMS_*`` environment variable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from rms.domain.exceptions import ValidationError
from rms.domain.model.value_objects import Money
from rms.domain.service.customization import DEFAULT_EXTRA_COST
from rms.domain.service.table_pool import DEFAULT_TABLE_CAPACITY

logger = logging.getLogger(__name__)

ENV_PREFIX = "RMS_"


@dataclass(frozen=True)
class Settings:
    restaurant_name: str = "The Gourmet Restaurant"
    table_pool_size: int = 5
    table_capacity: int = DEFAULT_TABLE_CAPACITY
    extra_ingredient_cost: Money = DEFAULT_EXTRA_COST

    def __post_init__(self) -> None:
        if not self.restaurant_name.strip():
            raise ValidationError("Restaurant name is required")
        if self.table_pool_size <= 0:
            raise ValidationError("Table pool size must be positive")
        if self.table_capacity <= 0:
            raise ValidationError("Table capacity must be positive")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from defaults plus any ``RMS_*`` overrides."""
    env = os.environ if environ is None else environ
    overrides: dict[str, object] = {}

    if f"{ENV_PREFIX}RESTAURANT_NAME" in env:
        overrides["restaurant_name"] = env[f"{ENV_PREFIX}RESTAURANT_NAME"]
    if f"{ENV_PREFIX}TABLE_POOL_SIZE" in env:
        overrides["table_pool_size"] = _int(env, "TABLE_POOL_SIZE")
    if f"{ENV_PREFIX}TABLE_CAPACITY" in env:
        overrides["table_capacity"] = _int(env, "TABLE_CAPACITY")
    if f"{ENV_PREFIX}EXTRA_COST" in env:
        overrides["extra_ingredient_cost"] = Money.of(env[f"{ENV_PREFIX}EXTRA_COST"])

    if overrides:
        logger.debug("Settings overridden from environment: %s", sorted(overrides))
    return Settings(**overrides)  # type: ignore[arg-type]


def _int(env: Mapping[str, str], key: str) -> int:
    raw = env[f"{ENV_PREFIX}{key}"]
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from exc
