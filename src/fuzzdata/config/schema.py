"""Typed configuration schema and loader for the fuzzdata package."""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, conlist, constr, field_validator

from fuzzdata.utils.logging import get_logger

log = get_logger(__name__)

NETMASK_COUNT = 33

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SamplingSettings(BaseModel):
    """Seeding of the process-wide random source."""

    seed_env: str
    seed: int | None = None

    model_config = ConfigDict(extra="forbid")


class TableSettings(BaseModel):
    """Static tables consumed by the structured generators."""

    schemes: conlist(constr(min_length=1), min_length=1)
    extended_schemes: conlist(constr(min_length=1), min_length=1)
    subdomains: conlist(constr(min_length=1), min_length=1)
    tlds: conlist(constr(min_length=1), min_length=1)
    html_tags: conlist(constr(min_length=1), min_length=1)
    netmasks: conlist(str, min_length=NETMASK_COUNT, max_length=NETMASK_COUNT)
    lorem_ipsum: constr(min_length=1)

    model_config = ConfigDict(extra="forbid")

    @field_validator("netmasks")
    @classmethod
    def _dotted_quads(cls, value: list[str]) -> list[str]:
        for mask in value:
            octets = mask.split(".")
            if len(octets) != 4 or not all(o.isdigit() and int(o) <= 255 for o in octets):
                raise ValueError(f"invalid netmask {mask!r}")
        return value


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    sampling: SamplingSettings
    tables: TableSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < environment
    variable named by ``sampling.seed_env``.
    """

    with (
        importlib_resources.files("fuzzdata.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
        log.debug("merged config overrides from %s", path)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.sampling.seed_env
    if seed_env in environ:
        raw = environ[seed_env].strip()
        try:
            cfg.sampling.seed = int(raw)
        except ValueError:
            raise ValueError(f"{seed_env} must be an integer seed, got {raw!r}") from None
        log.debug("seed taken from %s", seed_env)

    return cfg


# ---------------------------------------------------------------------------
# Process-wide active configuration
# ---------------------------------------------------------------------------

_active: ConfigModel | None = None
_active_lock = threading.Lock()


def get_config() -> ConfigModel:
    """Return the active configuration, loading package defaults on first use."""

    global _active
    cfg = _active
    if cfg is None:
        with _active_lock:
            if _active is None:
                _active = load_config()
            cfg = _active
    return cfg


def set_config(cfg: ConfigModel | None) -> None:
    """Replace the active configuration; ``None`` restores lazy defaults."""

    global _active
    with _active_lock:
        _active = cfg


__all__ = [
    "ConfigModel",
    "SamplingSettings",
    "TableSettings",
    "NETMASK_COUNT",
    "deep_merge_dicts",
    "load_config",
    "get_config",
    "set_config",
]
