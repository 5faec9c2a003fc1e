"""Typer-based command line interface for the generators.

``fuzzdata gen KIND`` prints random values of one kind, one per line, with
generator keywords passed as ``--param key=value``; ``fuzzdata kinds`` lists
the available kinds.

Exit codes
----------
0 success
2 usage error (unknown kind, bad option)
4 configuration error
5 generation error (invalid argument or impossible format constraint)
"""

from __future__ import annotations

import inspect
import os
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import load_config, set_config
from .generators import REGISTRY
from .sampling import UniformSampler, set_sampler
from .utils.errors import FuzzDataError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

log = get_logger(__name__)

app = typer.Typer(
    name="fuzzdata",
    help="Generate randomized, format-constrained values. Use 'fuzzdata gen KIND'.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


_RESERVED_PARAMS = frozenset({"sampler", "tables"})


def _coerce(raw: str) -> Any:
    """Read ``raw`` as a YAML scalar so ``5`` and ``false`` become int and bool."""

    try:
        loaded = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    return loaded if isinstance(loaded, (bool, int, float)) else raw


def _parse_params(params: list[str]) -> dict[str, Any]:
    parsed: dict[str, Any] = {}
    for item in params:
        key, sep, raw = item.partition("=")
        key = key.strip()
        if not sep or not key:
            _safe_exit(2, f"--param expects key=value, got {item!r}")
        if key in _RESERVED_PARAMS:
            _safe_exit(2, f"--param {key} cannot be set from the command line")
        parsed[key] = _coerce(raw)
    return parsed


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@app.callback()
def main() -> None:
    """Entry point for the fuzzdata command group."""
    pass


@app.command()
def kinds() -> None:
    """List generator kinds accepted by ``gen``."""

    for name in REGISTRY:
        typer.echo(name)


@app.command()
def gen(
    kind: str = typer.Argument(..., help="Generator kind, see 'fuzzdata kinds'"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of values"),
    length: Optional[int] = typer.Option(  # noqa: B008
        None, "--length", "-l", help="Length for string generators"
    ),
    params: Optional[list[str]] = typer.Option(  # noqa: B008
        None,
        "--param",
        "-p",
        help="Generator keyword as key=value, repeatable (e.g. -p words=5 -p paragraphs=2)",
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed the random source for a reproducible run"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Print ``count`` random values of ``kind``."""

    configure_logging(verbose)

    entry = REGISTRY.get(kind)
    if entry is None:
        _safe_exit(2, f"Unknown kind {kind!r}; choose from: {', '.join(REGISTRY)}")

    try:
        cfg = load_config(config_path)
    except (ValidationError, ValueError, OSError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    set_config(cfg)
    set_sampler(UniformSampler(seed=seed if seed is not None else cfg.sampling.seed))

    kwargs: dict[str, Any] = {}
    if length is not None:
        if not entry.takes_length:
            _safe_exit(2, f"Kind {kind!r} does not take --length")
        kwargs["length"] = length
    kwargs.update(_parse_params(params or []))
    try:
        inspect.signature(entry.func).bind(**kwargs)
    except TypeError as exc:
        _safe_exit(2, f"Kind {kind!r}: {exc}")

    try:
        for _ in range(count):
            text = _render(entry.func(**kwargs))
            typer.echo(text, nl=not text.endswith("\n"))
    except FuzzDataError as exc:
        if verbose:
            log.error("generation failed: %s: %s", type(exc).__name__, exc)
        _safe_exit(5, str(exc))
