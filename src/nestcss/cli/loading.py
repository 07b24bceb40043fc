"""Shared input loading for CLI commands."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click

from nestcss.breakpoints import BreakpointRegistry
from nestcss.config import DEFAULT_CONFIG, CompilerConfig
from nestcss.constants import PALETTE


def load_style(path: str) -> Mapping[str, Any]:
    """Read a JSON style tree; exits with a usage error when it is not an object."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise click.ClickException(f"{path} must contain a JSON object")
    return data


def build_config(breakpoints: str | None = None, palette: bool = False) -> CompilerConfig:
    """Apply CLI overrides (breakpoint file, built-in palette) to the default config."""
    changes: dict[str, Any] = {}
    if breakpoints:
        try:
            raw = json.loads(Path(breakpoints).read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError("breakpoint file must contain a JSON object")
            changes["breakpoints"] = BreakpointRegistry.from_dict(raw)
        except (json.JSONDecodeError, ValueError) as exc:
            raise click.ClickException(f"Invalid breakpoints in {breakpoints}: {exc}") from exc
    if palette:
        changes["constants"] = PALETTE
    return DEFAULT_CONFIG.with_overrides(**changes) if changes else DEFAULT_CONFIG
