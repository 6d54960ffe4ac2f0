"""
Session settings.

Precedence, lowest to highest: built-in defaults, a TOML file
(`justact.toml` in the working directory unless given explicitly),
environment variables, then CLI options.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

from .audit.sinks import DEFAULT_INSPECTOR_TIMEOUT
from .ledger.labels import LABEL_STYLES

DEFAULT_CONFIG_NAME = "justact.toml"

ENV_INSPECTOR = "JUSTACT_INSPECTOR"
ENV_INSPECTOR_TIMEOUT = "JUSTACT_INSPECTOR_TIMEOUT"
ENV_LABEL_STYLE = "JUSTACT_LABEL_STYLE"


@dataclass(frozen=True)
class Settings:
    label_style: str = "alpha"
    start_time: int = 0
    inspector: str | None = None  # shell-split command line
    inspector_timeout: float | None = DEFAULT_INSPECTOR_TIMEOUT

    def __post_init__(self) -> None:
        if self.label_style not in LABEL_STYLES:
            raise ValueError(f"Invalid label_style: {self.label_style}")
        if self.start_time < 0:
            raise ValueError("start_time must be a non-negative integer")
        if self.inspector_timeout is not None and self.inspector_timeout <= 0:
            raise ValueError("inspector timeout must be positive")

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _parse_timeout(raw: Any, source: str) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{source}: timeout must be a number, got {raw!r}") from None


def load_settings_file(path: Path, base: Settings | None = None) -> Settings:
    """Load settings from TOML, on top of `base`."""
    import tomllib

    data = tomllib.loads(path.read_text(encoding="utf-8"))
    settings = base or Settings()

    ledger = _coerce_dict(data.get("ledger"))
    inspector = _coerce_dict(data.get("inspector"))

    overrides: dict[str, Any] = {}
    if "label_style" in ledger:
        overrides["label_style"] = str(ledger["label_style"]).strip()
    if "start_time" in ledger:
        start = ledger["start_time"]
        if not isinstance(start, int) or isinstance(start, bool):
            raise ValueError(f"{path}: ledger.start_time must be an integer")
        overrides["start_time"] = start
    if "command" in inspector:
        command = str(inspector["command"]).strip()
        overrides["inspector"] = command or None
    if "timeout" in inspector:
        overrides["inspector_timeout"] = _parse_timeout(inspector["timeout"], f"{path}: inspector.timeout")

    return replace(settings, **overrides)


def apply_environment(settings: Settings, environ: Mapping[str, str] | None = None) -> Settings:
    """Apply JUSTACT_* environment variables on top of `settings`."""
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    if env.get(ENV_INSPECTOR):
        overrides["inspector"] = env[ENV_INSPECTOR]
    if env.get(ENV_INSPECTOR_TIMEOUT):
        overrides["inspector_timeout"] = _parse_timeout(env[ENV_INSPECTOR_TIMEOUT], ENV_INSPECTOR_TIMEOUT)
    if env.get(ENV_LABEL_STYLE):
        overrides["label_style"] = env[ENV_LABEL_STYLE].strip()
    return replace(settings, **overrides)


def load_settings(
    config_path: Path | None = None,
    *,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve settings from file and environment.

    An explicit `config_path` must exist. Without one, `justact.toml` in
    `cwd` is used if present.
    """
    settings = Settings()
    if config_path is not None:
        if not config_path.is_file():
            raise FileNotFoundError(f"config file not found: {config_path}")
        settings = load_settings_file(config_path, settings)
    else:
        candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
        if candidate.is_file():
            settings = load_settings_file(candidate, settings)
    return apply_environment(settings, environ)
