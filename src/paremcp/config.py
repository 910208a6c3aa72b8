"""Runtime settings for the pare-mcp output shaping layer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

_DEFAULT_SIZE_METRIC = "tokens"
_DEFAULT_CHARS_PER_TOKEN = 4.0
_DEFAULT_LOG_LEVEL = "WARNING"
_SIZE_METRICS = ("tokens", "chars")


@dataclass(frozen=True)
class OutputShapingSettings:
    """Holds the settings the output shaping layer reads at startup."""

    size_metric: str = _DEFAULT_SIZE_METRIC
    chars_per_token: float = _DEFAULT_CHARS_PER_TOKEN
    log_level: str = _DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.size_metric not in _SIZE_METRICS:
            raise ValueError(
                f"size_metric must be one of {', '.join(_SIZE_METRICS)}, got '{self.size_metric}'"
            )
        if self.chars_per_token <= 0:
            raise ValueError("chars_per_token must be positive")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")

    def with_overrides(
        self,
        *,
        size_metric: Optional[str] = None,
        chars_per_token: Optional[float] = None,
        log_level: Optional[str] = None,
    ) -> "OutputShapingSettings":
        """Return a copy with the provided overrides applied."""

        cfg = self
        if size_metric:
            cfg = replace(cfg, size_metric=size_metric.strip().lower())
        if chars_per_token is not None:
            cfg = replace(cfg, chars_per_token=chars_per_token)
        if log_level:
            cfg = replace(cfg, log_level=log_level.strip().upper())
        return cfg


def load_settings(
    *,
    size_metric: Optional[str] = None,
    chars_per_token: Optional[float] = None,
    log_level: Optional[str] = None,
) -> OutputShapingSettings:
    """Load settings from environment variables and keyword overrides.

    Environment variables:
        PARE_SIZE_METRIC: ``tokens`` (default) or ``chars``.
        PARE_CHARS_PER_TOKEN: positive float used by the token estimator.
        PARE_LOG_LEVEL: log level name passed to ``configure_logging``.

    Raises:
        ValueError: If any resolved value is invalid.
    """

    resolved_metric = (
        (size_metric or "").strip().lower()
        or os.getenv("PARE_SIZE_METRIC", "").strip().lower()
        or _DEFAULT_SIZE_METRIC
    )

    resolved_ratio = chars_per_token
    if resolved_ratio is None:
        raw_ratio = os.getenv("PARE_CHARS_PER_TOKEN", "").strip()
        if raw_ratio:
            try:
                resolved_ratio = float(raw_ratio)
            except ValueError as exc:
                raise ValueError(
                    f"PARE_CHARS_PER_TOKEN must be a number, got '{raw_ratio}'"
                ) from exc
        else:
            resolved_ratio = _DEFAULT_CHARS_PER_TOKEN

    resolved_level = (
        (log_level or "").strip().upper()
        or os.getenv("PARE_LOG_LEVEL", "").strip().upper()
        or _DEFAULT_LOG_LEVEL
    )

    return OutputShapingSettings(
        size_metric=resolved_metric,
        chars_per_token=resolved_ratio,
        log_level=resolved_level,
    )


def configure_logging(settings: Optional[OutputShapingSettings] = None) -> None:
    """Configure root logging at the level named in ``settings``."""
    cfg = settings or load_settings()
    logging.basicConfig(level=cfg.log_level)
