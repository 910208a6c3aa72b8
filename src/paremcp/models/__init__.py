"""Data models for pare-mcp."""

from .run_models import RunResult

__all__ = ["RunResult"]
