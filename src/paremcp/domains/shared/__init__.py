"""Shared Kernel - base types used by every bounded context."""

from .kernel import ShapeModel

__all__ = ["ShapeModel"]
