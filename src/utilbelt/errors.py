"""Structured error types for configuration failures."""

from __future__ import annotations


class UtilbeltError(Exception):
    """Base class for structured utilbelt errors."""


class IterateeConfigError(UtilbeltError, TypeError):
    """An iteratee factory or receiver setup was rejected."""

    def __init__(self, factory: object) -> None:
        self.factory = factory
        super().__init__(f"iteratee factory must be callable, got {type(factory).__name__}")
