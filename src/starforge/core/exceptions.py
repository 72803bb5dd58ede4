"""Custom exceptions for the star system generator."""
from __future__ import annotations

from typing import Any, Optional


class StarForgeError(Exception):
    """Base exception for all star system generator errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = self.message
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class InvalidArgumentError(StarForgeError, ValueError):
    """Input lies outside a closed enumeration or numeric domain."""


class ConfigurationError(StarForgeError):
    """Generator or render configuration is inconsistent."""


class ShareCodeError(StarForgeError):
    """A share code could not be decoded."""


def require_member(value: object, enum_cls: type, argument: str) -> None:
    """Raise InvalidArgumentError unless *value* is a member of *enum_cls*."""
    if not isinstance(value, enum_cls):
        raise InvalidArgumentError(
            f"{argument} must be a {enum_cls.__name__}, got {value!r}",
            error_code="NOT_IN_ENUM",
            context={"argument": argument, "value": value},
        )


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "ShareCodeError",
    "StarForgeError",
    "require_member",
]
