"""Configuration models for the default requests-backed transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class TransportConfig:
    """Settings applied by RequestsTransport to every send.

    ``timeout_seconds`` bounds the whole exchange; None disables it.
    ``user_agent`` and ``default_headers`` only fill headers the request
    does not already carry.
    """

    timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS
    verify_tls: bool = True
    allow_redirects: bool = True
    user_agent: str | None = None
    default_headers: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0 when provided")
        object.__setattr__(
            self, "default_headers", MappingProxyType(dict(self.default_headers))
        )
