"""Naming-service contract shared by every backend.

Why Protocol instead of a base class:
- Backends are interchangeable at the dispatch layer without a rigid
  hierarchy.
- A capability that a backend lacks is still present on it and raises
  `ResolutionError(UNSUPPORTED_METHOD)`, so callers always get a uniform,
  catchable signal instead of an `AttributeError`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.network import NamingServiceName


@runtime_checkable
class NamingService(Protocol):
    """Query surface every naming backend exposes."""

    def service_name(self) -> NamingServiceName:
        ...

    def is_supported_domain(self, domain: str) -> bool:
        ...

    def namehash(self, domain: str) -> str:
        ...

    def childhash(self, parent_hash: str, label: str) -> str:
        ...

    async def owner(self, domain: str) -> str:
        ...

    async def resolver(self, domain: str) -> str:
        ...

    async def record(self, domain: str, key: str) -> str:
        ...

    async def records(self, domain: str, keys: list[str]) -> dict[str, str]:
        ...

    async def all_records(self, domain: str) -> dict[str, str]:
        ...

    async def twitter(self, domain: str) -> str:
        ...

    async def reverse(self, address: str, currency_ticker: str) -> str | None:
        ...

    async def is_registered(self, domain: str) -> bool:
        ...
