"""Error taxonomy.

- ConfigurationError: invalid construction options (raised synchronously).
- ResolutionError: a query could not be answered for a domain.
- UnsupportedCurrencyError: reverse lookup asked for a chain DAS does not index.
- ProviderError: the indexer answered with a JSON-RPC error object.

Network faults raised by httpx are not wrapped; they reach the caller as-is.
"""

from __future__ import annotations

from enum import Enum


class ConfigurationErrorCode(str, Enum):
    UNSPECIFIED_URL = "UnspecifiedUrl"
    UNSUPPORTED_NETWORK = "UnsupportedNetwork"


class ResolutionErrorCode(str, Enum):
    UNREGISTERED_DOMAIN = "UnregisteredDomain"
    RECORD_NOT_FOUND = "RecordNotFound"
    UNSUPPORTED_METHOD = "UnsupportedMethod"


class DasResolutionError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(DasResolutionError):
    """Raised when a naming service cannot be constructed."""

    def __init__(
        self,
        code: ConfigurationErrorCode,
        *,
        method: str | None = None,
        network: str | None = None,
    ) -> None:
        self.code = code
        self.method = method
        self.network = network
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        service = self.method or "naming service"
        if self.code is ConfigurationErrorCode.UNSPECIFIED_URL:
            return f"Unspecified url or provider for {service}"
        return f"Unsupported network {self.network!r} in {service} configuration"


class ResolutionError(DasResolutionError):
    """Raised when a domain query fails."""

    def __init__(
        self,
        code: ResolutionErrorCode,
        *,
        domain: str | None = None,
        record_name: str | None = None,
        method_name: str | None = None,
    ) -> None:
        self.code = code
        self.domain = domain
        self.record_name = record_name
        self.method_name = method_name
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.code is ResolutionErrorCode.UNREGISTERED_DOMAIN:
            return f"Domain {self.domain} is not registered"
        if self.code is ResolutionErrorCode.RECORD_NOT_FOUND:
            return f"No {self.record_name} record found for {self.domain}"
        return f"Method {self.method_name} is not supported for {self.domain}"


class UnsupportedCurrencyError(DasResolutionError, ValueError):
    """Reverse lookup requested for a currency other than ETH or CKB."""

    def __init__(self, currency: str) -> None:
        self.currency = currency
        super().__init__(f"DAS does not support reverse lookup for {currency}; use ETH or CKB")


class ProviderError(DasResolutionError):
    """JSON-RPC error object returned by the indexer."""

    def __init__(self, message: str, *, method: str, code: int | None = None) -> None:
        self.method = method
        self.code = code
        super().__init__(f"{method} failed: {message}")
