"""Transport contract.

Why a Protocol:
- Naming services depend on "something that answers method+params", not on
  httpx. Tests inject an in-memory fake, production injects `FetchProvider`.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Provider(Protocol):
    """Minimal request/response transport.

    Design rules:
    - `request` is async because it performs network I/O.
    - Transport errors propagate; callers do not interpret them.
    - Timeouts, retries and pooling belong to the implementation.
    """

    async def request(self, method: str, params: list[Any]) -> Any:
        """Send `method` with positional `params` and return the decoded result."""

        ...
