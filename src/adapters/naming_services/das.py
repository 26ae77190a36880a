"""Naming service: DAS (`.bit` domains).

Resolves `.bit` accounts through the DAS indexer:
- `das_searchAccount` returns the account owner and its record list.
- `das_getAddressAccount` returns the accounts that claim an address.

Every query fetches fresh data; there is no cache and no retry here.
"""

from __future__ import annotations

import logging
from typing import Any

from adapters.http_client import FetchProvider
from core.config import AppSettings
from core.domain.models import AccountData, AccountRecord, ConstructedAccount
from core.domain.network import DAS_URL_MAP, DasNetwork, NamingServiceName
from core.errors import (
    ConfigurationError,
    ConfigurationErrorCode,
    ResolutionError,
    ResolutionErrorCode,
    UnsupportedCurrencyError,
)
from core.interfaces.naming_service import NamingService
from core.interfaces.provider import Provider
from core.services.account_records import (
    build_constructed_account,
    flatten_records,
    normalize_account_data,
)

logger = logging.getLogger(__name__)

SEARCH_ACCOUNT_METHOD = "das_searchAccount"
ADDRESS_ACCOUNT_METHOD = "das_getAddressAccount"
REVERSE_CURRENCIES = ("ETH", "CKB")
DOMAIN_SUFFIX = ".bit"

# Placeholder returned by `namehash` until DAS hashing is specified.
NAMEHASH_PLACEHOLDER = ""


class DasService(NamingService):
    """`NamingService` implementation backed by the DAS indexer."""

    name = NamingServiceName.DAS
    url_map = DAS_URL_MAP

    def __init__(
        self,
        *,
        url: str | None = None,
        network: str | None = None,
        provider: Provider | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        if not (url or provider):
            raise ConfigurationError(
                ConfigurationErrorCode.UNSPECIFIED_URL,
                method=self.name.value,
            )

        network = network or DasNetwork.default().value
        if not DasNetwork.is_supported(network):
            raise ConfigurationError(
                ConfigurationErrorCode.UNSUPPORTED_NETWORK,
                method=self.name.value,
                network=getattr(network, "value", network),
            )

        self._network = DasNetwork(network).value
        self._url = url
        self._provider: Provider = provider or FetchProvider(
            url,  # type: ignore[arg-type]
            service_name=self.name.value,
            settings=settings,
        )

    @classmethod
    def autonetwork(
        cls,
        *,
        url: str | None = None,
        network: str | None = None,
        provider: Provider | None = None,
        settings: AppSettings | None = None,
    ) -> "DasService":
        """Build a service, filling `url` from the network table.

        With no options at all this targets the mainnet indexer.
        """

        if url is None and network is None and provider is None:
            network = DasNetwork.MAINNET.value
            url = cls.url_map[network]
        elif network and not url and DasNetwork.is_supported(network):
            url = cls.url_map[DasNetwork(network).value]
        return cls(url=url, network=network, provider=provider, settings=settings)

    @property
    def network(self) -> str:
        return self._network

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def provider(self) -> Provider:
        return self._provider

    def service_name(self) -> NamingServiceName:
        return self.name

    def is_supported_domain(self, domain: str) -> bool:
        return domain.endswith(DOMAIN_SUFFIX) and all(domain.split("."))

    def namehash(self, domain: str) -> str:
        """Validate `domain` and return `NAMEHASH_PLACEHOLDER`.

        DAS does not publish a namehash scheme yet, so no hash is computed.
        """

        if not self.is_supported_domain(domain):
            raise ResolutionError(ResolutionErrorCode.UNREGISTERED_DOMAIN, domain=domain)
        return NAMEHASH_PLACEHOLDER

    def childhash(self, parent_hash: str, label: str) -> str:
        raise ResolutionError(
            ResolutionErrorCode.UNSUPPORTED_METHOD,
            domain=label,
            method_name="childhash",
        )

    async def resolver(self, domain: str) -> str:
        raise ResolutionError(
            ResolutionErrorCode.UNSUPPORTED_METHOD,
            domain=domain,
            method_name="resolver",
        )

    async def twitter(self, domain: str) -> str:
        raise ResolutionError(
            ResolutionErrorCode.UNSUPPORTED_METHOD,
            domain=domain,
            method_name="twitter",
        )

    async def get_account_data(self, domain: str) -> AccountData:
        response = await self._provider.request(SEARCH_ACCOUNT_METHOD, [domain])

        data = response.get("data") if isinstance(response, dict) else None
        if not data:
            logger.debug("%s returned no data for %s", SEARCH_ACCOUNT_METHOD, domain)
            raise ResolutionError(ResolutionErrorCode.UNREGISTERED_DOMAIN, domain=domain)

        account_data = data.get("account_data") if isinstance(data, dict) else None
        if not account_data:
            logger.warning("%s returned data without account_data for %s", SEARCH_ACCOUNT_METHOD, domain)
            raise ResolutionError(ResolutionErrorCode.UNREGISTERED_DOMAIN, domain=domain)

        return normalize_account_data(account_data, fallback_account=domain)

    async def owner(self, domain: str) -> str:
        account_data = await self.get_account_data(domain)
        return account_data.owner_lock_args_hex

    async def record(self, domain: str, key: str) -> str:
        key = key.lower()
        value = (await self.all_records(domain)).get(key)
        if not value:
            raise ResolutionError(
                ResolutionErrorCode.RECORD_NOT_FOUND,
                domain=domain,
                record_name=key,
            )
        return value

    async def records(self, domain: str, keys: list[str]) -> dict[str, str]:
        flattened = await self.all_records(domain)
        # Lookup is case-insensitive like `record`; the result keeps the keys as requested.
        return {key: flattened.get(key.lower()) or "" for key in keys}

    async def all_records(self, domain: str) -> dict[str, str]:
        account_data = await self.get_account_data(domain)
        return flatten_records(account_data.records)

    async def records_by_key(self, domain: str, key: str) -> list[AccountRecord]:
        """Every record whose raw key equals `key` (case-sensitive), in order."""

        account_data = await self.get_account_data(domain)
        return [record for record in account_data.records if record.key == key]

    async def addr(self, domain: str, ticker: str) -> str:
        return await self.record(domain, f"address.{ticker}")

    async def is_registered(self, domain: str) -> bool:
        try:
            await self.get_account_data(domain)
        except ResolutionError as exc:
            if exc.code is ResolutionErrorCode.UNREGISTERED_DOMAIN:
                return False
            raise
        return True

    async def all_reverse(self, address: str) -> list[str]:
        response: Any = await self._provider.request(ADDRESS_ACCOUNT_METHOD, [address])

        data = response.get("data") if isinstance(response, dict) else None
        accounts = (data or {}).get("account_data") or []
        return [str(item["account"]) for item in accounts]

    async def reverse(self, address: str, currency_ticker: str) -> str | None:
        if currency_ticker not in REVERSE_CURRENCIES:
            raise UnsupportedCurrencyError(currency_ticker)

        accounts = await self.all_reverse(address)
        return accounts[0] if accounts else None

    async def account(self, domain: str) -> ConstructedAccount:
        account_data = await self.get_account_data(domain)
        return build_constructed_account(account_data, domain)
