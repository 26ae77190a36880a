"""Networks and naming-service identifiers.

Single source of truth for the DAS networks we can talk to and their
default indexer endpoints.
"""

from __future__ import annotations

from enum import Enum


class NamingServiceName(str, Enum):
    """Backends that implement the shared naming-service contract."""

    DAS = "DAS"


class DasNetwork(str, Enum):
    """Networks supported by the DAS indexer."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    AGGRON = "aggron"

    @classmethod
    def default(cls) -> "DasNetwork":
        return cls.MAINNET

    @classmethod
    def is_supported(cls, value: object) -> bool:
        """True when `value` names one of the supported networks."""

        return value in {member.value for member in cls}

    @property
    def default_url(self) -> str:
        return DAS_URL_MAP[self.value]


DAS_URL_MAP: dict[str, str] = {
    DasNetwork.MAINNET.value: "https://indexer.da.systems",
    DasNetwork.TESTNET.value: "http://47.243.90.165:8223",
    DasNetwork.AGGRON.value: "http://47.243.90.165:8223",
}
