# tests/conftest.py
from __future__ import annotations

import copy
from typing import Any, Callable

import pytest

INDEXER_URL = "https://indexer.example.test"


class FakeProvider:
    """In-memory `Provider`: answers per JSON-RPC method and records calls."""

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = responses or {}
        self.calls: list[tuple[str, list[Any]]] = []

    async def request(self, method: str, params: list[Any]) -> Any:
        self.calls.append((method, list(params)))
        response = self.responses[method]
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return response(params)
        return copy.deepcopy(response)


def make_search_response(
    account: str = "alice.bit",
    records: list[dict[str, Any]] | None = None,
    owner: str = "0xowner",
) -> dict[str, Any]:
    return {
        "errno": 0,
        "errmsg": "",
        "data": {
            "out_point": {"tx_hash": "0x00", "index": 0},
            "account_data": {
                "account": account,
                "owner_lock_args_hex": owner,
                "manager_lock_args_hex": "0xmanager",
                "records": records if records is not None else [],
            },
        },
    }


def make_reverse_response(accounts: list[str]) -> dict[str, Any]:
    return {
        "errno": 0,
        "errmsg": "",
        "data": {"account_data": [{"account": a} for a in accounts]},
    }


UNREGISTERED_RESPONSE: dict[str, Any] = {"errno": 20007, "errmsg": "account not exist", "data": None}


SAMPLE_RECORDS: list[dict[str, Any]] = [
    {"key": "address.eth", "label": "", "value": "0xEth1", "ttl": "300"},
    {"key": "address.ckb", "label": "main", "value": "ckb1qyq", "ttl": "300"},
    {"key": "profile.twitter", "label": "", "value": "alice_old", "ttl": "300"},
    {"key": "profile.twitter", "label": "", "value": "alice", "ttl": "600"},
    {"key": "dweb.ipfs", "label": "", "value": "Qm123", "ttl": "300"},
    {"key": "custom.my.nested.key", "label": "", "value": "nested", "ttl": "300"},
    {"key": "text.note", "label": "", "value": "outside the groups", "ttl": "300"},
    {"key": "Address.ETH", "label": "", "value": "0xEth2", "ttl": "300"},
]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep real DAS_* variables and .env files out of the tests."""

    for name in ("DAS_URL", "DAS_NETWORK", "DAS_HTTP_TIMEOUT_SECONDS", "DAS_USER_AGENT", "DAS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(
        {
            "das_searchAccount": make_search_response(records=copy.deepcopy(SAMPLE_RECORDS)),
            "das_getAddressAccount": make_reverse_response(["alice.bit", "alice2.bit"]),
        }
    )


@pytest.fixture
def service(fake_provider):
    from adapters.naming_services import DasService

    return DasService(provider=fake_provider)


@pytest.fixture
def make_provider() -> Callable[..., FakeProvider]:
    return FakeProvider
