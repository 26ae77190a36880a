"""Account normalization and record classification.

This module owns the only place where the indexer's raw wire shape is
reconciled with the typed domain model. Everything here is pure: functions
take raw payloads or models and return new models, never mutating their
input. The naming service adapter calls `normalize_account_data` exactly
once per fetch and derives every view from its result.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping, Sequence

from core.domain.models import (
    AccountData,
    AccountRecord,
    AccountRecordType,
    ConstructedAccount,
)

logger = logging.getLogger(__name__)

AVATAR_BASE_URL = "https://identicons.da.systems/identicon/"


def split_record_key(key: str) -> tuple[str, str]:
    """Split `address.eth` into (`address`, `eth`).

    Only the first segment is the type; the rest is rejoined as-is, so
    `profile.a.b` becomes (`profile`, `a.b`) and a key without dots yields
    an empty stripped key.
    """

    record_type, _, stripped_key = key.partition(".")
    return record_type, stripped_key


def parse_ttl(raw: Any) -> int | float:
    """Convert the wire ttl (usually a numeric string such as '300') to a number."""

    if raw is None or raw == "":
        return 0
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, (int, float)):
        return raw
    try:
        value = float(str(raw).strip())
    except ValueError:
        logger.warning("Unparseable record ttl %r, using 0", raw)
        return 0
    if not math.isfinite(value):
        logger.warning("Non-finite record ttl %r, using 0", raw)
        return 0
    return int(value) if value.is_integer() else value


def normalize_record(raw: Mapping[str, Any]) -> AccountRecord:
    key = str(raw.get("key") or "")
    record_type, stripped_key = split_record_key(key)
    label = raw.get("label")
    return AccountRecord(
        key=key,
        type=record_type,
        stripped_key=stripped_key,
        value=str(raw.get("value") or ""),
        ttl=parse_ttl(raw.get("ttl")),
        label=label if isinstance(label, str) and label else None,
    )


def normalize_account_data(
    account_data: Mapping[str, Any],
    *,
    fallback_account: str | None = None,
) -> AccountData:
    """Build a fully normalized `AccountData` from the indexer's `account_data`.

    `fallback_account` names the account when the payload omits it.
    """

    raw_records = account_data.get("records") or []
    records = tuple(normalize_record(raw) for raw in raw_records)
    logger.debug(
        "Normalized %d records for %s",
        len(records),
        account_data.get("account"),
    )
    return AccountData(
        account=str(account_data.get("account") or fallback_account or ""),
        owner_lock_args_hex=str(account_data.get("owner_lock_args_hex") or ""),
        records=records,
    )


def flatten_records(records: Iterable[AccountRecord]) -> dict[str, str]:
    """Case-insensitive key -> value map; later records overwrite earlier ones."""

    flattened: dict[str, str] = {}
    for record in records:
        flattened[record.key.lower()] = record.value
    return flattened


def filter_by_type(records: Iterable[AccountRecord], record_type: str) -> list[AccountRecord]:
    return [record for record in records if record.type == record_type]


def index_by_stripped_key(records: Sequence[AccountRecord]) -> dict[str, AccountRecord]:
    """Map stripped key -> record, the last record for a stripped key wins."""

    indexed: dict[str, AccountRecord] = {}
    for record in records:
        indexed[record.stripped_key] = record
    return indexed


def avatar_url(account: str) -> str:
    return f"{AVATAR_BASE_URL}{account}"


def build_constructed_account(data: AccountData, account: str) -> ConstructedAccount:
    """Partition records into the four named groups.

    `account` is the name the caller asked for; it only feeds the avatar URL.
    Records whose type is not one of the named groups are kept only in the
    unfiltered `records` list.
    """

    profiles = filter_by_type(data.records, AccountRecordType.PROFILE.value)
    addresses = filter_by_type(data.records, AccountRecordType.ADDRESS.value)
    dwebs = filter_by_type(data.records, AccountRecordType.DWEB.value)
    customs = filter_by_type(data.records, AccountRecordType.CUSTOM.value)

    return ConstructedAccount(
        account=data.account,
        avatar=avatar_url(account),
        profile=index_by_stripped_key(profiles),
        address=index_by_stripped_key(addresses),
        dweb=index_by_stripped_key(dwebs),
        custom=index_by_stripped_key(customs),
        profiles=profiles,
        addresses=addresses,
        dwebs=dwebs,
        customs=customs,
        records=list(data.records),
    )
