"""DAS domain models (Pydantic v2).

Why Pydantic here:
- The indexer returns loosely typed JSON (ttl arrives as a string); the
  models validate and coerce it once, at the edge.
- The aggregate view serializes cleanly to JSON for exports.

Note:
- These models describe *what* an account is, not *how* it is fetched.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class AccountRecordType(str, Enum):
    """Record categories used by the aggregate account view.

    The set is open on the wire: a record whose key starts with any other
    segment keeps that segment as its `type`, it just does not belong to one
    of these groups.
    """

    PROFILE = "profile"
    ADDRESS = "address"
    DWEB = "dweb"
    CUSTOM = "custom"


class AccountRecord(BaseModel):
    """One key/value entry attached to an account."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        description="Raw composite key as stored on chain, e.g. 'address.eth'.",
    )
    type: str = Field(
        ...,
        description="First dot-separated segment of `key`.",
    )
    stripped_key: str = Field(
        ...,
        description="`key` without its leading type segment.",
    )
    value: str = Field(
        default="",
        description="Record value.",
    )
    ttl: int | float = Field(
        default=0,
        description="Time to live in seconds (delivered as a string by the indexer).",
    )
    label: str | None = Field(
        default=None,
        description="Optional human label attached by the account owner.",
    )


class AccountData(BaseModel):
    """Resolved state for one `.bit` domain."""

    model_config = ConfigDict(frozen=True)

    account: str = Field(
        ...,
        min_length=1,
        description="Domain name, e.g. 'alice.bit'.",
    )
    owner_lock_args_hex: str = Field(
        default="",
        description="Owner identity token (opaque hex string).",
    )
    records: tuple[AccountRecord, ...] = Field(
        default_factory=tuple,
        description="Records in source order; later entries win in flattened views.",
    )


class ConstructedAccount(BaseModel):
    """Aggregate, categorized view of an account's records.

    Each `profile`/`address`/`dweb`/`custom` map keeps the last record per
    stripped key, while the plural lists keep every record of the category
    in original order.
    """

    account: str
    avatar: str

    profile: dict[str, AccountRecord] = Field(default_factory=dict)
    address: dict[str, AccountRecord] = Field(default_factory=dict)
    dweb: dict[str, AccountRecord] = Field(default_factory=dict)
    custom: dict[str, AccountRecord] = Field(default_factory=dict)

    profiles: list[AccountRecord] = Field(default_factory=list)
    addresses: list[AccountRecord] = Field(default_factory=list)
    dwebs: list[AccountRecord] = Field(default_factory=list)
    customs: list[AccountRecord] = Field(default_factory=list)

    records: list[AccountRecord] = Field(default_factory=list)
