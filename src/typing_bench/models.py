"""msgspec payload models used as benchmark subjects."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

import msgspec

# ============================================================================
# Shape A: flat user record
# ============================================================================


class Address(msgspec.Struct, frozen=True, rename="camel"):
    """Postal address nested inside a profile."""

    street: str
    city: str
    zip_code: str


class Profile(msgspec.Struct, frozen=True, rename="camel"):
    """Contact profile."""

    email: str
    phone: str
    address: Address


class Preferences(msgspec.Struct, frozen=True, rename="camel"):
    language: str
    font_size: float
    layout: str


class Settings(msgspec.Struct, frozen=True, rename="camel"):
    """User settings with nested display preferences."""

    notifications_enabled: bool
    theme: str
    preferences: Preferences


class Activity(msgspec.Struct, frozen=True, rename="camel"):
    last_login: datetime
    actions: list[str]


class UserData(msgspec.Struct, frozen=True, rename="camel"):
    """Flat user record with three nested sub-records."""

    id: int
    name: str
    profile: Profile
    settings: Settings
    activity: Activity


# ============================================================================
# Heterogeneous scalar container
# ============================================================================

# Each variant carries its kind as an explicit tag, so "42" encoded as a
# string decodes back as a string.


class IntValue(msgspec.Struct, frozen=True, tag_field="kind", tag="int"):
    value: int


class FloatValue(msgspec.Struct, frozen=True, tag_field="kind", tag="float"):
    value: float


class StrValue(msgspec.Struct, frozen=True, tag_field="kind", tag="str"):
    value: str


class BoolValue(msgspec.Struct, frozen=True, tag_field="kind", tag="bool"):
    value: bool


DynamicValue = IntValue | FloatValue | StrValue | BoolValue


# ============================================================================
# Shape B: deep nested record tree
# ============================================================================


class Detail(msgspec.Struct, frozen=True, rename="camel"):
    """Innermost leaf record."""

    id: UUID
    score: float
    count: int
    enabled: bool
    note: str
    recorded_at: datetime


class Item(msgspec.Struct, frozen=True, rename="camel"):
    id: UUID
    label: str
    quantity: int
    details: list[Detail]


class SubModel(msgspec.Struct, frozen=True, rename="camel"):
    """Sub-model with a fixed-key configuration mapping and a list of items."""

    id: UUID
    config: dict[str, str]
    created_at: datetime
    updated_at: datetime
    items: list[Item]


class RootModel(msgspec.Struct, frozen=True, rename="camel"):
    """Root of the nested record tree."""

    id: UUID
    name: str
    properties: dict[str, DynamicValue]
    sub_models: list[SubModel]
    created_at: datetime

    @property
    def leaf_count(self) -> int:
        """Total number of ``Detail`` records below this root."""
        return sum(len(item.details) for sub in self.sub_models for item in sub.items)
