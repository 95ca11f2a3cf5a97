"""
Pydantic mirror of the Shape A user record.

Field names and aliases match the msgspec models in ``models.py`` so both
backends encode to the same camelCase JSON.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class AddressModel(BaseModel):
    street: str
    city: str
    zip_code: str = Field(..., alias="zipCode")

    model_config = {"frozen": True, "populate_by_name": True}


class ProfileModel(BaseModel):
    email: str
    phone: str
    address: AddressModel

    model_config = {"frozen": True}


class PreferencesModel(BaseModel):
    language: str
    font_size: float = Field(..., alias="fontSize")
    layout: str

    model_config = {"frozen": True, "populate_by_name": True}


class SettingsModel(BaseModel):
    notifications_enabled: bool = Field(..., alias="notificationsEnabled")
    theme: str
    preferences: PreferencesModel

    model_config = {"frozen": True, "populate_by_name": True}


class ActivityModel(BaseModel):
    last_login: datetime = Field(..., alias="lastLogin")
    actions: list[str]

    model_config = {"frozen": True, "populate_by_name": True}


class UserDataModel(BaseModel):
    """Pydantic counterpart of ``models.UserData``."""

    id: int
    name: str
    profile: ProfileModel
    settings: SettingsModel
    activity: ActivityModel

    model_config = {"frozen": True}
