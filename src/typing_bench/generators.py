"""
Sample payload generators.

Every generator takes an explicit ``random.Random`` so runs can be seeded.
When no generator is passed a shared module-level instance is used.
"""

from __future__ import annotations

import random
import string
from datetime import datetime, timedelta, timezone
from uuid import UUID

from .models import (
    Activity,
    Address,
    Detail,
    Item,
    Preferences,
    Profile,
    RootModel,
    Settings,
    SubModel,
    UserData,
)
from .schemas import (
    ActivityModel,
    AddressModel,
    PreferencesModel,
    ProfileModel,
    SettingsModel,
    UserDataModel,
)
from .values import wrap_value

ALPHABET = string.ascii_uppercase + string.digits
RANDOM_STRING_LENGTH = 10
ACTIONS_PER_USER = 20

SUB_MODELS_PER_ROOT = 20
ITEMS_PER_SUB_MODEL = 10
DETAILS_PER_ITEM = 5
LEAVES_PER_ROOT = SUB_MODELS_PER_ROOT * ITEMS_PER_SUB_MODEL * DETAILS_PER_ITEM

MAX_AGE = timedelta(days=30)
CONFIG_KEYS = ("environment", "region", "tier", "owner")

_default_rng = random.Random()


def _now() -> datetime:
    return datetime.now(timezone.utc)


def random_string(rng: random.Random | None = None, length: int = RANDOM_STRING_LENGTH) -> str:
    """Return ``length`` characters drawn uniformly from ``[A-Z0-9]``."""
    rng = rng or _default_rng
    return "".join(rng.choices(ALPHABET, k=length))


def random_uuid(rng: random.Random | None = None) -> UUID:
    """Version 4 UUID built from the given generator rather than ``os.urandom``."""
    rng = rng or _default_rng
    return UUID(int=rng.getrandbits(128), version=4)


def random_past(rng: random.Random, now: datetime, max_age: timedelta = MAX_AGE) -> datetime:
    """Timestamp up to ``max_age`` before ``now``."""
    return now - timedelta(seconds=rng.uniform(0, max_age.total_seconds()))


# ============================================================================
# Shape A
# ============================================================================


def make_sample_user(
    id: int, rng: random.Random | None = None, now: datetime | None = None
) -> UserData:
    """
    Build a fully populated ``UserData`` record for ``id``.

    Duplicate or negative ids are fine; nothing is tracked between calls.
    The activity log repeats a single random action ``ACTIONS_PER_USER`` times.
    """
    rng = rng or _default_rng
    return UserData(
        id=id,
        name=f"User {id}",
        profile=Profile(
            email=f"user{id}@example.com",
            phone=random_string(rng),
            address=Address(
                street=random_string(rng),
                city=random_string(rng),
                zip_code=random_string(rng),
            ),
        ),
        settings=Settings(
            notifications_enabled=True,
            theme=random_string(rng),
            preferences=Preferences(
                language=random_string(rng),
                font_size=14.0,
                layout=random_string(rng),
            ),
        ),
        activity=Activity(
            last_login=now or _now(),
            actions=[random_string(rng)] * ACTIONS_PER_USER,
        ),
    )


def make_sample_user_model(
    id: int, rng: random.Random | None = None, now: datetime | None = None
) -> UserDataModel:
    """Pydantic counterpart of ``make_sample_user``."""
    rng = rng or _default_rng
    return UserDataModel(
        id=id,
        name=f"User {id}",
        profile=ProfileModel(
            email=f"user{id}@example.com",
            phone=random_string(rng),
            address=AddressModel(
                street=random_string(rng),
                city=random_string(rng),
                zip_code=random_string(rng),
            ),
        ),
        settings=SettingsModel(
            notifications_enabled=True,
            theme=random_string(rng),
            preferences=PreferencesModel(
                language=random_string(rng),
                font_size=14.0,
                layout=random_string(rng),
            ),
        ),
        activity=ActivityModel(
            last_login=now or _now(),
            actions=[random_string(rng)] * ACTIONS_PER_USER,
        ),
    )


# ============================================================================
# Shape B
# ============================================================================


def make_detail(rng: random.Random, now: datetime) -> Detail:
    return Detail(
        id=random_uuid(rng),
        score=rng.uniform(0.0, 1000.0),
        count=rng.randint(0, 100),
        enabled=rng.random() < 0.5,
        note=random_string(rng),
        recorded_at=random_past(rng, now),
    )


def make_item(rng: random.Random, now: datetime) -> Item:
    return Item(
        id=random_uuid(rng),
        label=random_string(rng),
        quantity=rng.randint(0, 1000),
        details=[make_detail(rng, now) for _ in range(DETAILS_PER_ITEM)],
    )


def make_sub_model(rng: random.Random, now: datetime) -> SubModel:
    created_at = random_past(rng, now)
    # updated_at lands between created_at and now
    updated_at = random_past(rng, now, max_age=now - created_at)
    return SubModel(
        id=random_uuid(rng),
        config={key: random_string(rng) for key in CONFIG_KEYS},
        created_at=created_at,
        updated_at=updated_at,
        items=[make_item(rng, now) for _ in range(ITEMS_PER_SUB_MODEL)],
    )


def make_sample_tree(rng: random.Random | None = None, now: datetime | None = None) -> RootModel:
    """
    Build a ``RootModel`` with exactly ``LEAVES_PER_ROOT`` detail records.

    ``properties`` carries one value of each supported scalar kind.
    """
    rng = rng or _default_rng
    now = now or _now()
    return RootModel(
        id=random_uuid(rng),
        name=random_string(rng),
        properties={
            "int_prop": wrap_value(rng.randint(0, 1000)),
            "float_prop": wrap_value(rng.uniform(0.0, 1000.0)),
            "str_prop": wrap_value(random_string(rng)),
            "bool_prop": wrap_value(rng.random() < 0.5),
        },
        sub_models=[make_sub_model(rng, now) for _ in range(SUB_MODELS_PER_ROOT)],
        created_at=random_past(rng, now),
    )
