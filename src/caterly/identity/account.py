"""Account aggregate: buyers and caterers share one identity record.

The role is the tag of a two-variant profile: a caterer account carries a
``CatererProfile`` (business name and address), a buyer account carries none.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text, ValueObject

from caterly.domain import caterly
from caterly.identity.events import AccountRegistered, FavoriteAdded, FavoriteRemoved


class Role(Enum):
    USER = "user"
    CATERER = "caterer"


@caterly.value_object(part_of="Account")
class CatererProfile:
    """Business details published by a caterer."""

    business_name: String(required=True, max_length=200)
    business_address: String(required=True, max_length=500)


@caterly.aggregate
class Account:
    username: String(required=True, max_length=100)
    phone: String(required=True, max_length=30)
    password_hash: String(required=True, max_length=255)
    role: String(required=True, choices=Role)
    caterer_profile: ValueObject(CatererProfile)
    favorites: Text()  # JSON array of recipe ids
    registered_at: DateTime()

    @invariant.post
    def profile_must_match_role(self):
        if self.role == Role.CATERER.value and self.caterer_profile is None:
            raise ValidationError({"caterer_profile": ["Caterers must provide a business name and address"]})
        if self.role == Role.USER.value and self.caterer_profile is not None:
            raise ValidationError({"caterer_profile": ["Only caterers have a business profile"]})

    @classmethod
    def register(cls, username, phone, password_hash, role, business_name=None, business_address=None):
        profile = None
        if role == Role.CATERER.value:
            if not business_name or not business_address:
                raise ValidationError({"caterer_profile": ["Caterers must provide a business name and address"]})
            profile = CatererProfile(business_name=business_name, business_address=business_address)

        now = datetime.now(UTC)
        account = cls(
            username=username,
            phone=phone,
            password_hash=password_hash,
            role=role,
            caterer_profile=profile,
            favorites=json.dumps([]),
            registered_at=now,
        )
        account.raise_(
            AccountRegistered(
                account_id=str(account.id),
                username=username,
                role=role,
                registered_at=now,
            )
        )
        return account

    @property
    def is_caterer(self) -> bool:
        return self.role == Role.CATERER.value

    @property
    def favorite_ids(self) -> list[str]:
        return json.loads(self.favorites) if self.favorites else []

    def add_favorite(self, recipe_id):
        favorites = self.favorite_ids
        if str(recipe_id) in favorites:
            raise ValidationError({"recipe_id": ["Recipe already in favorites"]})

        favorites.append(str(recipe_id))
        self.favorites = json.dumps(favorites)
        self.raise_(FavoriteAdded(account_id=str(self.id), recipe_id=str(recipe_id)))

    def remove_favorite(self, recipe_id):
        favorites = self.favorite_ids
        if str(recipe_id) not in favorites:
            return

        favorites.remove(str(recipe_id))
        self.favorites = json.dumps(favorites)
        self.raise_(FavoriteRemoved(account_id=str(self.id), recipe_id=str(recipe_id)))
