"""Domain events for the Account aggregate."""

from protean.fields import DateTime, Identifier, String

from caterly.domain import caterly


@caterly.event(part_of="Account")
class AccountRegistered:
    """A buyer or caterer account was created."""

    __version__ = 1

    account_id: Identifier(required=True)
    username: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@caterly.event(part_of="Account")
class FavoriteAdded:
    __version__ = 1

    account_id: Identifier(required=True)
    recipe_id: Identifier(required=True)


@caterly.event(part_of="Account")
class FavoriteRemoved:
    __version__ = 1

    account_id: Identifier(required=True)
    recipe_id: Identifier(required=True)
