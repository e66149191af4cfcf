"""Caterer-side item status changes: command and handler."""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from caterly.domain import caterly
from caterly.exceptions import NothingToUpdate, PermissionDenied
from caterly.ordering.catalogue import get_lookup
from caterly.ordering.order.order import ItemStatus, Order

logger = structlog.get_logger(__name__)


@caterly.command(part_of="Order")
class SetItemsStatus:
    caterer_id: Identifier(required=True)
    order_id: Identifier(required=True)
    recipe_ids: Text(required=True)  # JSON array
    new_status: String(required=True, choices=ItemStatus)


@caterly.command_handler(part_of=Order)
class SetItemsStatusHandler:
    @handle(SetItemsStatus)
    def set_items_status(self, command):
        """Move the caller's matching items to ``new_status`` and return how many matched.

        Ownership is checked against the live catalogue before the order is
        loaded, so naming foreign recipes is refused even for an unknown
        order. Recipes the caterer no longer lists still count as theirs when
        this order captured them under their id.
        """
        caterer_id = str(command.caterer_id)
        requested = [str(recipe_id) for recipe_id in json.loads(command.recipe_ids)]
        if not requested:
            raise ValidationError({"recipe_ids": ["Select at least one item to update"]})

        unlisted = set(requested) - get_lookup().list_owned(caterer_id)

        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError:
            if unlisted:
                raise PermissionDenied("You can only update the status of your own items") from None
            raise

        foreign = sorted(unlisted - order.recipe_ids_for_caterer(caterer_id))
        if foreign:
            logger.warning(
                "Item status change refused",
                order_id=str(order.id),
                caterer_id=caterer_id,
                foreign_recipe_ids=foreign,
            )
            raise PermissionDenied("You can only update the status of your own items")

        updated = order.set_items_status(caterer_id, requested, command.new_status)
        if updated == 0:
            raise NothingToUpdate("No matching items found in this order")

        repo.add(order)
        logger.info(
            "Item status changed",
            order_id=str(order.id),
            caterer_id=caterer_id,
            new_status=command.new_status,
            updated_count=updated,
        )
        return updated
