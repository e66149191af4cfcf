"""Caterer orders: one row per (order, caterer) pair, for the caterer's order inbox."""

import json
from uuid import uuid4

from protean.core.projector import on
from protean.fields import DateTime, Identifier
from protean.utils.globals import current_domain

from caterly.domain import caterly
from caterly.ordering.order.events import OrderPlaced
from caterly.ordering.order.order import Order


@caterly.projection
class CatererOrders:
    entry_id: Identifier(identifier=True, required=True)
    order_id: Identifier(required=True)
    caterer_id: Identifier(required=True)
    placed_at: DateTime()


@caterly.projector(projector_for=CatererOrders, aggregates=[Order])
class CatererOrdersProjector:
    @on(OrderPlaced)
    def on_order_placed(self, event):
        repo = current_domain.repository_for(CatererOrders)
        for caterer_id in json.loads(event.caterer_ids):
            repo.add(
                CatererOrders(
                    entry_id=str(uuid4()),
                    order_id=event.order_id,
                    caterer_id=caterer_id,
                    placed_at=event.placed_at,
                )
            )
