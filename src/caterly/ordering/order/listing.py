"""Caterer- and buyer-scoped order listings."""

from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from caterly.ordering.order.order import Order, OrderLineItem
from caterly.ordering.order.status import compute_overall_status, status_summary
from caterly.ordering.projections.caterer_orders import CatererOrders


@dataclass
class OrderView:
    """An order as shown to one audience, with the items that audience may see."""

    order: Order
    items: list[OrderLineItem] = field(default_factory=list)

    @property
    def overall_status(self) -> str:
        return compute_overall_status(self.items)

    @property
    def summary(self) -> str:
        return status_summary(self.items)


def _newest_first(views: list[OrderView]) -> list[OrderView]:
    return sorted(views, key=lambda view: view.order.placed_at, reverse=True)


def list_orders_for_caterer(caterer_id) -> list[OrderView]:
    """Orders holding at least one of the caterer's items, restricted to those items."""
    query = current_domain.repository_for(CatererOrders)._dao.query
    entries = query.filter(caterer_id=str(caterer_id)).limit(None).all().items
    repo = current_domain.repository_for(Order)

    views = []
    for order_id in dict.fromkeys(str(entry.order_id) for entry in entries):
        order = repo.get(order_id)
        items = order.items_for_caterer(caterer_id)
        if items:
            views.append(OrderView(order=order, items=items))
    return _newest_first(views)


def list_orders_for_user(user_id, status: str | None = None) -> list[OrderView]:
    """Orders bought by ``user_id`` with all their items.

    ``status`` keeps only orders whose overall status matches.
    """
    repo = current_domain.repository_for(Order)
    headers = repo._dao.query.filter(buyer_id=str(user_id)).limit(None).all().items

    views = []
    for header in headers:
        order = repo.get(header.id)
        view = OrderView(order=order, items=list(order.items))
        if status is None or view.overall_status == status:
            views.append(view)
    return _newest_first(views)
