"""Read-time status views over an order's line items.

Neither value is stored: both are recomputed from the items every time an
order is shown to the buyer.
"""

from collections import Counter

from caterly.ordering.order.order import ItemStatus


def _status_of(item) -> str:
    return item if isinstance(item, str) else item.status


def compute_overall_status(items) -> str:
    """Summarise line items into one label.

    First match wins: all rejected, all delivered, any shipped, any preparing,
    any accepted, otherwise pending. An empty list is pending. ``items`` may
    hold line items or bare status strings.
    """
    statuses = [_status_of(item) for item in items]
    if not statuses:
        return ItemStatus.PENDING.value

    if all(status == ItemStatus.REJECTED.value for status in statuses):
        return ItemStatus.REJECTED.value
    if all(status == ItemStatus.DELIVERED.value for status in statuses):
        return ItemStatus.DELIVERED.value
    for status in (ItemStatus.SHIPPED, ItemStatus.PREPARING, ItemStatus.ACCEPTED):
        if status.value in statuses:
            return status.value
    return ItemStatus.PENDING.value


def status_counts(items) -> dict[str, int]:
    """Quantity-weighted count of line items per status, in lifecycle order."""
    counts = Counter()
    for item in items:
        counts[item.status] += item.quantity
    return {status.value: counts[status.value] for status in ItemStatus if counts[status.value]}


def status_summary(items) -> str:
    """Human-readable form of ``status_counts``, e.g. ``"2 pending, 1 accepted"``."""
    return ", ".join(f"{count} {status}" for status, count in status_counts(items).items())
