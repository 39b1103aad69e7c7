"""Revenue calculator: discounted final amounts for sales.

The stored ``discount`` is a percentage applied only to the discountable
portion of a sale. Services whose group is one of
NON_DISCOUNTABLE_GROUPS never take a discount.
"""

from decimal import Decimal
from typing import Iterable

from salontrack.domain.entities import (
    LegacySale,
    MultiServiceSale,
    Sale,
    ServiceGroup,
    ServiceLine,
)

NON_DISCOUNTABLE_GROUPS = frozenset({"nails", "threading"})

HUNDRED = Decimal("100")


def is_non_discountable_group(name: str) -> bool:
    """Return True if a group name is exempt from discounts."""
    return name.strip().lower() in NON_DISCOUNTABLE_GROUPS


def non_discountable_group_ids(groups: Iterable[ServiceGroup]) -> frozenset[int]:
    """Collect the IDs of all groups exempt from discounts."""
    return frozenset(g.id for g in groups if is_non_discountable_group(g.name))


def is_discountable(line: ServiceLine, excluded_group_ids: frozenset[int]) -> bool:
    """Return True if a service line counts toward the discount base."""
    return line.group_id is None or line.group_id not in excluded_group_ids


def discountable_amount(
    sale: Sale, excluded_group_ids: frozenset[int] = frozenset()
) -> Decimal:
    """Portion of a sale eligible for the percentage discount."""
    if isinstance(sale, LegacySale):
        return sale.amount
    return sum(
        (
            line.price
            for line in sale.services
            if is_discountable(line, excluded_group_ids)
        ),
        Decimal("0"),
    )


def discount_amount(
    sale: Sale, excluded_group_ids: frozenset[int] = frozenset()
) -> Decimal:
    """Money taken off the sale by its discount percentage."""
    return discountable_amount(sale, excluded_group_ids) * sale.discount / HUNDRED


def final_amount(
    sale: Sale, excluded_group_ids: frozenset[int] = frozenset()
) -> Decimal:
    """Amount actually charged: ``amount - discount_amount``."""
    return sale.amount - discount_amount(sale, excluded_group_ids)


def allows_discount(
    sale: MultiServiceSale, excluded_group_ids: frozenset[int] = frozenset()
) -> bool:
    """False when every service is exempt, so a discount would be inert."""
    return any(is_discountable(line, excluded_group_ids) for line in sale.services)
