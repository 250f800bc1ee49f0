# -*- coding: utf-8 -*-
"""
Invoice draft models.

Amounts and quantities are kept as the raw text the user typed until the
draft is validated; `to_payload` converts them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def parse_number(value: Any) -> Optional[float]:
    """Parse user input as a finite float, None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return number


@dataclass
class InvoiceItem:
    description: str = ""
    amount: str = ""
    quantity: str = "1"

    @property
    def total(self) -> Optional[float]:
        """amount * quantity, None when either is not a number."""
        amount = parse_number(self.amount)
        quantity = parse_number(self.quantity)
        if amount is None or quantity is None:
            return None
        return amount * quantity

    def to_payload(self) -> Dict[str, Any]:
        quantity = parse_number(self.quantity)
        return {
            "description": self.description.strip(),
            "amount": parse_number(self.amount),
            "quantity": int(quantity) if quantity is not None and quantity.is_integer() else quantity,
        }


@dataclass
class InvoiceDraft:
    """Ordered invoice rows; starts with one empty row."""

    items: List[InvoiceItem] = field(default_factory=lambda: [InvoiceItem()])

    def add_item(self) -> InvoiceItem:
        item = InvoiceItem()
        self.items.append(item)
        return item

    def remove_item(self, index: int):
        if 0 <= index < len(self.items):
            del self.items[index]

    def update_item(self, index: int, name: str, value: str):
        if 0 <= index < len(self.items) and name in ("description", "amount", "quantity"):
            setattr(self.items[index], name, value)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_payload(self, customer_id: str) -> Dict[str, Any]:
        """`POST /customer-onboarding-invoice` body."""
        return {
            "customerId": customer_id,
            "isSystemGenerated": False,
            "invoiceItems": [item.to_payload() for item in self.items],
        }
