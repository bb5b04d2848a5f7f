"""Order model: the state behind the order form.

A plain mutable record. The UI layer mutates it field by field and asks
``is_valid`` before it allows a submission.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bakery.domain.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Catalog and stepper bounds
# ---------------------------------------------------------------------------
CAKE_TYPES = ("Vanilla", "Chocolate", "Strawberry", "Rainbow")
MIN_QUANTITY = 3
MAX_QUANTITY = 20


@dataclass
class Order:
    """One pending order.

    ``quantity`` is not clamped here; the stepper keeps it within
    ``MIN_QUANTITY``..``MAX_QUANTITY``.  ``extra_frosting`` and
    ``add_sprinkles`` only mean something while ``special_request_enabled``
    is on.  That flag is form state: it is never serialized and does not
    take part in equality.
    """

    type: int = 0
    quantity: int = MIN_QUANTITY
    extra_frosting: bool = False
    add_sprinkles: bool = False
    name: str = ""
    street_address: str = ""
    city: str = ""
    zip: str = ""
    special_request_enabled: bool = field(default=False, compare=False)

    # --- Computed properties --------------------------------------------------

    @property
    def is_valid(self) -> bool:
        return not (
            self.name == ""
            or self.street_address == ""
            or self.city == ""
            or self.zip == ""
        )

    @property
    def cake_name(self) -> str:
        if not 0 <= self.type < len(CAKE_TYPES):
            raise ValidationError(f"Unknown cake type index {self.type}")
        return CAKE_TYPES[self.type]

    @staticmethod
    def type_index(cake_name: str) -> int:
        """Resolve a catalog name (case-insensitive) to its index."""
        for index, candidate in enumerate(CAKE_TYPES):
            if candidate.lower() == cake_name.strip().lower():
                return index
        raise ValidationError(f"Unknown cake type: '{cake_name}'")
