"""Wire format for Order.

The key set below is the contract with the order endpoint.  Requests
carry exactly these keys; responses must carry at least these keys and
anything extra (an echo server adds ``id`` and ``createdAt``) is ignored.
"""

from __future__ import annotations

import json

from bakery.domain.exceptions import DecodingError, EncodingError
from bakery.domain.model.order import Order

# attribute name -> (wire key, expected type)
WIRE_FIELDS: dict[str, tuple[str, type]] = {
    "type": ("type", int),
    "quantity": ("quantity", int),
    "extra_frosting": ("extraFrosting", bool),
    "add_sprinkles": ("addSprinkles", bool),
    "name": ("name", str),
    "street_address": ("streetAddress", str),
    "city": ("city", str),
    "zip": ("zip", str),
}


def to_raw(order: Order) -> dict:
    return {key: getattr(order, attr) for attr, (key, _) in WIRE_FIELDS.items()}


def from_raw(raw: dict) -> Order:
    values = {}
    for attr, (key, expected) in WIRE_FIELDS.items():
        if key not in raw:
            raise DecodingError(f"Missing key '{key}'")
        value = raw[key]
        if expected is int and type(value) is float and value.is_integer():
            value = int(value)
        # bool is a subclass of int, so check it explicitly both ways
        if type(value) is not expected:
            raise DecodingError(
                f"Key '{key}' must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        values[attr] = value
    return Order(**values)


def serialize(order: Order) -> bytes:
    try:
        return json.dumps(to_raw(order)).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Failed to encode order: {exc}") from exc


def deserialize(data: bytes) -> Order:
    try:
        raw = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise DecodingError(f"Body is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise DecodingError(f"Expected a JSON object, got {type(raw).__name__}")
    return from_raw(raw)
