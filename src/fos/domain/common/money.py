from __future__ import annotations

from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")


def parse_amount(value: object) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"amount must be numeric, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"amount must be numeric, got {value!r}") from exc
    else:
        raise ValueError(f"amount must be numeric, got {value!r}")
    if not amount.is_finite():
        raise ValueError(f"amount must be finite, got {value!r}")
    return amount


def parse_quantity(value: object) -> int:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"quantity must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    amount = parse_amount(value)
    if amount != amount.to_integral_value():
        raise ValueError(f"quantity must be an integer, got {value!r}")
    return int(amount)
