"""Lightweight validation helpers shared by the domain models."""

import math
from decimal import Decimal
from numbers import Real
from typing import Any

from museo.utils.error_handling import InvalidArgumentError


def ensure_present(value: Any, field: str) -> None:
    """Raise InvalidArgumentError if value is missing."""
    if value is None:
        raise InvalidArgumentError(f"{field} no puede ser nulo")


def ensure_positive(value: Any, field: str) -> float:
    """
    Return value as float, rejecting anything that is not a finite number > 0.

    The check runs on the converted float, so amounts that overflow or
    underflow to 0.0 are rejected here rather than by the model.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidArgumentError(f"{field} debe ser numerico")
    try:
        result = float(value)
    except (OverflowError, ValueError) as exc:
        raise InvalidArgumentError(f"{field} esta fuera de rango") from exc
    if not math.isfinite(result):
        raise InvalidArgumentError(f"{field} debe ser un numero finito")
    if result <= 0:
        raise InvalidArgumentError(f"{field} debe ser mayor a 0")
    return result
