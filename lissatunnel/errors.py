"""Exceptions raised by lissatunnel."""

import math


class InvalidArgument(ValueError):
    """A curve, polygon or mesh builder received a parameter it cannot use."""


def require_finite(owner: str, **values):
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidArgument(f"{owner}: {name} must be finite, got {value!r}")


def require_positive(owner: str, **values):
    for name, value in values.items():
        if not math.isfinite(value) or value <= 0.0:
            raise InvalidArgument(f"{owner}: {name} must be a finite positive number, got {value!r}")
