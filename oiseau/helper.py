"""Small general-purpose helpers."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V", bound=Hashable)


def reverse_map(mapping: Mapping[K, V]) -> dict[V, K]:
    """Return a dict mapping each value of ``mapping`` to its key.

    When several keys share a value, the last one seen wins.
    """
    return {value: key for key, value in mapping.items()}