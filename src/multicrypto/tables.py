"""Precomputed multiplication and subtraction tables.

The product table lists, for every product of two digits in a range, all the
ways of reaching it.  The subtraction table lists, for every target value
``1..26``, the pairs of products whose difference is that value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from .errors import InvalidDigitRange

_LOGGER = logging.getLogger(__name__)

TARGET_COUNT = 26


@dataclass(frozen=True)
class MultiplicationOperation:
    """Two numbers being multiplied together (a x b)."""

    a: int
    b: int

    @property
    def product(self) -> int:
        return self.a * self.b


@dataclass(frozen=True)
class SubtractionOperation:
    """The subtraction of one product from another (a - b)."""

    a: int
    b: int

    @property
    def difference(self) -> int:
        return self.a - self.b


ProductTable = Mapping[int, Tuple[MultiplicationOperation, ...]]
SubtractionTable = Tuple[Tuple[SubtractionOperation, ...], ...]


def build_product_table(min_digit: int, max_digit: int) -> ProductTable:
    """Return every product of two digits in ``[min_digit, max_digit]``.

    Both orderings of a factor pair are kept, so ``3 x 4`` and ``4 x 3`` are
    separate entries under ``12``.
    """

    if min_digit > max_digit:
        raise InvalidDigitRange(min_digit, max_digit)

    products: Dict[int, List[MultiplicationOperation]] = {}
    for i in range(min_digit, max_digit + 1):
        for j in range(min_digit, max_digit + 1):
            products.setdefault(i * j, []).append(MultiplicationOperation(i, j))

    _LOGGER.debug(
        "built product table for %d..%d: %d products",
        min_digit,
        max_digit,
        len(products),
    )
    return MappingProxyType({value: tuple(ops) for value, ops in sorted(products.items())})


def build_subtraction_table(products: ProductTable) -> SubtractionTable:
    """Return 26 entries; entry ``v - 1`` holds the product pairs differing by ``v``.

    An entry is empty when no two products in the table differ by that value.
    """

    keys = sorted(products)
    available = set(keys)
    table = []
    for value in range(1, TARGET_COUNT + 1):
        table.append(
            tuple(
                SubtractionOperation(left, left - value)
                for left in keys
                if left - value in available
            )
        )

    _LOGGER.debug(
        "built subtraction table: %s",
        ", ".join(f"{value}={len(entry)}" for value, entry in enumerate(table, start=1)),
    )
    return tuple(table)


def missing_differences(table: Sequence[Sequence[SubtractionOperation]]) -> List[int]:
    """Return the target values (1-based) that have no subtraction available."""

    return [value for value, entry in enumerate(table, start=1) if not entry]


__all__ = [
    "MultiplicationOperation",
    "ProductTable",
    "SubtractionOperation",
    "SubtractionTable",
    "TARGET_COUNT",
    "build_product_table",
    "build_subtraction_table",
    "missing_differences",
]
