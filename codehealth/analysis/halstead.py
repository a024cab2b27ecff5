"""Halstead operator/operand counts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class HalsteadCounts:
    """
    Token counts for one file.

    - N1 = ``total_operators``, N2 = ``total_operands``
    - n1 = ``len(operators)``, n2 = ``len(operands)``

    The vocabularies are kept (not just their sizes) so a project can count
    distinct tokens across files.
    """

    total_operators: int = 0
    total_operands: int = 0
    operators: FrozenSet[str] = frozenset()
    operands: FrozenSet[str] = frozenset()

    @property
    def unique_operators(self) -> int:
        return len(self.operators)

    @property
    def unique_operands(self) -> int:
        return len(self.operands)


def count_tokens(operators: Iterable[str], operands: Iterable[str]) -> HalsteadCounts:
    operator_list = list(operators)
    operand_list = list(operands)
    return HalsteadCounts(
        total_operators=len(operator_list),
        total_operands=len(operand_list),
        operators=frozenset(operator_list),
        operands=frozenset(operand_list),
    )
