"""
Textual views over an instruction sequence.

Every function here is a pure projection: it reads the sequence in order and
never changes it, so calling it twice gives the same text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .instruction import Instruction


@dataclass(frozen=True)
class IndirectTriples:
    """Triples reached through a pointer table (identity, nothing is reordered)."""

    pointer_table: Tuple[int, ...]
    triples: Tuple[Instruction, ...]

    def resolve(self, slot: int) -> Instruction:
        return self.triples[self.pointer_table[slot]]


@dataclass(frozen=True)
class IndirectTripleListing:
    pointers: List[str]
    instructions: List[str]


def tac_listing(instructions: Sequence[Instruction]) -> List[str]:
    """Three address code, numbered from 1."""
    return [f"{i}: {instruction}" for i, instruction in enumerate(instructions, start=1)]


def quadruple_listing(instructions: Sequence[Instruction]) -> List[str]:
    """Quadruples, numbered from 1."""
    return [f"{i}: {instruction.to_quadruple()}" for i, instruction in enumerate(instructions, start=1)]


def triple_listing(instructions: Sequence[Instruction]) -> List[str]:
    """Triples, numbered by position from 0."""
    return [f"{i}: {instruction.to_triple()}" for i, instruction in enumerate(instructions)]


def indirect_triples(instructions: Sequence[Instruction]) -> IndirectTriples:
    return IndirectTriples(
        pointer_table=tuple(range(len(instructions))),
        triples=tuple(instructions)
    )


def indirect_triple_listing(instructions: Sequence[Instruction]) -> IndirectTripleListing:
    table = indirect_triples(instructions)
    return IndirectTripleListing(
        pointers=[f"{slot} -> {target}" for slot, target in enumerate(table.pointer_table)],
        instructions=triple_listing(table.triples)
    )


def render_report(instructions: Sequence[Instruction]) -> str:
    """
    Render all four representations the way the interactive driver prints them.

    Args:
        instructions: Translator output

    Returns:
        str: Report text with one section per representation
    """
    indirect = indirect_triple_listing(instructions)
    lines = ["", "Three Address Code (TAC):"]
    lines.extend(tac_listing(instructions))
    lines.extend(["", "Quadruples:"])
    lines.extend(quadruple_listing(instructions))
    lines.extend(["", "Triples:"])
    lines.extend(triple_listing(instructions))
    lines.extend(["", "Indirect Triples:", "Pointer Table:"])
    lines.extend(indirect.pointers)
    lines.extend(["", "Instruction Table:"])
    lines.extend(indirect.instructions)
    return "\n".join(lines) + "\n"
