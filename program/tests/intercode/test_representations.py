import unittest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from intercode.expression_generator import translate
from intercode.representations import (
    IndirectTriples,
    tac_listing,
    quadruple_listing,
    triple_listing,
    indirect_triples,
    indirect_triple_listing,
    render_report
)

class TestRepresentations(unittest.TestCase):
    """Test cases for the textual views of an instruction sequence."""

    def setUp(self):
        """Set up test fixtures."""
        self.instructions = translate("2 + 3 * 4", "x")

    def test_tac_listing(self):
        """Test TAC lines are numbered from 1."""
        self.assertEqual(tac_listing(self.instructions), [
            "1: t1 = 3 * 4",
            "2: t2 = 2 + t1",
            "3: x = t2",
        ])

    def test_quadruple_listing(self):
        """Test quadruple lines are numbered from 1."""
        self.assertEqual(quadruple_listing(self.instructions), [
            "1: (*, 3, 4, t1)",
            "2: (+, 2, t1, t2)",
            "3: (=, t2,  , x)",
        ])

    def test_triple_listing(self):
        """Test triple lines are numbered by position from 0."""
        self.assertEqual(triple_listing(self.instructions), [
            "0: (*, 3, 4)",
            "1: (+, 2, t1)",
            "2: (=, t2, )",
        ])

    def test_indirect_triples(self):
        """Test the pointer table is the identity over positions."""
        table = indirect_triples(self.instructions)
        self.assertIsInstance(table, IndirectTriples)
        self.assertEqual(table.pointer_table, (0, 1, 2))
        for slot, instruction in enumerate(self.instructions):
            self.assertEqual(table.resolve(slot), instruction)

    def test_indirect_triple_listing(self):
        """Test pointer and instruction tables as text."""
        listing = indirect_triple_listing(self.instructions)
        self.assertEqual(listing.pointers, ["0 -> 0", "1 -> 1", "2 -> 2"])
        self.assertEqual(listing.instructions, triple_listing(self.instructions))

    def test_projections_are_idempotent(self):
        """Test running a projection twice gives the same text and leaves the input alone."""
        snapshot = list(self.instructions)
        for projection in (tac_listing, quadruple_listing, triple_listing, render_report):
            with self.subTest(projection=projection.__name__):
                self.assertEqual(projection(self.instructions), projection(self.instructions))
        self.assertEqual(self.instructions, snapshot)

    def test_empty_sequence(self):
        """Test every view of an empty sequence is empty."""
        self.assertEqual(tac_listing([]), [])
        self.assertEqual(quadruple_listing([]), [])
        self.assertEqual(triple_listing([]), [])
        self.assertEqual(indirect_triples([]).pointer_table, ())

    def test_render_report(self):
        """Test the full report layout."""
        expected = (
            "\n"
            "Three Address Code (TAC):\n"
            "1: t1 = 3 * 4\n"
            "2: t2 = 2 + t1\n"
            "3: x = t2\n"
            "\n"
            "Quadruples:\n"
            "1: (*, 3, 4, t1)\n"
            "2: (+, 2, t1, t2)\n"
            "3: (=, t2,  , x)\n"
            "\n"
            "Triples:\n"
            "0: (*, 3, 4)\n"
            "1: (+, 2, t1)\n"
            "2: (=, t2, )\n"
            "\n"
            "Indirect Triples:\n"
            "Pointer Table:\n"
            "0 -> 0\n"
            "1 -> 1\n"
            "2 -> 2\n"
            "\n"
            "Instruction Table:\n"
            "0: (*, 3, 4)\n"
            "1: (+, 2, t1)\n"
            "2: (=, t2, )\n"
        )
        self.assertEqual(render_report(self.instructions), expected)

if __name__ == '__main__':
    unittest.main()
