import unittest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from intercode.instruction import Instruction, Operator

class TestOperator(unittest.TestCase):
    """Test cases for the Operator enumeration."""

    def test_precedence_levels(self):
        """Test precedence of every operator."""
        expected = {'+': 1, '-': 1, '*': 2, '/': 2, '%': 2, '^': 3, '=': 0}
        for symbol, precedence in expected.items():
            with self.subTest(operator=symbol):
                self.assertEqual(Operator.from_symbol(symbol).precedence, precedence)

    def test_associativity(self):
        """Test that only exponentiation is right-associative."""
        right = [op for op in Operator if op.is_right_associative]
        self.assertEqual(right, [Operator.POW])

    def test_unknown_symbol(self):
        """Test that unknown operators are rejected instead of defaulting."""
        with self.assertRaises(ValueError):
            Operator.from_symbol('&')

class TestInstruction(unittest.TestCase):
    """Test cases for Instruction formatting."""

    def test_binary_tac(self):
        """Test binary instruction: x = y op z"""
        instr = Instruction.binary(Operator.MUL, "3", "4", "t1")
        self.assertEqual(str(instr), "t1 = 3 * 4")

    def test_assign_tac(self):
        """Test copy instruction: x = y"""
        instr = Instruction.assign("t2", "y")
        self.assertEqual(str(instr), "y = t2")
        self.assertIsNone(instr.arg2)
        self.assertTrue(instr.is_assignment)

    def test_binary_quadruple(self):
        """Test quadruple of a binary instruction."""
        instr = Instruction.binary(Operator.ADD, "2", "t1", "t2")
        self.assertEqual(instr.to_quadruple(), "(+, 2, t1, t2)")

    def test_assign_quadruple(self):
        """Test quadruple of an assignment keeps a blank placeholder."""
        instr = Instruction.assign("t2", "y")
        self.assertEqual(instr.to_quadruple(), "(=, t2,  , y)")

    def test_triples(self):
        """Test triples omit the result field."""
        self.assertEqual(Instruction.binary(Operator.POW, "a", "b", "t1").to_triple(), "(^, a, b)")
        self.assertEqual(Instruction.assign("t1", "r").to_triple(), "(=, t1, )")

    def test_second_operand_invariant(self):
        """Test arg2 must be present exactly for binary operators."""
        with self.assertRaises(ValueError):
            Instruction(Operator.ADD, "a", None, "t1")
        with self.assertRaises(ValueError):
            Instruction(Operator.ASSIGN, "a", "b", "x")

    def test_immutable(self):
        """Test instructions cannot be modified after creation."""
        instr = Instruction.assign("a", "b")
        with self.assertRaises(AttributeError):
            instr.result = "c"

if __name__ == '__main__':
    unittest.main()
