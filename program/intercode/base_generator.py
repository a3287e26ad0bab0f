from typing import List, Optional, Dict, Any
from enum import Enum

from .instruction import Instruction
from .temp_manager import TemporaryManager

class ErrorKind(Enum):
    """Classes of malformed input reported by the tokenizer and translator."""

    OPERAND_UNDERFLOW = "operand_underflow"
    UNBALANCED_PARENTHESES = "unbalanced_parentheses"
    UNRECOGNIZED_CHARACTER = "unrecognized_character"
    MALFORMED_NUMBER = "malformed_number"

class TACGenerationError(Exception):
    """Exception raised during intermediate code generation."""

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"Position {position}: {message}"
        super().__init__(message)
        self.position = position

class MalformedExpressionError(TACGenerationError):
    """The expression cannot be translated into a well formed instruction sequence."""

    def __init__(self, kind: ErrorKind, message: str, position: Optional[int] = None):
        super().__init__(message, position)
        self.kind = kind

class TACGenerator:
    """
    Base class for intermediate code generation.
    Collects emitted instructions in execution order and hands out temporaries.
    """

    def __init__(self):
        self.instructions: List[Instruction] = []
        self.temp_manager = TemporaryManager()

    def emit(self, instruction: Instruction) -> None:
        """
        Append an instruction to the output sequence.

        Args:
            instruction: Instruction to emit
        """
        self.instructions.append(instruction)

    def new_temp(self) -> str:
        """
        Generate a new temporary variable.

        Returns:
            str: New temporary variable name
        """
        return self.temp_manager.new_temp()

    def get_instructions(self) -> List[Instruction]:
        """
        Get all generated instructions.

        Returns:
            List[Instruction]: Generated instructions
        """
        return self.instructions.copy()

    def clear_instructions(self) -> None:
        """Clear all generated instructions."""
        self.instructions.clear()

    def get_tac_code(self) -> str:
        """
        Get the three address code of all instructions, one per line.

        Returns:
            str: TAC code as string
        """
        return '\n'.join(str(instruction) for instruction in self.instructions)

    def reset(self) -> None:
        """Reset the generator to initial state."""
        self.instructions.clear()
        self.temp_manager.reset()

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get generation statistics.

        Returns:
            Dict[str, Any]: Statistics about the last generation
        """
        return {
            'instructions_generated': len(self.instructions),
            'temporaries_used': self.temp_manager.get_temp_count()
        }
