from typing import Iterable, List, Optional

from .base_generator import TACGenerator, MalformedExpressionError, ErrorKind
from .instruction import Instruction, Operator
from .options import DEFAULT_OPTIONS, TranslationOptions
from .tokens import Token, TokenType, tokenize

class ExpressionTACGenerator(TACGenerator):
    """
    Operator-precedence translator from infix tokens to intermediate code.

    Handles:
    - Arithmetic operators (+, -, *, /, %) and exponentiation (^)
    - Precedence and associativity (^ is right-associative)
    - Parenthesized sub-expressions
    - The closing assignment to the caller's result variable

    No tree is built: an operator stack and an operand stack are reduced in a
    single left-to-right pass, each reduction emitting one instruction into a
    fresh temporary.
    """

    def __init__(self, options: Optional[TranslationOptions] = None):
        super().__init__()
        self.options = options or DEFAULT_OPTIONS
        self._operators: List[Token] = []
        self._operands: List[str] = []

    def generate(self, tokens: Iterable[Token], result_var: str) -> List[Instruction]:
        """
        Translate a token sequence into instructions ending in ``result_var = ...``.

        Args:
            tokens: Tokens of one expression, in source order
            result_var: Variable that receives the final value

        Returns:
            List[Instruction]: Instructions in execution order, empty when
            there are no operands at all

        Raises:
            MalformedExpressionError: on operand underflow or unbalanced parentheses
        """
        self.reset()

        for token in tokens:
            if token.is_operand:
                self._operands.append(token.value)
            elif token.type is TokenType.OPERATOR:
                self._push_operator(token)
            elif token.is_open_paren:
                self._operators.append(token)
            elif token.is_close_paren:
                self._close_group(token)

        # Drain whatever is still pending
        while self._operators:
            if self._operators[-1].is_open_paren:
                raise MalformedExpressionError(
                    ErrorKind.UNBALANCED_PARENTHESES,
                    "'(' is never closed",
                    self._operators[-1].position
                )
            self._reduce()

        if self._operands:
            self.emit(Instruction.assign(self._operands[-1], result_var))

        return self.get_instructions()

    def generate_from_source(self, expression: str, result_var: str) -> List[Instruction]:
        """Tokenize ``expression`` with this generator's options and translate it."""
        return self.generate(tokenize(expression, self.options), result_var)

    def reset(self) -> None:
        super().reset()
        self._operators = []
        self._operands = []

    # ============ STACK HANDLING ============

    def _push_operator(self, token: Token) -> None:
        operator = Operator.from_symbol(token.value)
        while self._operators and self._operators[-1].type is TokenType.OPERATOR:
            top = Operator.from_symbol(self._operators[-1].value)
            if not self._binds_before(top, operator):
                break
            self._reduce()
        self._operators.append(token)

    def _close_group(self, token: Token) -> None:
        while self._operators and not self._operators[-1].is_open_paren:
            self._reduce()
        if not self._operators:
            raise MalformedExpressionError(
                ErrorKind.UNBALANCED_PARENTHESES,
                "')' has no matching '('",
                token.position
            )
        self._operators.pop()

    @staticmethod
    def _binds_before(top: Operator, incoming: Operator) -> bool:
        """Whether the stacked operator must be reduced before ``incoming`` is pushed."""
        if top.precedence > incoming.precedence:
            return True
        return top.precedence == incoming.precedence and not incoming.is_right_associative

    def _reduce(self) -> str:
        """Pop one operator and its two operands, emit ``temp = arg1 op arg2``."""
        token = self._operators.pop()
        if len(self._operands) < 2:
            raise MalformedExpressionError(
                ErrorKind.OPERAND_UNDERFLOW,
                f"operator '{token.value}' is missing an operand",
                token.position
            )
        arg2 = self._operands.pop()
        arg1 = self._operands.pop()

        result_temp = self.new_temp()
        self.emit(Instruction.binary(Operator.from_symbol(token.value), arg1, arg2, result_temp))
        self._operands.append(result_temp)
        return result_temp

def translate(expression: str, result_var: str,
              options: Optional[TranslationOptions] = None) -> List[Instruction]:
    """
    Tokenize and translate ``expression`` in one call.

    Every call uses its own generator, so temporaries restart at t1.
    """
    return ExpressionTACGenerator(options).generate_from_source(expression, result_var)
