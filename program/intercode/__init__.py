"""
Intermediate Code Generation Module

Translates infix arithmetic expressions into the linear intermediate forms
taught in compiler construction: three address code, quadruples, triples and
indirect triples.

Main components:
- tokens: Tokenizer for numbers, identifiers, operators and parentheses
- instruction: Operator enumeration and the Instruction record
- temp_manager: Temporary variable naming (t1, t2, ...)
- expression_generator: Operator-precedence translator
- representations: TAC, quadruple, triple and indirect triple listings
"""

from .instruction import (
    Operator,
    Instruction
)

from .tokens import (
    Token,
    TokenType,
    Tokenizer,
    tokenize
)

from .temp_manager import TemporaryManager

from .options import TranslationOptions

from .base_generator import (
    TACGenerator,
    TACGenerationError,
    MalformedExpressionError,
    ErrorKind
)

from .expression_generator import (
    ExpressionTACGenerator,
    translate
)

from .representations import (
    IndirectTriples,
    IndirectTripleListing,
    tac_listing,
    quadruple_listing,
    triple_listing,
    indirect_triples,
    indirect_triple_listing,
    render_report
)

__all__ = [
    'Operator',
    'Instruction',
    'Token',
    'TokenType',
    'Tokenizer',
    'tokenize',
    'TemporaryManager',
    'TranslationOptions',
    'TACGenerator',
    'TACGenerationError',
    'MalformedExpressionError',
    'ErrorKind',
    'ExpressionTACGenerator',
    'translate',
    'IndirectTriples',
    'IndirectTripleListing',
    'tac_listing',
    'quadruple_listing',
    'triple_listing',
    'indirect_triples',
    'indirect_triple_listing',
    'render_report'
]
