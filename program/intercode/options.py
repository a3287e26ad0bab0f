from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationOptions:
    """
    Leniency switches for the tokenizer.

    The defaults accept what the classic expression-to-TAC exercise accepts:
    stray characters are dropped and numeric literals are copied verbatim
    (``12.3.4`` is one token).  Turning a switch off makes the tokenizer raise
    ``MalformedExpressionError`` instead.
    """

    allow_unknown_characters: bool = True
    allow_malformed_numbers: bool = True

    @classmethod
    def strict(cls) -> "TranslationOptions":
        return cls(allow_unknown_characters=False, allow_malformed_numbers=False)

    @property
    def is_strict(self) -> bool:
        return not (self.allow_unknown_characters or self.allow_malformed_numbers)


DEFAULT_OPTIONS = TranslationOptions()
