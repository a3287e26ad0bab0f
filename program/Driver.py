import sys

from intercode.expression_generator import ExpressionTACGenerator
from intercode.base_generator import TACGenerationError
from intercode.options import TranslationOptions
from intercode.representations import render_report

USAGE = "usage: Driver.py [--strict]"

def read_line(prompt: str) -> str:
    """Prompt for one line; end of input reads as an empty line."""
    try:
        return input(prompt)
    except EOFError:
        return ""

def parse_options(args):
    """Build translation options from command line arguments (only --strict is known)."""
    if not args:
        return TranslationOptions()
    if args == ['--strict']:
        return TranslationOptions.strict()
    return None

def main(argv):
    options = parse_options(argv[1:])
    if options is None:
        print(USAGE, file=sys.stderr)
        return 2

    expression = read_line("Enter an expression: ")
    result_var = read_line("Enter the variable to store the result: ")

    try:
        generator = ExpressionTACGenerator(options)
        instructions = generator.generate_from_source(expression, result_var)
    except TACGenerationError as e:
        print(f"\n✗ Malformed expression: {e}")
        return 1

    print(render_report(instructions), end="")
    return 0

if __name__ == '__main__':
    sys.exit(main(sys.argv))
