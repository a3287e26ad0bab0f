"""
Test module for the intermediate code generation components.

Covers the tokenizer, the instruction model, temporary naming, the
operator-precedence translator and the textual representations.
"""
