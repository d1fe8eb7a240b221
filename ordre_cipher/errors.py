"""
Errors raised by the encoding core.

Only key-driven methods can fail. The symbol table and the secret keyboard
are total: every input has a defined output.
"""


class MissingKeyError(ValueError):
    """A key-driven method was called with no usable letters in its key."""

    def __init__(self, method: str = "vigenere"):
        self.method = method
        super().__init__(
            f"Secret key required for the {method} cipher "
            f"(the key must contain at least one letter)."
        )
