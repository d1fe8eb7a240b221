"""
Tier 1 — STANDARD: Caesar Shift
================================
Every ASCII letter is rotated a fixed number of places through the
alphabet, case preserved. Anything else passes through untouched.

This is the cipher of the original "basic" module: one shift for the whole
message, chosen on a 1–25 slider (default 3). Any integer is accepted
here; the rotation is reduced modulo 26 in both directions.

Archive label: "caesar(<shift>)"
"""


class CaesarCipher:
    """Fixed-shift monoalphabetic rotation."""

    DEFAULT_SHIFT = 3

    def __init__(self, shift: int = DEFAULT_SHIFT):
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise ValueError("Caesar shift must be an integer.")
        self._shift = shift

    @property
    def shift(self) -> int:
        return self._shift

    @property
    def label(self) -> str:
        return f"caesar({self._shift})"

    @staticmethod
    def _rotate(text: str, shift: int) -> str:
        result = []
        for ch in text:
            if "a" <= ch <= "z" or "A" <= ch <= "Z":
                base = 65 if ch.isupper() else 97
                result.append(chr(((ord(ch) - base + shift) % 26 + 26) % 26 + base))
            else:
                result.append(ch)
        return "".join(result)

    def encode(self, text: str) -> str:
        """Shift letters forward. Non-letters pass through."""
        return self._rotate(text, self._shift)

    def decode(self, text: str) -> str:
        """Shift letters back."""
        return self._rotate(text, -self._shift)
