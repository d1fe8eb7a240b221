"""
Tier 3 — KEYED: Vigenère Polyalphabetic Cipher
===============================================
Each ASCII letter is shifted by the next letter of a repeating key.
Case is preserved. Non-letters pass through and do NOT consume key
material: the key cursor only advances after a letter is shifted.

Key derivation: the user's key is lower-cased, then stripped to a-z
("Clé-42" -> "cl"). If nothing is left, the cipher refuses
to run (MissingKeyError) instead of degrading to the identity.

Historical note: Blaise de Vigenère, 1553. "Le chiffre indéchiffrable",
broken by Kasiski in 1863. Puzzle-grade obfuscation, nothing more.
"""

import string

from ..errors import MissingKeyError


class VigenereCipher:
    """Repeating-key Vigenère cipher over ASCII letters."""

    LETTERS = frozenset(string.ascii_letters)

    def __init__(self, key: str):
        effective = self.effective_key(key)
        if not effective:
            raise MissingKeyError("vigenere")
        self._key = effective
        self._shifts = [ord(k) - 97 for k in effective]

    @property
    def key(self) -> str:
        """The effective (letters-only, lowercase) key."""
        return self._key

    @staticmethod
    def effective_key(key: str) -> str:
        if not key:
            return ""
        return "".join(c for c in key.lower() if "a" <= c <= "z")

    def _apply(self, text: str, direction: int) -> str:
        result = []
        k_idx = 0
        period = len(self._shifts)
        for ch in text:
            if ch in self.LETTERS:
                base = 65 if ch.isupper() else 97
                shift = self._shifts[k_idx % period]
                if direction > 0:
                    code = (ord(ch) - base + shift) % 26
                else:
                    code = (ord(ch) - base - shift + 26) % 26
                result.append(chr(code + base))
                k_idx += 1
            else:
                result.append(ch)
        return "".join(result)

    def encode(self, text: str) -> str:
        """Encrypt letters with the key. Non-letters pass through."""
        return self._apply(text, 1)

    def decode(self, text: str) -> str:
        """Reverse encode() exactly, case included."""
        return self._apply(text, -1)


def vigenere_encode(text: str, key: str) -> str:
    return VigenereCipher(key).encode(text)


def vigenere_decode(text: str, key: str) -> str:
    return VigenereCipher(key).decode(text)
