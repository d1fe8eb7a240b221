"""
Tier 4 — DOUBLE: Vigenère + Esoteric Symbols
=============================================
The Order's strongest setting: shift the letters with the secret key,
then dress the result in glyphs.

    encode:  text -> Vigenère(key) -> lowercase -> glyphs
    decode:  glyphs -> characters -> Vigenère⁻¹(key)

The glyph table only knows lowercase letters, so the shifted ASCII letters
are lower-cased before substitution. Nothing else is folded: characters
outside the alphabet (accents, the KELVIN SIGN, "İ") pass through as they
are. Decoding therefore returns the message in lowercase: letters,
digits, punctuation and passthrough characters come back exactly,
capitals do not. "Hello" with key "cle" decodes to "hello".

A bad key fails in the Vigenère stage before anything is substituted.
"""

from .tier2_symbols import GLYPHS, SymbolTable
from .tier3_vigenere import VigenereCipher


class DoubleCipher:
    """Vigenère followed by glyph substitution."""

    def __init__(self, key: str, table: SymbolTable = GLYPHS):
        self._vigenere = VigenereCipher(key)
        self._table = table

    @property
    def key(self) -> str:
        return self._vigenere.key

    def encode(self, text: str) -> str:
        shifted = self._vigenere.encode(text)
        folded = "".join(c.lower() if c in VigenereCipher.LETTERS else c for c in shifted)
        return self._table.encode(folded)

    def decode(self, glyph_text: str) -> str:
        shifted = self._table.decode(glyph_text)
        return self._vigenere.decode(shifted)


def double_encode(text: str, key: str, table: SymbolTable = GLYPHS) -> str:
    return DoubleCipher(key, table).encode(text)


def double_decode(glyph_text: str, key: str, table: SymbolTable = GLYPHS) -> str:
    return DoubleCipher(key, table).decode(glyph_text)
