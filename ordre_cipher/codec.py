"""
MESSAGE CODEC  |  Module de chiffrement

One entry point for every cipher the Order uses. Pick a method and a
mode, hand over the text (and the key or shift the method needs), get the
result back. Nothing is stored or displayed here.

    Method.CAESAR    fixed shift, no key        (shift, default 3)
    Method.SYMBOLS   glyph substitution         (no key, key ignored)
    Method.VIGENERE  polyalphabetic             (key required)
    Method.DOUBLE    Vigenère then glyphs       (key required)

Key-driven methods check the key before touching the text: an empty or
letterless key raises MissingKeyError and nothing is transformed.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from .archive import ArchiveEntry
from .errors import MissingKeyError
from .tiers.tier1_caesar import CaesarCipher
from .tiers.tier2_symbols import GLYPHS, SymbolTable
from .tiers.tier3_vigenere import VigenereCipher
from .tiers.tier4_double import DoubleCipher

logger = logging.getLogger(__name__)


class Method(str, Enum):
    CAESAR   = "caesar"
    SYMBOLS  = "symbols"
    VIGENERE = "vigenere"
    DOUBLE   = "double"

    @property
    def needs_key(self) -> bool:
        return self in (Method.VIGENERE, Method.DOUBLE)


class Mode(str, Enum):
    ENCODE = "encode"
    DECODE = "decode"


class MessageCodec:
    """Dispatches text to the selected cipher tier."""

    def __init__(self, table: SymbolTable = GLYPHS):
        self._table = table

    @staticmethod
    def _coerce(value, enum_cls):
        try:
            return enum_cls(value)
        except ValueError:
            choices = ", ".join(m.value for m in enum_cls)
            raise ValueError(f"Unknown {enum_cls.__name__.lower()} {value!r} (expected one of: {choices}).") from None

    def check_key(self, method: Union[Method, str], key: Optional[str]) -> None:
        """Raise MissingKeyError if `method` needs a key and `key` has no letters."""
        method = self._coerce(method, Method)
        if method.needs_key and not VigenereCipher.effective_key(key or ""):
            logger.warning(f"Refused {method.value}: no usable key")
            raise MissingKeyError(method.value)

    def _cipher(self, method: Method, key: Optional[str], shift: int):
        if method is Method.CAESAR:
            return CaesarCipher(shift)
        if method is Method.SYMBOLS:
            return self._table
        if method is Method.VIGENERE:
            return VigenereCipher(key)
        return DoubleCipher(key, self._table)

    def transform(self, text: str, method: Union[Method, str],
                  mode: Union[Mode, str], key: Optional[str] = None,
                  shift: int = CaesarCipher.DEFAULT_SHIFT) -> str:
        method = self._coerce(method, Method)
        mode = self._coerce(mode, Mode)
        self.check_key(method, key)

        cipher = self._cipher(method, key, shift)
        if mode is Mode.ENCODE:
            result = cipher.encode(text)
        else:
            result = cipher.decode(text)
        logger.debug(f"{method.value}/{mode.value}: {len(text)} chars in, {len(result)} out")
        return result

    def encode(self, text: str, method: Union[Method, str] = Method.DOUBLE,
               key: Optional[str] = None, shift: int = CaesarCipher.DEFAULT_SHIFT) -> str:
        return self.transform(text, method, Mode.ENCODE, key=key, shift=shift)

    def decode(self, text: str, method: Union[Method, str] = Method.DOUBLE,
               key: Optional[str] = None, shift: int = CaesarCipher.DEFAULT_SHIFT) -> str:
        return self.transform(text, method, Mode.DECODE, key=key, shift=shift)

    def archive(self, original: str, encoded: str, method: Union[Method, str],
                shift: int = CaesarCipher.DEFAULT_SHIFT,
                date: Optional[datetime] = None) -> ArchiveEntry:
        """Build the entry the archive store keeps for a finished message."""
        method = self._coerce(method, Method)
        label = CaesarCipher(shift).label if method is Method.CAESAR else method.value
        if date is None:
            return ArchiveEntry(original, encoded, label)
        return ArchiveEntry(original, encoded, label, date)
