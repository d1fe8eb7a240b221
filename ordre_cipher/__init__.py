"""
ordre_cipher — L'Ordre message encoding
========================================
The cipher room of the Order: four tiers of puzzle-grade obfuscation,
a secret glyph keyboard, and the codec that ties them together.

Tiers:
    1  STANDARD  — Caesar shift (fixed rotation, no key)
    2  SYMBOLS   — Esoteric glyph substitution (no key)
    3  KEYED     — Vigenère polyalphabetic (secret key)
    4  DOUBLE    — Vigenère + glyphs (secret key)

None of this is encryption in the modern sense. It keeps casual readers
out of roleplay messages, nothing more.

Author : L'Ordre maintainers  |  L'Ordre
License: Apache 2.0
"""

__version__  = "1.0.0"
__author__   = "L'Ordre maintainers"
__project__  = "L'Ordre"

from .errors                  import MissingKeyError
from .tiers.tier1_caesar      import CaesarCipher
from .tiers.tier2_symbols     import GLYPHS, GLYPH_PAIRS, SymbolTable
from .tiers.tier3_vigenere    import VigenereCipher
from .tiers.tier4_double      import DoubleCipher
from .keyboard                import SecretKeyboard
from .archive                 import ArchiveEntry
from .codec                   import MessageCodec, Method, Mode

__all__ = [
    "MissingKeyError",
    "CaesarCipher",
    "GLYPHS",
    "GLYPH_PAIRS",
    "SymbolTable",
    "VigenereCipher",
    "DoubleCipher",
    "SecretKeyboard",
    "ArchiveEntry",
    "MessageCodec",
    "Method",
    "Mode",
]
