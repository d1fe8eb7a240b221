"""
Tier 2 — SYMBOLS: Esoteric Glyph Substitution
==============================================
A keyless one-to-one substitution of the Order's alphabet into glyphs.

Alphabet: 26 letters, space, 10 digits and the punctuation . , ! ? ' " - : ;
Every member has exactly one glyph. Letters are matched case-insensitively
on the way in (ASCII uppercase folds to lowercase), so decoding always yields
lowercase text.

Characters outside the alphabet (accents, @, #, emoji, newlines) pass
through in place, in both directions. One character in, one character out.

The inverse map is derived from GLYPH_PAIRS when the table is built; there
is no second hand-written table to drift out of sync.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple


GLYPH_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("a", "☽"), ("b", "◈"), ("c", "⬡"), ("d", "◇"), ("e", "◊"),
    ("f", "⌘"), ("g", "⍟"), ("h", "⌬"), ("i", "⋄"), ("j", "◬"),
    ("k", "⌖"), ("l", "⌾"), ("m", "⍙"), ("n", "⌿"), ("o", "⍜"),
    ("p", "⌭"), ("q", "⍐"), ("r", "⍝"), ("s", "⌇"), ("t", "⍗"),
    ("u", "⌮"), ("v", "⍌"), ("w", "⌯"), ("x", "⍍"), ("y", "⍎"),
    ("z", "⍏"), (" ", "·"), (".", "⁂"), (",", "※"), ("!", "‡"),
    ("?", "†"), ("'", "′"), ('"', "″"), ("-", "—"), (":", "∴"),
    (";", "∵"), ("0", "⊙"), ("1", "⊕"), ("2", "⊗"), ("3", "⊛"),
    ("4", "⊜"), ("5", "⊝"), ("6", "⊞"), ("7", "⊟"), ("8", "⊠"),
    ("9", "⊡"),
)


class SymbolTable:
    """Read-only bidirectional character <-> glyph map."""

    def __init__(self, pairs: Iterable[Tuple[str, str]] = GLYPH_PAIRS):
        forward = {}
        inverse = {}
        for char, glyph in pairs:
            if len(char) != 1 or len(glyph) != 1:
                raise ValueError(f"Table entries must be single characters: {char!r} -> {glyph!r}")
            if char in forward:
                raise ValueError(f"Character {char!r} mapped twice.")
            if glyph in inverse:
                raise ValueError(f"Glyph {glyph!r} assigned to both {inverse[glyph]!r} and {char!r}.")
            forward[char] = glyph
            inverse[glyph] = char
        self._forward = MappingProxyType(forward)
        self._inverse = MappingProxyType(inverse)

    @property
    def forward(self) -> Mapping[str, str]:
        return self._forward

    @property
    def inverse(self) -> Mapping[str, str]:
        return self._inverse

    def __len__(self) -> int:
        return len(self._forward)

    @staticmethod
    def _fold(char: str) -> str:
        # ASCII only: the KELVIN SIGN lowercases to "k" and must stay a passthrough
        return char.lower() if "A" <= char <= "Z" else char

    def __contains__(self, char: str) -> bool:
        return self._fold(char) in self._forward

    def glyph_for(self, char: str) -> str:
        """Glyph for an alphabet member. Raises KeyError for anything else."""
        return self._forward[self._fold(char)]

    def encode_char(self, char: str) -> str:
        return self._forward.get(self._fold(char), char)

    def decode_char(self, glyph: str) -> str:
        return self._inverse.get(glyph, glyph)

    def encode(self, text: str) -> str:
        """Replace every alphabet character with its glyph."""
        return "".join(self.encode_char(ch) for ch in text)

    def decode(self, text: str) -> str:
        """Replace every known glyph with its (lowercase) character."""
        return "".join(self.decode_char(ch) for ch in text)


GLYPHS = SymbolTable()
