"""
SECRET KEYBOARD  |  Clavier sacré de l'Ordre

Builds a message one key press at a time, directly in glyph form.
No rendering here: a UI (or a test, or the CLI) sends events and reads
snapshot() back.

Events:
    append_glyph(symbol)   one unit on the end
    backspace()            drop the last unit (no-op when empty)
    append_space()         the space GLYPH "·", not a raw " "
    append_newline()       a literal "\\n"

The buffer stays editable until the owner throws it away; there is no
submitted/locked state. One writer per keyboard.
"""

import logging
from typing import Iterator, List

from .tiers.tier2_symbols import GLYPHS, SymbolTable

logger = logging.getLogger(__name__)

KEYBOARD_ROWS = (
    ("☽", "◈", "⬡", "◇", "◊", "⌘", "⍟", "⌬", "⋄", "◬"),
    ("⌖", "⌾", "⍙", "⌿", "⍜", "⌭", "⍐", "⍝", "⌇", "⍗"),
    ("⌮", "⍌", "⌯", "⍍", "⍎", "⍏"),
)

SPECIAL_SYMBOLS = ("⁂", "※", "‡", "†", "∴", "∵", "⊙", "⊕", "⊗", "⊛")

NEWLINE = "\n"


class SecretKeyboard:
    """Append-only input buffer driven by key events."""

    def __init__(self, table: SymbolTable = GLYPHS):
        self._units: List[str] = []
        self._space = table.glyph_for(" ")

    @staticmethod
    def keys() -> Iterator[str]:
        """Every symbol key, in layout order (rows, then specials)."""
        for row in KEYBOARD_ROWS:
            yield from row
        yield from SPECIAL_SYMBOLS

    def append_glyph(self, symbol: str) -> None:
        if not symbol:
            return
        self._units.append(symbol)
        logger.debug(f"Key {symbol!r} -> {len(self._units)} units")

    def backspace(self) -> None:
        if self._units:
            removed = self._units.pop()
            logger.debug(f"Backspace removed {removed!r}")

    def append_space(self) -> None:
        self.append_glyph(self._space)

    def append_newline(self) -> None:
        self.append_glyph(NEWLINE)

    def clear(self) -> None:
        self._units.clear()

    def snapshot(self) -> str:
        """Current buffer as text. Does not modify the buffer."""
        return "".join(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __str__(self) -> str:
        return self.snapshot()

    def __repr__(self):
        return f"SecretKeyboard({self.snapshot()!r})"
