"""
ordre_cipher — Live Demo: All Four Tiers + Secret Keyboard
===========================================================
Run:  python examples/demo_all_tiers.py

Encodes and decodes one message with every tier, then types a second
one on the secret keyboard.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ordre_cipher import (
    GLYPHS, MessageCodec, Method, MissingKeyError, SecretKeyboard,
)

LINE = "═" * 70
MSG  = "Le Conseil se réunit à minuit, porte Nord."
KEY  = "Lune"

def header(tier, name):
    print(f"\n{LINE}")
    print(f"  Tier {tier} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

codec = MessageCodec()

print(f"\n{LINE}")
print("  ordre_cipher — Four-Tier Demo")
print(LINE)
print(f"  Message: {MSG}")
print(f"  Key:     {KEY}\n")

# ── TIER 1 ───────────────────────────────────────────────────────────────────
header(1, "STANDARD — Caesar (shift 3)")
ct = codec.encode(MSG, Method.CAESAR)
ok("Encoded", ct)
ok("Decoded", codec.decode(ct, Method.CAESAR))

# ── TIER 2 ───────────────────────────────────────────────────────────────────
header(2, "SYMBOLS — Esoteric glyphs")
ct = codec.encode(MSG, Method.SYMBOLS)
ok("Encoded", ct)
ok("Decoded", codec.decode(ct, Method.SYMBOLS) + "   (lowercase by design)")

# ── TIER 3 ───────────────────────────────────────────────────────────────────
header(3, "KEYED — Vigenère")
ct = codec.encode(MSG, Method.VIGENERE, key=KEY)
ok("Encoded", ct)
ok("Decoded", codec.decode(ct, Method.VIGENERE, key=KEY))
try:
    codec.encode(MSG, Method.VIGENERE, key="1234")
except MissingKeyError as e:
    ok("Letterless key refused", str(e))

# ── TIER 4 ───────────────────────────────────────────────────────────────────
header(4, "DOUBLE — Vigenère + glyphs")
double_ct = codec.encode(MSG, Method.DOUBLE, key=KEY)
ok("Encoded", double_ct)
ok("Decoded", codec.decode(double_ct, Method.DOUBLE, key=KEY))
entry = codec.archive(MSG, double_ct, Method.DOUBLE)
ok("Archive record", entry.to_json())

# ── KEYBOARD ─────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  Secret keyboard")
print(LINE)
kb = SecretKeyboard()
for word in ("venez", "seuls"):
    for ch in word:
        kb.append_glyph(GLYPHS.glyph_for(ch))
    kb.append_space()
kb.backspace()
ok("Typed", kb.snapshot())
ok("Reads", codec.decode(kb.snapshot(), Method.SYMBOLS))

print(f"\n{LINE}\n")
