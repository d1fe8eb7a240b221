"""
ordre_cipher — Cipher Tier Test Suite
======================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_tiers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from ordre_cipher.errors               import MissingKeyError
from ordre_cipher.tiers.tier1_caesar   import CaesarCipher
from ordre_cipher.tiers.tier2_symbols  import GLYPHS, GLYPH_PAIRS, SymbolTable
from ordre_cipher.tiers.tier3_vigenere import VigenereCipher, vigenere_encode, vigenere_decode
from ordre_cipher.tiers.tier4_double   import DoubleCipher, double_encode, double_decode

MSG = "Hello, World!"
KEY = "cle"

# ── Tier 3 — Vigenère (round trip first: the core invariant) ─────────────────
@pytest.mark.parametrize("text", [
    MSG,
    "",
    "Le Conseil se réunit à minuit.",
    "ALL CAPS and lower 123 !?",
    "☽◈⬡ glyphs stay put\n",
])
@pytest.mark.parametrize("key", [KEY, "Lune", "a", "Clé-42 secrète", "zzzz"])
def test_tier3_vigenere_roundtrip(text, key):
    v = VigenereCipher(key)
    assert v.decode(v.encode(text)) == text

def test_tier3_vigenere_known_vector():
    assert vigenere_encode(MSG, KEY) == "Jppnz, Aqcpf!"
    assert vigenere_decode("Jppnz, Aqcpf!", KEY) == MSG

def test_tier3_vigenere_cursor_skips_non_letters():
    assert vigenere_encode("a.a", "ab") == "a.b"
    assert vigenere_encode("a a", "ab") == "a b"
    assert vigenere_encode("a☽a", "ab") == "a☽b"

def test_tier3_vigenere_preserves_case_and_length():
    ct = vigenere_encode("AbCdE", "key")
    assert len(ct) == 5
    assert [c.isupper() for c in ct] == [True, False, True, False, True]

def test_tier3_vigenere_key_a_is_identity():
    assert vigenere_encode(MSG, "aaa") == MSG

def test_tier3_vigenere_effective_key():
    assert VigenereCipher.effective_key("Clé-42 X") == "clx"
    assert VigenereCipher("  Lu-Ne ").key == "lune"

@pytest.mark.parametrize("bad_key", ["", None, "123", "--- !", "éàü"])
def test_tier3_vigenere_rejects_letterless_key(bad_key):
    with pytest.raises(MissingKeyError):
        VigenereCipher(bad_key)
    with pytest.raises(MissingKeyError):
        vigenere_encode("text", bad_key)

def test_tier3_missing_key_is_a_value_error():
    with pytest.raises(ValueError):
        VigenereCipher("")

def test_tier3_effective_key_lowercases_before_filtering():
    assert VigenereCipher.effective_key("\u212a") == "k"
    assert VigenereCipher("\u212aey").key == "key"

# ── Tier 2 — Symbols ─────────────────────────────────────────────────────────
def test_tier2_table_size_and_bijection():
    assert len(GLYPHS) == 46
    assert len(set(GLYPHS.forward.values())) == 46
    for char, glyph in GLYPH_PAIRS:
        assert GLYPHS.encode_char(char) == glyph
        assert GLYPHS.decode_char(glyph) == char

def test_tier2_every_glyph_has_one_source():
    for glyph in GLYPHS.inverse:
        sources = [c for c, g in GLYPHS.forward.items() if g == glyph]
        assert len(sources) == 1

def test_tier2_uppercase_folds():
    assert GLYPHS.encode_char("A") == "☽"
    assert GLYPHS.decode_char(GLYPHS.encode_char("Q")) == "q"

def test_tier2_only_ascii_uppercase_folds():
    assert GLYPHS.encode_char("\u212a") == "\u212a"
    assert GLYPHS.encode("\u0130") == "\u0130"
    assert "\u212a" not in GLYPHS

@pytest.mark.parametrize("ch", ["@", "#", "é", "\n", "😀", "_"])
def test_tier2_passthrough(ch):
    assert GLYPHS.encode_char(ch) == ch
    assert GLYPHS.decode_char(ch) == ch

def test_tier2_le_conseil():
    encoded = GLYPHS.encode("Le Conseil")
    assert encoded == "⌾◊·⬡⍜⌿⌇◊⋄⌾"
    assert GLYPHS.decode(encoded) == "le conseil"

def test_tier2_length_preserved():
    text = "Réunion @ 21h, salle 3 — soyez là!"
    assert len(GLYPHS.encode(text)) == len(text)

def test_tier2_table_is_read_only():
    with pytest.raises(TypeError):
        GLYPHS.forward["a"] = "x"
    with pytest.raises(TypeError):
        GLYPHS.inverse["x"] = "a"

def test_tier2_duplicate_glyph_rejected():
    with pytest.raises(ValueError):
        SymbolTable([("a", "☽"), ("b", "☽")])

def test_tier2_duplicate_char_rejected():
    with pytest.raises(ValueError):
        SymbolTable([("a", "☽"), ("a", "◈")])

def test_tier2_contains_and_glyph_for():
    assert "Z" in GLYPHS
    assert "@" not in GLYPHS
    assert GLYPHS.glyph_for(" ") == "·"
    with pytest.raises(KeyError):
        GLYPHS.glyph_for("@")

# ── Tier 4 — Double ──────────────────────────────────────────────────────────
def test_tier4_double_loses_case():
    ct = double_encode("Hello", KEY)
    assert ct == "◬⌭⌭⌿⍏"
    assert double_decode(ct, KEY) == "hello"

def test_tier4_double_roundtrip_lowercase():
    text = "le conseil se réunit à minuit: 23h59!"
    d = DoubleCipher("Lune")
    assert d.decode(d.encode(text)) == text

def test_tier4_double_output_is_glyphs():
    ct = double_encode("abc xyz 123", KEY)
    assert all(ch in GLYPHS.inverse for ch in ct)

def test_tier4_double_keeps_passthrough():
    ct = double_encode("a@b", KEY)
    assert ct[1] == "@"

@pytest.mark.parametrize("text", ["\u212a abc", "\u0130le", "ÉCOLE du soir"])
def test_tier4_double_non_ascii_passthrough_keeps_key_in_step(text):
    ct = double_encode(text, "key")
    assert len(ct) == len(text)
    assert double_decode(ct, "key") == "".join(
        c.lower() if "A" <= c <= "Z" else c for c in text
    )

def test_tier4_double_kelvin_sign_not_shifted():
    ct = double_encode("\u212a abc", "key")
    assert ct[0] == "\u212a"
    assert double_decode(ct, "key")[1:] == " abc"

def test_tier4_double_rejects_bad_key():
    with pytest.raises(MissingKeyError):
        double_encode("text", "")
    with pytest.raises(MissingKeyError):
        double_decode("☽", "123")

# ── Tier 1 — Caesar ──────────────────────────────────────────────────────────
def test_tier1_caesar_default_shift():
    assert CaesarCipher().encode("Hello") == "Khoor"
    assert CaesarCipher().label == "caesar(3)"

@pytest.mark.parametrize("shift", [-30, -1, 0, 1, 13, 25, 26, 51])
def test_tier1_caesar_roundtrip(shift):
    c = CaesarCipher(shift)
    assert c.decode(c.encode(MSG)) == MSG

def test_tier1_caesar_wraps():
    assert CaesarCipher(1).encode("Zz") == "Aa"
    assert CaesarCipher(-1).encode("Aa") == "Zz"

@pytest.mark.parametrize("bad", ["3", 2.5, True, None])
def test_tier1_caesar_rejects_non_int(bad):
    with pytest.raises(ValueError):
        CaesarCipher(bad)

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import time
    tests = [
        ("Tier 3 — Vigenère roundtrip",         lambda: test_tier3_vigenere_roundtrip(MSG, KEY)),
        ("Tier 3 — Vigenère known vector",      test_tier3_vigenere_known_vector),
        ("Tier 3 — Key cursor skips symbols",   test_tier3_vigenere_cursor_skips_non_letters),
        ("Tier 3 — Letterless key rejected",    lambda: test_tier3_vigenere_rejects_letterless_key("123")),
        ("Tier 2 — Glyph bijection",            test_tier2_table_size_and_bijection),
        ("Tier 2 — Le Conseil",                 test_tier2_le_conseil),
        ("Tier 2 — Read-only table",            test_tier2_table_is_read_only),
        ("Tier 4 — Double loses case",          test_tier4_double_loses_case),
        ("Tier 4 — Double roundtrip",           test_tier4_double_roundtrip_lowercase),
        ("Tier 1 — Caesar default shift",       test_tier1_caesar_default_shift),
        ("Tier 1 — Caesar wraps",               test_tier1_caesar_wraps),
    ]

    print("\n" + "═" * 70)
    print("  ordre_cipher — Cipher Tier Tests")
    print("═" * 70)
    passed = failed = 0
    for name, fn in tests:
        t0 = time.perf_counter()
        try:
            fn()
            elapsed = time.perf_counter() - t0
            print(f"  ✓  {name:<45} {elapsed:.3f}s")
            passed += 1
        except Exception as e:
            print(f"  ✗  {name:<45} FAILED: {e}")
            failed += 1
    print("═" * 70)
    print(f"  {passed} passed  |  {failed} failed")
    print("═" * 70 + "\n")
    sys.exit(0 if failed == 0 else 1)
