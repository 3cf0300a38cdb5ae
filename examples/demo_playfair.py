"""
playfair_engine — Live Demo
===========================
Run:  python examples/demo_playfair.py

Walks through one Playfair encryption step by step: the key square, the
prepared digraphs, the rule applied to each pair, then the timed round trip
and a freshly generated key.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playfair_engine import (
    PlayfairCipher, Direction, build_key_square, prepare_text,
    get_settings, algorithm_info,
)
from playfair_engine.logging_config import setup_logging_from_settings

LINE = "═" * 70
KEY  = "MONARCHY"
MSG  = "Hello, Playfair!"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

settings = get_settings()
setup_logging_from_settings(settings)
cipher = PlayfairCipher(settings)

print(f"\n{LINE}")
print("  playfair_engine — Playfair Cipher Demo")
print(LINE)
print(f"  Key    : {KEY}")
print(f"  Message: {MSG}\n")

# ── KEY SQUARE ───────────────────────────────────────────────────────────────
header("Key square")
for row in build_key_square(KEY).render().splitlines():
    print(f"     {row}")

# ── DIGRAPHS ─────────────────────────────────────────────────────────────────
header("Prepared digraphs (filler I)")
ok("Pairs", " ".join(str(p) for p in prepare_text(MSG)))

# ── TRACE ────────────────────────────────────────────────────────────────────
header("Substitution trace")
for step in cipher.trace(MSG, KEY):
    print(f"     {step.source}  {tuple(step.first_pos)} {tuple(step.second_pos)}"
          f"  {step.rule.value:<9} -> {step.output}")

# ── ROUND TRIP ───────────────────────────────────────────────────────────────
header("Encrypt / decrypt with metadata")
enc = cipher.encrypt_with_metadata(MSG, KEY)
dec = cipher.decrypt_with_metadata(enc.result, KEY)
ok("Encrypted",  enc.result)
ok("Decrypted",  dec.result)
ok("Round-trip", f"{enc.execution_time_ms + dec.execution_time_ms:.3f} ms")
ok("Payload",    enc.to_payload())

back = [str(s.output) for s in cipher.trace(enc.result, KEY, Direction.BACKWARD)]
ok("Backward pairs", " ".join(back))

# ── ERRORS ───────────────────────────────────────────────────────────────────
header("Rejected input")
for label, out in (('encrypt("HELLO", "")', cipher.try_encrypt("HELLO", "")),
                   ('decrypt("ABC", KEY)',  cipher.try_decrypt("ABC", KEY))):
    ok(label, f"{out.error_kind} ({out.message})")

# ── KEYGEN ───────────────────────────────────────────────────────────────────
header("Key generation")
ok("Default length", cipher.generate_key())
ok("20 letters",     cipher.generate_key(20))
ok("Reference example", algorithm_info()["example"])

print(f"\n{LINE}\n")
