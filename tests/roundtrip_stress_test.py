#!/usr/bin/env python3
"""
Sekvap Round-Trip Stress Test Suite

Runs edge-case inputs through parse -> serialize -> parse and reports
every case where text or entries come back different.
"""

import os
import sys
import traceback
from typing import List, Optional, Tuple

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'py'))

from sekvap import (
    Anonymous, Keyed, Document,
    InvalidArgument,
    parse, serialize,
    legacy_serialize_opts,
)


def check_text_roundtrip(text: str, expected: Optional[str]) -> Tuple[bool, str]:
    """Text -> Document -> text -> Document."""
    try:
        doc = parse(text)
        emitted = serialize(doc)
        again = parse(emitted)

        if again != doc:
            return False, f"MISMATCH\n  Input: {text!r}\n  Parsed: {doc}\n  Reparsed: {again}"
        want = text if expected is None else expected
        if emitted != want:
            return False, f"TEXT CHANGED\n  Input: {text!r}\n  Emitted: {emitted!r}\n  Expected: {want!r}"
        return True, f"OK | {emitted[:60]!r}"
    except Exception as e:
        return False, f"ERROR: {e}\n{traceback.format_exc()}"


def check_document_roundtrip(doc: Document) -> Tuple[bool, str]:
    """Document -> text -> Document."""
    try:
        text = serialize(doc)
        back = parse(text)
        if back == doc:
            return True, f"OK | {text!r}"
        return False, f"MISMATCH\n  Original: {doc}\n  Text: {text!r}\n  Restored: {back}"
    except Exception as e:
        return False, f"ERROR: {e}"


# =============================================================================
# Test Cases
# =============================================================================

# (name, input, expected re-serialization or None for identical)
TEXT_TESTS: List[Tuple[str, str, Optional[str]]] = [
    # =========================================================================
    # BASIC
    # =========================================================================
    ("empty", "", None),
    ("value only", "hello", None),
    ("value with spaces", "hello world", None),
    ("single pair", "v;k=1", None),
    ("several pairs", "abc;k1=v1;k2=v2;k3=v3", None),
    ("empty leading value", ";k=1", None),

    # =========================================================================
    # ABSENT AND EMPTY VALUES
    # =========================================================================
    ("bare key", "x;flag", None),
    ("empty value", "x;k=", None),
    ("bare keys only", "x;a;b;c", None),
    ("mixed bare and valued", "x;a;b=1;c", None),

    # =========================================================================
    # ESCAPING
    # =========================================================================
    ("escaped leading value", "a;;b", None),
    ("leading value ends with delimiter", "a;;", None),
    ("leading value is delimiter", ";;", None),
    ("escaped key equals", "v;a==b=1", None),
    ("escaped key delimiter", "v;a;;b=1", None),
    ("key ends with equals", "v;a===1", None),
    ("key starts with equals", "v;==a=1", None),
    ("escaped value delimiter", "v;k=a;;b", None),
    ("value ends with delimiter", "v;k=a;;;n=1", None),
    ("equals in value", "v;k=a=b", None),
    ("doubled equals in value", "v;k=a==b", None),
    ("equals in leading value", "a=b;k=1", None),
    ("odd delimiter run", "a;;;b", None),
    ("long delimiter run", "a;;;;;;b", None),

    # =========================================================================
    # NORMALIZATION
    # =========================================================================
    ("value key is just a key", "v;Value=x", None),
    ("duplicate keys", "v;a=1;a=2", None),

    # =========================================================================
    # UNICODE
    # =========================================================================
    ("unicode", "你好;ключ=значение", None),
    ("emoji", "🚀;🔥=💻", None),
    ("control chars", "a\tb;k=\x00", None),
]

DOCUMENT_TESTS: List[Tuple[str, Document]] = [
    ("only anonymous", Document(Anonymous("x"))),
    ("reserved everywhere", Document(Anonymous(";"), Keyed("=;", ";="), Keyed("k"))),
    ("reserved key only", Document(Anonymous(""), Keyed("=="), Keyed("a;", "b"))),
    ("value literal as key", Document(Anonymous("v"), Keyed("Value", "w"))),
    ("empty values", Document(Anonymous(""), Keyed("a", ""), Keyed("b", ""))),
]


def run_text_tests():
    """Run all text round-trip tests and report results."""
    print("=" * 70)
    print("SEKVAP TEXT ROUND-TRIP STRESS TEST")
    print("=" * 70)

    passed = 0
    failed = 0
    errors = []

    for name, text, expected in TEXT_TESTS:
        success, msg = check_text_roundtrip(text, expected)

        if success:
            print(f"✅ {name}")
            passed += 1
        else:
            print(f"❌ {name}")
            print(f"   {msg}")
            failed += 1
            errors.append((name, text, msg))

    print()
    print("=" * 70)
    print(f"RESULTS: {passed} passed, {failed} failed")
    print("=" * 70)

    if errors:
        print("\n❌ FAILED TESTS:")
        for name, text, msg in errors:
            print(f"\n  {name}:")
            print(f"    Input: {text!r}")
            print(f"    Issue: {msg[:200]}")

    return failed == 0


def run_document_tests():
    """Test that hand-built documents survive serialize -> parse."""
    print("\n" + "=" * 70)
    print("DOCUMENT ROUND-TRIP TESTS")
    print("=" * 70)

    passed = 0
    failed = 0

    for name, doc in DOCUMENT_TESTS:
        success, msg = check_document_roundtrip(doc)
        if success:
            print(f"✅ {name}: {msg}")
            passed += 1
        else:
            print(f"❌ {name}: {msg}")
            failed += 1

    print(f"\nDocument tests: {passed} passed, {failed} failed")
    return failed == 0


def run_absent_style_tests():
    """Test both ways of writing a key without a value."""
    print("\n" + "=" * 70)
    print("ABSENT VALUE STYLE TESTS")
    print("=" * 70)

    doc = parse("x;flag;k=")
    bare = serialize(doc)
    legacy = serialize(doc, legacy_serialize_opts())

    passed = 0
    failed = 0
    checks = [
        ("bare key keeps absent", bare == "x;flag;k=" and parse(bare) == doc),
        ("legacy writes '='", legacy == "x;flag=;k="),
        ("legacy turns absent into empty", parse(legacy).get("flag") == ""),
    ]
    for name, ok in checks:
        if ok:
            print(f"✅ {name}")
            passed += 1
        else:
            print(f"❌ {name}: bare={bare!r} legacy={legacy!r}")
            failed += 1

    print(f"\nAbsent style tests: {passed} passed, {failed} failed")
    return failed == 0


def run_rejection_tests():
    """Test that invalid arguments are rejected before any output."""
    print("\n" + "=" * 70)
    print("INVALID ARGUMENT TESTS")
    print("=" * 70)

    cases = [
        ("parse None", lambda: parse(None)),
        ("serialize None", lambda: serialize(None)),
        ("empty key", lambda: serialize([("Value", "v"), ("", "x")])),
        ("trailing delimiter reparsed", lambda: serialize(parse("x;"))),
    ]

    passed = 0
    failed = 0
    for name, call in cases:
        try:
            call()
        except InvalidArgument:
            print(f"✅ {name}")
            passed += 1
        else:
            print(f"❌ {name}: no InvalidArgument raised")
            failed += 1

    print(f"\nRejection tests: {passed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    all_passed = True

    all_passed &= run_text_tests()
    all_passed &= run_document_tests()
    all_passed &= run_absent_style_tests()
    all_passed &= run_rejection_tests()

    print("\n" + "=" * 70)
    if all_passed:
        print("✅ ALL TESTS PASSED")
    else:
        print("❌ SOME TESTS FAILED - INVESTIGATE ABOVE")
    print("=" * 70)

    sys.exit(0 if all_passed else 1)
