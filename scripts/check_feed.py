#!/usr/bin/env python3
"""Check a local export of the catalog CSV feed.
Prints product counts per category key; exit non-zero if invalid."""
import os, sys, pathlib
from collections import Counter

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from catalog.models import KNOWN_COLUMNS  # noqa: E402
from catalog.parser import parse_csv, split_rows  # noqa: E402
from htmlgen.normalize import normalize_category  # noqa: E402

path = pathlib.Path(sys.argv[1] if len(sys.argv) > 1 else "inventory.csv")
if not path.exists():
    print(f"{path} missing", file=sys.stderr)
    sys.exit(1)
try:
    text = path.read_text(encoding="utf-8-sig")
except (OSError, UnicodeDecodeError) as e:
    print("Read error:", e, file=sys.stderr)
    sys.exit(2)
rows = split_rows(text)
if not rows:
    print("Feed is empty", file=sys.stderr)
    sys.exit(3)
missing = [col for col in KNOWN_COLUMNS if col not in rows[0]]
if missing:
    print(f"Missing header(s): {', '.join(missing)}", file=sys.stderr)
    sys.exit(4)
products = parse_csv(text)
if not products:
    print("No rows with a Category value", file=sys.stderr)
    sys.exit(5)
skipped = len(rows) - 1 - len(products)
counts = Counter(normalize_category(p.category) for p in products)
for key, count in sorted(counts.items()):
    print(f"{key}: {count}")
if skipped:
    print(f"{skipped} row(s) without Category skipped", file=sys.stderr)
print(f"{path} valid: {len(products)} products")
