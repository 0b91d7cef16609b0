#!/usr/bin/env python3
"""Validate health_data.json structure.
Exit non-zero if invalid."""
import sys, pathlib

sys.path.insert(0, str(pathlib.Path(__file__).parent.parent / "src"))

from healthdata import DocumentValidationError, LoadError, load_document  # noqa: E402

path = pathlib.Path(sys.argv[1] if len(sys.argv) > 1 else "health_data.json")
if not path.exists():
    print(f"{path} missing", file=sys.stderr)
    sys.exit(1)
try:
    doc = load_document(path)
except DocumentValidationError as e:
    print("Invalid structure:", e, file=sys.stderr)
    sys.exit(3)
except LoadError as e:
    print("Load error:", e, file=sys.stderr)
    sys.exit(2)
counts = doc.counts()
print(
    f"{path.name} valid: {counts['dailyCheckins']} check-ins, "
    f"{counts['workouts']} workouts, {counts['bloodTests']} blood tests"
)
