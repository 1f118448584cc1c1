#!/usr/bin/env python3

# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

"""
Generate bls-vectors.json for cross-platform BLS mirror tests.

Run from the repository root:
    PYTHONPATH=. python test-vectors/generate_vectors.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "tests"))
from bls_vectors import build_vectors, run_vector, save_json

vectors = build_vectors()

for vector in vectors:
    result = run_vector(vector)
    if result != vector["expected"]:
        raise SystemExit(f"vector {vector['name']} disagrees with the API: {result!r}")

out_path = Path(__file__).resolve().parent / "bls-vectors.json"
save_json(out_path, vectors)
print(f"Wrote {len(vectors)} vectors to {out_path}")
