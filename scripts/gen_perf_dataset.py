#!/usr/bin/env python3
"""Synthetic compliance export generator for performance checks.

Writes a single-sheet workbook laid out like the compliance export consumed by
compliance_report: 27 columns (A..AA), the fixed columns C, D, I, L, O filled
with file name / ref no / customer name / city / CTR, and the free-text columns
W and AA carrying ``MatchName=..|DenialType=..|Splid=..|`` data plus the
occasional ZKWD / ZEMB marker.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

WIDTH = 27  # A..AA

CUSTOMERS = ["Acme Corp", "Globex Ltd", "Initech", "Umbrella Sanction Partners", "Stark Trading", "Embargo Freight"]
CITIES = ["Berlin", "Moscow", "Caracas", "Kyiv", "Osaka", ""]
CODES = ["DE", "RU", "VE", "UA", "JP", ""]
DENIALS = ["Fraud", "Export", "Sanctions", "Dual Use"]


def _free_text(rng: np.random.Generator, row: int) -> tuple[str, str]:
    parts_a: list[str] = []
    for k in range(int(rng.integers(0, 4))):
        parts_a.append(f"MatchName=Person {row}-{k}|DenialType={rng.choice(DENIALS)}|")
    parts_b: list[str] = []
    if rng.random() < 0.3:
        parts_b.append(f"Splid=S{row:06d}|")
    marker = rng.random()
    if marker < 0.1:
        parts_b.append("ZKWD")
    elif marker < 0.2:
        parts_b.append("ZEMB")
    elif marker < 0.25:
        parts_b.append("ZKWD ZEMB")
    return "".join(parts_a), " ".join(parts_b)


def generate_rows(rows: int, seed: int = 42) -> list[list[object]]:
    """Generate ``rows`` raw rows (no header row, like the real export)."""
    rng = np.random.default_rng(seed)
    data: list[list[object]] = []
    for i in range(rows):
        row: list[object] = [None] * WIDTH
        row[2] = f"export_{i // 1000:03d}.txt"
        row[3] = 100000 + i
        row[8] = str(rng.choice(CUSTOMERS))
        row[11] = str(rng.choice(CITIES))
        row[14] = str(rng.choice(CODES))
        row[22], row[26] = _free_text(rng, i)
        data.append(row)
    return data


def create_excel_file(output_path: Path, rows: int, seed: int = 42) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(generate_rows(rows, seed))
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Sheet1", header=False, index=False)
    print(f"Created Excel file: {output_path}")
    print(f"  Rows: {rows:,}")
    print(f"  Columns: {WIDTH}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic compliance export for performance testing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s export.xlsx
  %(prog)s large_export.xlsx --rows 100000 --seed 123
        """,
    )
    parser.add_argument("output", type=Path, help="Output Excel file path")
    parser.add_argument("--rows", type=int, default=20_000, help="Number of rows (default: 20,000)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be generated without creating files")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1

    print("Dataset generation plan:")
    print(f"  Output file: {args.output}")
    print(f"  Rows: {args.rows:,}")
    print(f"  Random seed: {args.seed}")
    if args.dry_run:
        print("\n[DRY RUN] Would generate files but not creating them.")
        return 0

    try:
        create_excel_file(args.output, args.rows, args.seed)
    except OSError as e:
        print(f"\nError generating dataset: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
