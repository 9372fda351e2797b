import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

sys.path.append(str(Path(__file__).resolve().parents[1]))

from roster_merge.pipeline import detect_tables
from roster_merge.tables.config import FIELD_ORDER
from roster_merge.tables.merger import TableMerger
from roster_merge.tables.models import TableExtraction


def _tables_by_sheet(extractions: List[TableExtraction]) -> Dict[str, List[TableExtraction]]:
    grouped: Dict[str, List[TableExtraction]] = {}
    for t in extractions:
        grouped.setdefault(t.sheet_name, []).append(t)
    return grouped


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="List the roster tables detected in a workbook.")
    parser.add_argument("workbook_path")
    parser.add_argument("--samples", type=int, default=2, help="Data rows to print per table.")
    args = parser.parse_args(argv)
    workbook_path = Path(args.workbook_path).expanduser()
    if not workbook_path.exists():
        raise FileNotFoundError(str(workbook_path))

    extractions = detect_tables(workbook_path)

    print(f"Total tables: {len(extractions)}")
    print(f"Total data rows: {sum(len(t.rows) for t in extractions)}")
    for sheet_name, tables in _tables_by_sheet(extractions).items():
        print(f"{sheet_name}:")
        for t in tables:
            counts = ", ".join(f"{g.value}={t.counts[g]}" for g in FIELD_ORDER)
            print(f"  header row {t.header_row}: {len(t.rows)} row(s) [{counts}]")
            for row in t.rows[: max(0, args.samples)]:
                print(f"    {row!r}")

    if extractions:
        header = TableMerger.build_header(TableMerger.max_counts(extractions))
        print("Combined header: " + ", ".join(header))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
