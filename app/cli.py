import argparse
import sys
from pathlib import Path
from typing import List, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from roster_merge.config import get_settings
from roster_merge.errors import InputMissingError, RosterMergeError
from roster_merge.logger import PROJECT_LOGGER, get_logger, set_level
from roster_merge.pipeline import consolidate_file
from roster_merge.tables.config import load_header_phrases

logger = get_logger(f"{PROJECT_LOGGER}.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="roster-merge",
        description="Combine every roster table found in a workbook into one sheet.",
    )
    parser.add_argument("input", help="Input workbook (.xlsx, .xlsm or .xls).")
    parser.add_argument("output", help="Path of the combined .xlsx to write.")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: LOG_LEVEL setting, INFO).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    set_level(args.log_level or settings.LOG_LEVEL)

    input_path = Path(args.input).expanduser()
    if not input_path.is_file():
        print(f"Input file not found: {args.input}", file=sys.stderr)
        return 2

    try:
        phrases = load_header_phrases(settings.HEADER_PHRASES_PATH)
        result = consolidate_file(
            input_path,
            args.output,
            phrases=phrases,
            sheet_name=settings.OUTPUT_SHEET_NAME,
        )
    except InputMissingError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except (RosterMergeError, OSError, ValueError) as exc:
        logger.debug("Consolidation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {result.row_count} data rows to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
