from datetime import datetime
from itertools import count
import json
from pathlib import Path

from clientcheck.errors import InputFileError, ReportWriteError


def _reject_constant(token: str) -> float:
    raise ValueError(f"non-standard JSON token {token}")


def load_records(input_path: Path) -> object:
    if not input_path.exists():
        raise InputFileError(f"input file not found: {input_path}")

    try:
        with input_path.open("r", encoding="utf-8") as infile:
            return json.load(infile, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise InputFileError(f"input file is not valid JSON: {input_path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"could not read input file {input_path}: {exc}") from exc
    except ValueError as exc:
        raise InputFileError(f"input file is not valid JSON: {input_path}: {exc}") from exc


def report_file_name(prefix: str, created_at: datetime, sequence: int = 0) -> str:
    stem = f"{prefix}-{created_at.strftime('%d%m%Y-%H%M%S')}"
    if sequence:
        stem = f"{stem}-{sequence}"
    return f"{stem}.json"


def write_report(
    output_dir: Path,
    rows: list[dict[str, object]],
    *,
    prefix: str,
    created_at: datetime,
) -> Path:
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for sequence in count():
            path = output_dir / report_file_name(prefix, created_at, sequence)
            try:
                # Exclusive create never overwrites an earlier report.
                outfile = path.open("x", encoding="utf-8")
            except FileExistsError:
                continue

            try:
                with outfile:
                    json.dump(rows, outfile, indent=2, ensure_ascii=False, allow_nan=False)
                    outfile.write("\n")
            except (OSError, TypeError, ValueError):
                path.unlink(missing_ok=True)
                raise
            return path
    except (OSError, TypeError, ValueError) as exc:
        raise ReportWriteError(f"could not write report to {output_dir}: {exc}") from exc
