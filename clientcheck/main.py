import argparse
from dataclasses import replace
from datetime import date
import logging
from pathlib import Path

from clientcheck.config import get_settings
from clientcheck.pipeline import ValidationRunner


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate customer records and write an error report")
    parser.add_argument("input_path", type=Path, help="JSON file holding an array of customer records")
    parser.add_argument("--output-dir", required=False, help="Directory for the report (overrides OUTPUT_DIR)")
    parser.add_argument(
        "--reference-date",
        type=date.fromisoformat,
        required=False,
        help="Date in YYYY-MM-DD format used for age checks (defaults to today in UTC)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    if args.output_dir:
        settings = replace(settings, output_dir=args.output_dir)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    runner = ValidationRunner(settings)
    result = runner.run(args.input_path, reference_date=args.reference_date)

    print(
        "status={status} input={input} total={total} valid={valid} invalid={invalid} report={report}".format(
            status=result.status,
            input=result.input_path,
            total=result.total_records,
            valid=result.valid_records,
            invalid=result.invalid_records,
            report=result.report_path,
        )
    )
    if result.status == "failed":
        print(f"error={result.error}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
