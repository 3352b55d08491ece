from datetime import UTC, date, datetime
import logging
from pathlib import Path

from clientcheck.batch import process_records, serialize_report
from clientcheck.config import Settings
from clientcheck.errors import ClientCheckError
from clientcheck.schemas import BatchResult, RunResult
from clientcheck.step_logic import load_records, write_report


logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class ValidationRunner:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def run(
        self,
        input_path: Path,
        *,
        reference_date: date | None = None,
        created_at: datetime | None = None,
    ) -> RunResult:
        """Validate one input file and write its error report.

        Structural failures are logged and returned as a failed result; no
        report is written unless every record was evaluated.
        """
        created_at = created_at or utc_now()
        reference_date = reference_date or created_at.date()
        logger.info(
            "validation run started",
            extra={
                "app_name": self.settings.app_name,
                "input_path": str(input_path),
                "reference_date": reference_date.isoformat(),
            },
        )

        total_records = 0
        try:
            records = load_records(input_path)
            batch = process_records(records, reference_date=reference_date)
            total_records = batch.total_records
            report_path = write_report(
                Path(self.settings.output_dir),
                serialize_report(batch.entries),
                prefix=self.settings.report_prefix,
                created_at=created_at,
            )
        except ClientCheckError as exc:
            logger.exception("validation run failed", extra={"input_path": str(input_path)})
            return RunResult(
                input_path=str(input_path),
                status="failed",
                total_records=total_records,
                valid_records=0,
                invalid_records=0,
                report_path=None,
                error=str(exc),
            )

        logger.info(
            "validation run completed",
            extra={
                "input_path": str(input_path),
                "total_records": batch.total_records,
                "invalid_records": batch.invalid_records,
                "report_path": str(report_path),
            },
        )
        return self._result_from_batch(input_path, batch, report_path)

    def _result_from_batch(self, input_path: Path, batch: BatchResult, report_path: Path) -> RunResult:
        return RunResult(
            input_path=str(input_path),
            status="succeeded",
            total_records=batch.total_records,
            valid_records=batch.valid_records,
            invalid_records=batch.invalid_records,
            report_path=str(report_path),
        )
