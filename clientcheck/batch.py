from collections.abc import Mapping
from datetime import date
import logging

from clientcheck.errors import InvalidRecordSequenceError
from clientcheck.schemas import BatchResult, ErrorReportEntry
from clientcheck.validators import RecordValidator


logger = logging.getLogger(__name__)


def ensure_record_sequence(records: object) -> list[Mapping[str, object]]:
    if not isinstance(records, (list, tuple)):
        raise InvalidRecordSequenceError(
            f"input must be a JSON array of records, got {type(records).__name__}"
        )

    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise InvalidRecordSequenceError(
                f"record {index} must be a JSON object, got {type(record).__name__}"
            )
    return list(records)


def process_records(records: object, *, reference_date: date) -> BatchResult:
    checked = ensure_record_sequence(records)
    validator = RecordValidator(reference_date)

    entries: list[ErrorReportEntry] = []
    for record in checked:
        errors = validator.validate(record)
        if errors:
            entries.append(ErrorReportEntry(record=record, errors=errors))

    logger.debug(
        "batch validated",
        extra={"total_records": len(checked), "invalid_records": len(entries)},
    )
    return BatchResult(total_records=len(checked), entries=entries)


def serialize_report(entries: list[ErrorReportEntry]) -> list[dict[str, object]]:
    return [entry.to_dict() for entry in entries]
