from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"campo": self.field, "mensagem": self.message}


@dataclass(frozen=True)
class ErrorReportEntry:
    record: Mapping[str, object]
    errors: tuple[FieldError, ...]

    def to_dict(self) -> dict[str, object]:
        return {"dados": self.record, "erros": [error.to_dict() for error in self.errors]}


@dataclass(frozen=True)
class BatchResult:
    total_records: int
    entries: list[ErrorReportEntry]

    @property
    def invalid_records(self) -> int:
        return len(self.entries)

    @property
    def valid_records(self) -> int:
        return self.total_records - len(self.entries)


@dataclass(frozen=True)
class RunResult:
    input_path: str
    status: str
    total_records: int
    valid_records: int
    invalid_records: int
    report_path: str | None
    error: str | None = None
