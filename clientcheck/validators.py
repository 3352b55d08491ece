from collections.abc import Callable, Mapping
from datetime import date
from functools import partial
import re

from clientcheck.schemas import FieldError


FieldValidator = Callable[[object], bool]

NAME_MIN_LENGTH = 5
NAME_MAX_LENGTH = 60
ADULT_AGE = 18
MARITAL_STATUS_CODES = frozenset({"C", "S", "V", "D"})

FIELD_ORDER = ("nome", "cpf", "dt_nascimento", "renda_mensal", "estado_civil")

_NON_DIGITS = re.compile(r"[^0-9]")
_BIRTH_DATE = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{4})")


def validate_name(value: object) -> bool:
    return isinstance(value, str) and NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH


def normalize_cpf(value: str) -> str:
    return _NON_DIGITS.sub("", value)


def _cpf_check_digit(digits: list[int], first_weight: int) -> int:
    total = sum(digit * (first_weight - position) for position, digit in enumerate(digits))
    remainder = (total * 10) % 11
    # 10 and 11 both collapse to zero.
    if remainder >= 10:
        return 0
    return remainder


def validate_cpf(value: object) -> bool:
    """Check a CPF number, with or without punctuation.

    Sequences of one repeated digit satisfy the checksum but are never issued,
    so they are rejected before the check digits are computed.
    """
    if not isinstance(value, str):
        return False

    cpf = normalize_cpf(value)
    if len(cpf) != 11:
        return False
    if len(set(cpf)) == 1:
        return False

    digits = [int(char) for char in cpf]
    if _cpf_check_digit(digits[:9], 10) != digits[9]:
        return False
    return _cpf_check_digit(digits[:10], 11) == digits[10]


def parse_birth_date(value: object) -> date | None:
    if not isinstance(value, str):
        return None

    match = _BIRTH_DATE.fullmatch(value)
    if match is None:
        return None

    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def age_on(born: date, reference_date: date) -> int:
    before_birthday = (reference_date.month, reference_date.day) < (born.month, born.day)
    return reference_date.year - born.year - int(before_birthday)


def validate_birth_date(value: object, reference_date: date) -> bool:
    born = parse_birth_date(value)
    if born is None:
        return False
    return age_on(born, reference_date) >= ADULT_AGE


def validate_monthly_income(value: object) -> bool:
    # bool is an int subclass but never an amount.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value >= 0


def validate_marital_status(value: object) -> bool:
    return isinstance(value, str) and value.upper() in MARITAL_STATUS_CODES


def build_field_validators(reference_date: date) -> tuple[tuple[str, FieldValidator], ...]:
    return (
        ("nome", validate_name),
        ("cpf", validate_cpf),
        ("dt_nascimento", partial(validate_birth_date, reference_date=reference_date)),
        ("renda_mensal", validate_monthly_income),
        ("estado_civil", validate_marital_status),
    )


def invalid_field_message(field: str) -> str:
    return f"{field} inválido"


class RecordValidator:
    def __init__(self, reference_date: date) -> None:
        self.reference_date = reference_date
        self.validators = build_field_validators(reference_date)

    def validate(self, record: Mapping[str, object]) -> tuple[FieldError, ...]:
        """Return one FieldError per failing field, in field order; empty when valid."""
        return tuple(
            FieldError(field=field, message=invalid_field_message(field))
            for field, validator in self.validators
            if not validator(record.get(field))
        )
