"""
Record validation - ordered, pure checks for one UserRecord.
Challenge: First failing check wins; each check testable on its own.
Design: validate_record runs the checks in a fixed order and returns the
parsed values the enrichment step needs.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone

from transform_api.core.errors import InvalidField
from transform_api.schemas.user import UserRecord

USER_ID_MESSAGE = (
    "Expected JSON key user_id not set or set to invalid value; "
    "user_id must be set to a value greater than 0"
)
NAME_MESSAGE = (
    "Expected JSON key name not set or set to invalid value; "
    "name must be set to a valid string"
)
CREATED_ON_MESSAGE = (
    "Expected JSON key created_on not set or set to invalid value; "
    "created_on must be set to a valid greater than 0"
)

DATE_LAYOUT = "YYYY-MM-DD"
_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


@dataclass(frozen=True)
class ValidatedRecord:
    record: UserRecord
    date_of_birth: date
    created_on: datetime  # UTC


def check_user_id(record: UserRecord) -> None:
    if record.user_id <= 0:
        raise InvalidField("userId", USER_ID_MESSAGE)


def check_name(record: UserRecord) -> None:
    if record.name == "":
        raise InvalidField("name", NAME_MESSAGE)


def parse_date_of_birth(value: str) -> date:
    """Strict YYYY-MM-DD: zero-padded, no time component, real calendar date."""
    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        reason = f"expected {DATE_LAYOUT} with a four-digit year and two-digit month and day"
    else:
        try:
            return date(*(int(part) for part in match.groups()))
        except ValueError as exc:
            reason = str(exc)
    raise InvalidField("dateOfBirth", f'parsing date "{value}" as "{DATE_LAYOUT}": {reason}')


def parse_created_on(seconds: int) -> datetime:
    """Seconds since the epoch as an aware UTC datetime; the epoch itself is rejected."""
    if seconds <= 0:
        raise InvalidField("createdOn", CREATED_ON_MESSAGE)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidField(
            "createdOn",
            f"created_on value {seconds} is outside the supported range",
            detail=f"created_on value {seconds} could not be converted: {exc}",
        ) from exc


def validate_record(record: UserRecord) -> ValidatedRecord:
    """Run every check in order; raises InvalidField on the first failure."""
    check_user_id(record)
    check_name(record)
    date_of_birth = parse_date_of_birth(record.date_of_birth)
    created_on = parse_created_on(record.created_on)
    return ValidatedRecord(record, date_of_birth, created_on)
