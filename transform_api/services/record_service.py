"""
Record enrichment service - business logic for POST /json.
Challenge: Parse, validate and enrich a batch; one bad record fails the whole batch.
Design: Pure transformation from request bytes to response bytes; the caller
renders the result and any ClassifiedError raised along the way.
"""

import logging
from datetime import datetime, tzinfo

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from transform_api.core.deadline import Deadline, check_deadline
from transform_api.core.errors import EnvironmentFailure, MalformedInput
from transform_api.core.timezones import load_location
from transform_api.schemas.user import UserInfo, UserRecord
from transform_api.services.record_validation import ValidatedRecord, validate_record

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[UserRecord])
_infos_adapter = TypeAdapter(list[UserInfo])


def describe_validation_error(exc: ValidationError) -> str:
    """First pydantic error as 'loc: msg' (just 'msg' when it has no location)."""
    first = exc.errors(include_url=False)[0]
    loc = ".".join(str(part) for part in first["loc"])
    return f"{loc}: {first['msg']}" if loc else first["msg"]


def parse_records(raw_body: bytes) -> list[UserRecord]:
    """Decode the JSON array; a top-level null is an empty batch."""
    if raw_body.strip() == b"null":
        return []
    try:
        return _records_adapter.validate_json(raw_body)
    except ValidationError as exc:
        raise MalformedInput(describe_validation_error(exc), detail=str(exc)) from exc


def format_rfc3339(moment: datetime) -> str:
    """Second precision with explicit offset, 'Z' for UTC."""
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def enrich(validated: ValidatedRecord, location: tzinfo) -> UserInfo:
    record = validated.record
    return UserInfo(
        user_id=record.user_id,
        name=record.name,
        birth_day_of_week=validated.date_of_birth.day,
        rfc_created_on=format_rfc3339(validated.created_on.astimezone(location)),
    )


class RecordEnrichmentService:
    """Handles the /json use case: parse, validate, enrich, serialize."""

    def __init__(self, timezone_name: str):
        self.timezone_name = timezone_name

    def process(self, raw_body: bytes, deadline: Deadline | None = None) -> bytes:
        """Return the serialized UserInfo array for a raw request body."""
        check_deadline(deadline, "record parsing")
        records = parse_records(raw_body)
        infos = []
        for record in records:
            check_deadline(deadline, "record validation")
            validated = validate_record(record)
            location = load_location(self.timezone_name)
            infos.append(enrich(validated, location))
        logger.debug("Enriched %d records", len(infos), extra={"record_count": len(infos)})
        return self.serialize(infos)

    @staticmethod
    def serialize(infos: list[UserInfo]) -> bytes:
        try:
            return _infos_adapter.dump_json(infos, by_alias=True)
        except PydanticSerializationError as exc:
            raise EnvironmentFailure(f"Error marshalling JSON response: {exc}") from exc
