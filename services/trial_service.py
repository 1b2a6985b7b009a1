"""
Trial mapping between the stored TrialData shape and the runtime TrialState shape
"""
from datetime import datetime, timezone

from pydantic import TypeAdapter, ValidationError

from database_models import TrialRecord
from models.trial import TrialData, TrialState


class InvalidTrialDataError(ValueError):
    """Raised when a trial record breaks the usage or date contract."""


_DATETIME = TypeAdapter(datetime)


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Any ISO-8601 form pydantic accepts (trailing "Z", offsets, 1-6 digit fractions).
    Naive timestamps are taken as UTC.

    Args:
        value: ISO-8601 text, e.g. "2025-01-01T00:00:00Z"

    Returns:
        datetime in UTC

    Raises:
        ValueError: if the text is not a valid ISO-8601 timestamp
    """
    parsed = _DATETIME.validate_python(value.strip())
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_field(data: TrialData, field: str) -> datetime:
    value = getattr(data, field)
    try:
        return parse_timestamp(value)
    except ValidationError as e:
        raise InvalidTrialDataError(f"Trial for {data.user_id} has an invalid {field}: {value!r}") from e


def to_trial_state(data: TrialData) -> TrialState:
    """
    Map a stored trial onto its runtime view.

    is_active is copied as-is; expiry is never recomputed from the clock here.

    Args:
        data: TrialData as read from storage or the wire

    Returns:
        TrialState with messagesRemaining = messages_limit - messages_used

    Raises:
        InvalidTrialDataError: on negative counts, usage above the limit,
            unparseable timestamps, a trial window that does not end after it starts,
            or updated_at earlier than created_at
    """
    if data.messages_used < 0 or data.messages_limit < 0:
        raise InvalidTrialDataError(
            f"Trial for {data.user_id} has negative message counts "
            f"(used={data.messages_used}, limit={data.messages_limit})"
        )
    if data.messages_used > data.messages_limit:
        raise InvalidTrialDataError(
            f"Trial for {data.user_id} used {data.messages_used} of {data.messages_limit} messages"
        )

    trial_start = _parse_field(data, "trial_start")
    trial_end = _parse_field(data, "trial_end")
    if trial_start >= trial_end:
        raise InvalidTrialDataError(
            f"Trial for {data.user_id} ends at {data.trial_end}, not after its start {data.trial_start}"
        )

    created_at = _parse_field(data, "created_at")
    updated_at = _parse_field(data, "updated_at")
    if updated_at < created_at:
        raise InvalidTrialDataError(
            f"Trial for {data.user_id} was updated at {data.updated_at}, before its creation {data.created_at}"
        )

    return TrialState(
        messagesRemaining=data.messages_limit - data.messages_used,
        totalMessages=data.messages_limit,
        trialEndDate=trial_end,
        isTrialActive=data.is_active,
    )


def to_trial_data(record: TrialRecord) -> TrialData:
    return TrialData.model_validate(record)
