from __future__ import annotations

from datetime import datetime, timedelta, timezone

from cosmoport.domain.errors import ValidationError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are treated as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def year_of(value: datetime) -> int:
    """Calendar year of a production date, read in UTC."""
    return _as_utc(value).astimezone(timezone.utc).year


def epoch_millis(value: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return (_as_utc(value) - _EPOCH) // timedelta(milliseconds=1)


def from_epoch_millis(millis: int) -> datetime:
    """Inverse of epoch_millis, always returning an aware UTC datetime.

    Raises:
        ValidationError: the instant falls outside the representable calendar
    """
    try:
        return _EPOCH + timedelta(milliseconds=millis)
    except OverflowError:
        raise ValidationError(
            errors=[{"field": "prod_date", "message": "Not a representable date", "code": "INVALID_DATE"}],
        ) from None
