import logging
import re
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional

import dateutil.parser

from saml_metadata.exceptions.metadata_exceptions import (
    ExpiredMetadataError,
    MalformedTimestampError,
)
from saml_metadata.misc.utils import get_attribute
from saml_metadata.models.constants import VALID_UNTIL

log = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# RFC 3339 section 5.6 date-time
RFC3339_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}[Tt][0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]+)?"
    r"([Zz]|[+-][0-9]{2}:[0-9]{2})"
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_rfc3339(value: str) -> datetime:
    if not RFC3339_PATTERN.fullmatch(value):
        raise MalformedTimestampError(
            value=value,
            log_message=f"timestamp {value!r} is not an RFC 3339 date-time",
        )
    try:
        return dateutil.parser.isoparse(value.upper())
    except (ValueError, OverflowError) as parse_error:
        raise MalformedTimestampError(value=value) from parse_error


class ExpirationGuard:
    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def now(self) -> datetime:
        evaluated_at = self._clock()
        if evaluated_at.tzinfo is None:
            return evaluated_at.replace(tzinfo=timezone.utc)
        return evaluated_at

    def check(self, attributes: Mapping[str, str]) -> Optional[datetime]:
        """
        Raise ExpiredMetadataError when the validUntil attribute lies before the
        current time. Returns the parsed validUntil, or None when there is none.
        """
        value = get_attribute(attributes, VALID_UNTIL)
        if value is None:
            return None

        valid_until = parse_rfc3339(value)
        evaluated_at = self.now()
        if evaluated_at > valid_until:
            raise ExpiredMetadataError(
                evaluated_at=evaluated_at, valid_until=valid_until
            )
        log.debug("metadata valid until %s", valid_until.isoformat())
        return valid_until
