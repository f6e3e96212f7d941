import abc
from datetime import datetime
from typing import Union


class MetadataDecodeError(Exception, abc.ABC):
    def __init__(
        self,
        *,
        error_description: str,
        log_message: Union[str, None] = None,
    ):
        super().__init__(error_description if log_message is None else log_message)
        self.error_description = error_description
        self.log_message = log_message


class ExpiredMetadataError(MetadataDecodeError):
    def __init__(self, *, evaluated_at: datetime, valid_until: datetime):
        seconds_expired = (evaluated_at - valid_until).total_seconds()
        super().__init__(
            error_description=f"metadata was {seconds_expired:.2f} seconds expired;"
            f" was valid until {valid_until.isoformat()}",
        )
        self.evaluated_at = evaluated_at
        self.valid_until = valid_until


class MalformedTimestampError(MetadataDecodeError):
    def __init__(self, *, value: str, log_message: Union[str, None] = None):
        super().__init__(
            error_description=f"error parsing metadata expiration: {value!r}",
            log_message=log_message,
        )
        self.value = value


class MalformedXMLError(MetadataDecodeError):
    """
    The token stream could not be read, the message surfaces the parser error.
    """

    def __init__(self, *, error_description: str):
        super().__init__(
            error_description=f"error reading xml token: {error_description}"
        )


class MalformedKeyError(MetadataDecodeError):
    def __init__(self, *, error_description: str, log_message: Union[str, None] = None):
        super().__init__(
            error_description=error_description,
            log_message=log_message,
        )
