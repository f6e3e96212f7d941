from typing import Optional

from pydantic import BaseModel, ConfigDict


class Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    binding: Optional[str] = None
    location: Optional[str] = None
    response_location: Optional[str] = None


class AssertionConsumer(Endpoint):
    """
    At most one consumer of an entity is expected to be the default, this is not
    checked while decoding.
    """

    is_default: bool = False
    index: Optional[int] = None
