import logging

from saml_metadata.decoder.metadata_decoder import MetadataDecoder
from saml_metadata.misc.utils import file_content_raise_if_none
from saml_metadata.models.entity import Entities

log = logging.getLogger(__name__)


class MetadataService:
    def __init__(self, metadata_path: str, decoder: MetadataDecoder) -> None:
        self._metadata_path = metadata_path
        self._decoder = decoder

    def load(self) -> Entities:
        entities = self._decoder.decode(
            file_content_raise_if_none(self._metadata_path)
        )
        log.info(
            "Loaded %d entities (%d idp, %d sp) from %s",
            len(entities),
            len(entities.identity_providers()),
            len(entities.service_providers()),
            self._metadata_path,
        )
        return entities
