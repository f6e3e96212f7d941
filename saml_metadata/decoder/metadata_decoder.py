import logging
from typing import BinaryIO, List, Union

from saml_metadata.decoder.entity_decoder import EntityDecoder
from saml_metadata.decoder.expiration_guard import ExpirationGuard
from saml_metadata.decoder.token_reader import TokenReader
from saml_metadata.exceptions.metadata_exceptions import MalformedXMLError
from saml_metadata.misc.utils import local_name
from saml_metadata.models.constants import ENTITY_DESCRIPTOR
from saml_metadata.models.entity import Entities, Entity

log = logging.getLogger(__name__)


class MetadataDecoder:
    """
    Decodes a SAML 2.0 metadata document, either a single EntityDescriptor or an
    EntitiesDescriptor holding any number of (nested) EntityDescriptors.

    The validUntil of the root element is checked before any entity is decoded.
    Any error aborts the whole document, there are no partial results.
    """

    def __init__(
        self,
        expiration_guard: ExpirationGuard,
        entity_decoder: EntityDecoder,
        huge_tree: bool = False,
        resolve_entities: bool = False,
    ) -> None:
        self._expiration_guard = expiration_guard
        self._entity_decoder = entity_decoder
        self._huge_tree = huge_tree
        self._resolve_entities = resolve_entities

    def decode(self, source: Union[bytes, bytearray, BinaryIO]) -> Entities:
        reader = TokenReader(
            source,
            huge_tree=self._huge_tree,
            resolve_entities=self._resolve_entities,
        )

        root = reader.next_start()
        if root is None:
            raise MalformedXMLError(error_description="document has no root element")

        self._expiration_guard.check(root.attrib)

        entities: List[Entity] = []
        element = root
        while element is not None:
            if local_name(element.tag) == ENTITY_DESCRIPTOR:
                entities.append(self._entity_decoder.decode(reader, element))
                reader.release(element)
            element = reader.next_start()

        log.info("Decoded %d entities from metadata", len(entities))
        return Entities(entities)
