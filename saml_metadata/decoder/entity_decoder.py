# pylint: disable=c-extension-no-member, protected-access
import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from lxml import etree

from saml_metadata.decoder.expiration_guard import parse_rfc3339
from saml_metadata.decoder.key_decoder import KeyDecoder
from saml_metadata.decoder.token_reader import END, TokenReader
from saml_metadata.exceptions.metadata_exceptions import MalformedTimestampError
from saml_metadata.misc.utils import get_attribute, local_name
from saml_metadata.models.constants import (
    ASSERTION_CONSUMER_SERVICE,
    IDP_SSO_DESCRIPTOR,
    KEY_DESCRIPTOR,
    NAME_ID_FORMAT,
    SINGLE_LOGOUT_SERVICE,
    SINGLE_SIGN_ON_SERVICE,
    SP_SSO_DESCRIPTOR,
    VALID_UNTIL,
)
from saml_metadata.models.endpoint import AssertionConsumer, Endpoint
from saml_metadata.models.entity import Entity
from saml_metadata.models.enums import EntityType
from saml_metadata.models.key_descriptor import KeyDescriptor

log = logging.getLogger(__name__)


# pylint: disable=too-many-instance-attributes, too-few-public-methods
class _EntityBuilder:
    def __init__(
        self,
        entity_id: Optional[str],
        id_: Optional[str],
        valid_until: Optional[datetime],
    ) -> None:
        self.entity_id = entity_id
        self.id = id_
        self.valid_until = valid_until
        self.type = EntityType.UNKNOWN
        self.sign_authn_requests = False
        self.keys: List[KeyDescriptor] = []
        self.name_id_formats: List[str] = []
        self.logout_services: List[Endpoint] = []
        self.sso_services: List[Endpoint] = []
        self.assertion_consumers: List[AssertionConsumer] = []

    def build(self) -> Entity:
        return Entity(
            id=self.id,
            entity_id=self.entity_id,
            type=self.type,
            sign_authn_requests=self.sign_authn_requests,
            valid_until=self.valid_until,
            keys=tuple(self.keys),
            name_id_formats=tuple(self.name_id_formats),
            logout_services=tuple(self.logout_services),
            sso_services=tuple(self.sso_services),
            assertion_consumers=tuple(self.assertion_consumers),
        )


Handler = Callable[[_EntityBuilder, etree._Element, TokenReader], None]


def _endpoint_attributes(element: etree._Element) -> Dict[str, Optional[str]]:
    return {
        "binding": get_attribute(element.attrib, "Binding"),
        "location": get_attribute(element.attrib, "Location"),
        "response_location": get_attribute(element.attrib, "ResponseLocation"),
    }


def _as_index(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip().isdecimal():
        return None
    return int(value)


class EntityDecoder:
    """
    Decodes one EntityDescriptor from a token reader positioned at its start token.

    Elements are matched on their local name, in any order and any number of
    times. Elements without a handler are walked through without keeping
    anything, so unknown extensions never fail the decode.
    """

    def __init__(self, key_decoder: KeyDecoder) -> None:
        self._key_decoder = key_decoder
        self._handlers: Dict[str, Handler] = {
            SP_SSO_DESCRIPTOR: self._sp_descriptor,
            IDP_SSO_DESCRIPTOR: self._idp_descriptor,
            KEY_DESCRIPTOR: self._key_descriptor,
            NAME_ID_FORMAT: self._name_id_format,
            SINGLE_LOGOUT_SERVICE: self._logout_service,
            SINGLE_SIGN_ON_SERVICE: self._sso_service,
            ASSERTION_CONSUMER_SERVICE: self._assertion_consumer,
        }

    def decode(self, reader: TokenReader, start: etree._Element) -> Entity:
        builder = _EntityBuilder(
            entity_id=get_attribute(start.attrib, "entityID"),
            id_=get_attribute(start.attrib, "ID"),
            valid_until=self._valid_until(start),
        )
        log.debug("Decoding entity %s", builder.entity_id)

        for event, element in reader.tokens():
            if event == END:
                if element is start:
                    break
                continue

            handler = self._handlers.get(local_name(element.tag))
            if handler is not None:
                handler(builder, element, reader)

        return builder.build()

    @staticmethod
    def _valid_until(start: etree._Element) -> Optional[datetime]:
        value = get_attribute(start.attrib, VALID_UNTIL)
        if value is None:
            return None
        try:
            return parse_rfc3339(value)
        except MalformedTimestampError as timestamp_error:
            log.warning(
                "Ignoring validUntil of entity %s: %s",
                get_attribute(start.attrib, "entityID"),
                timestamp_error,
            )
            return None

    @staticmethod
    def _sp_descriptor(builder: _EntityBuilder, element, _reader) -> None:
        builder.type = EntityType.SP
        builder.sign_authn_requests = (
            get_attribute(element.attrib, "AuthnRequestsSigned") == "true"
        )

    @staticmethod
    def _idp_descriptor(builder: _EntityBuilder, _element, _reader) -> None:
        builder.type = EntityType.IDP

    def _key_descriptor(self, builder: _EntityBuilder, element, reader) -> None:
        subtree = reader.read_subtree(element)
        builder.keys.append(self._key_decoder.decode(subtree))
        reader.release(subtree)

    @staticmethod
    def _name_id_format(builder: _EntityBuilder, element, reader) -> None:
        subtree = reader.read_subtree(element)
        builder.name_id_formats.append((subtree.text or "").strip())
        reader.release(subtree)

    @staticmethod
    def _logout_service(builder: _EntityBuilder, element, reader) -> None:
        builder.logout_services.append(Endpoint(**_endpoint_attributes(element)))
        reader.skip(element)

    @staticmethod
    def _sso_service(builder: _EntityBuilder, element, reader) -> None:
        builder.sso_services.append(Endpoint(**_endpoint_attributes(element)))
        reader.skip(element)

    @staticmethod
    def _assertion_consumer(builder: _EntityBuilder, element, reader) -> None:
        builder.assertion_consumers.append(
            AssertionConsumer(
                **_endpoint_attributes(element),
                is_default=get_attribute(element.attrib, "isDefault") == "true",
                index=_as_index(get_attribute(element.attrib, "index")),
            )
        )
        reader.skip(element)
