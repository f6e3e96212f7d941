from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from saml_metadata.models.endpoint import AssertionConsumer, Endpoint
from saml_metadata.models.enums import EntityType, KeyUsage
from saml_metadata.models.key_descriptor import KeyDescriptor


class Entity(BaseModel):
    """
    A decoded EntityDescriptor.

    entity_id is the lookup key for callers. It is not required while decoding,
    an entity without one must not be trusted.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    entity_id: Optional[str] = None
    type: EntityType = EntityType.UNKNOWN
    sign_authn_requests: bool = False
    valid_until: Optional[datetime] = None

    keys: Tuple[KeyDescriptor, ...] = ()
    name_id_formats: Tuple[str, ...] = ()
    logout_services: Tuple[Endpoint, ...] = ()
    sso_services: Tuple[Endpoint, ...] = ()
    assertion_consumers: Tuple[AssertionConsumer, ...] = ()

    def keys_for(self, usage: KeyUsage) -> Tuple[KeyDescriptor, ...]:
        # a KeyDescriptor without use applies to both signing and encryption
        return tuple(key for key in self.keys if key.usage in ("", usage.value))

    def default_assertion_consumer(self) -> Optional[AssertionConsumer]:
        for consumer in self.assertion_consumers:
            if consumer.is_default:
                return consumer
        return self.assertion_consumers[0] if self.assertion_consumers else None


class Entities(tuple):
    """
    Entities in document order, entity ids are not deduplicated.
    """

    def find(self, entity_id: str) -> Optional[Entity]:
        for entity in self:
            if entity.entity_id == entity_id:
                return entity
        return None

    def identity_providers(self) -> "Entities":
        return Entities(entity for entity in self if entity.type == EntityType.IDP)

    def service_providers(self) -> "Entities":
        return Entities(entity for entity in self if entity.type == EntityType.SP)
