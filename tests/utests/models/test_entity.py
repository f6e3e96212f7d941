import pytest
from pydantic import ValidationError

from saml_metadata.models.endpoint import AssertionConsumer, Endpoint
from saml_metadata.models.entity import Entities, Entity
from saml_metadata.models.enums import EntityType, KeyUsage
from saml_metadata.models.key_descriptor import KeyDescriptor


@pytest.fixture
def entities() -> Entities:
    return Entities(
        [
            Entity(entity_id="urn:sp:one", type=EntityType.SP),
            Entity(entity_id="urn:idp", type=EntityType.IDP),
            Entity(entity_id="urn:sp:two", type=EntityType.SP),
            Entity(entity_id="urn:sp:one", type=EntityType.UNKNOWN),
        ]
    )


def test_entities_find_returns_first_match(entities):
    assert entities.find("urn:sp:one") is entities[0]
    assert entities.find("urn:missing") is None


def test_entities_filters(entities):
    assert [entity.entity_id for entity in entities.service_providers()] == [
        "urn:sp:one",
        "urn:sp:two",
    ]
    assert [entity.entity_id for entity in entities.identity_providers()] == [
        "urn:idp"
    ]
    assert isinstance(entities.identity_providers(), Entities)


def test_entity_defaults():
    entity = Entity()

    assert entity.type == EntityType.UNKNOWN
    assert entity.keys == ()
    assert entity.assertion_consumers == ()
    assert entity.default_assertion_consumer() is None


def test_entity_is_immutable():
    entity = Entity(entity_id="urn:sp")

    with pytest.raises(ValidationError):
        entity.entity_id = "urn:other"  # type: ignore[misc]


def test_keys_for_usage():
    signing = KeyDescriptor(usage="signing")
    encryption = KeyDescriptor(usage="encryption")
    both = KeyDescriptor()
    entity = Entity(keys=(signing, encryption, both))

    assert entity.keys_for(KeyUsage.SIGNING) == (signing, both)
    assert entity.keys_for(KeyUsage.ENCRYPTION) == (encryption, both)


def test_default_assertion_consumer():
    first = AssertionConsumer(location="https://sp/first")
    default = AssertionConsumer(location="https://sp/default", is_default=True)

    with_default = Entity(assertion_consumers=(first, default))
    without_default = Entity(assertion_consumers=(first,))

    assert with_default.default_assertion_consumer() == default
    assert without_default.default_assertion_consumer() == first


def test_assertion_consumer_is_endpoint():
    consumer = AssertionConsumer(binding="urn:binding", location="https://sp/acs")

    assert isinstance(consumer, Endpoint)
    assert consumer.is_default is False
    assert consumer.index is None
