# pylint: disable=c-extension-no-member, too-few-public-methods
from dependency_injector import containers, providers

from saml_metadata.decoder.entity_decoder import EntityDecoder
from saml_metadata.decoder.expiration_guard import ExpirationGuard, utc_now
from saml_metadata.decoder.key_decoder import KeyDecoder
from saml_metadata.decoder.metadata_decoder import MetadataDecoder
from saml_metadata.misc.utils import as_bool
from saml_metadata.services.metadata_service import MetadataService


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    clock = providers.Object(utc_now)

    key_decoder = providers.Singleton(KeyDecoder)

    expiration_guard = providers.Singleton(ExpirationGuard, clock=clock)

    entity_decoder = providers.Singleton(EntityDecoder, key_decoder=key_decoder)

    metadata_decoder = providers.Singleton(
        MetadataDecoder,
        expiration_guard=expiration_guard,
        entity_decoder=entity_decoder,
        huge_tree=config.metadata.huge_tree.as_(as_bool),
        resolve_entities=config.metadata.resolve_entities.as_(as_bool),
    )

    metadata_service = providers.Singleton(
        MetadataService,
        metadata_path=config.metadata.metadata_path,
        decoder=metadata_decoder,
    )
