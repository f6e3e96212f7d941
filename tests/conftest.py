import os
from typing import Tuple

import pytest
from cryptography import x509

from saml_metadata.decoder.entity_decoder import EntityDecoder
from saml_metadata.decoder.expiration_guard import ExpirationGuard
from saml_metadata.decoder.key_decoder import KeyDecoder
from saml_metadata.decoder.metadata_decoder import MetadataDecoder
from tests.utils import make_test_certificate

RESOURCES_DIR = os.path.join(os.path.dirname(__file__), "resources")


@pytest.fixture
def metadata_path() -> str:
    return os.path.join(RESOURCES_DIR, "idp.test-metadata.xml")


@pytest.fixture
def metadata_bytes(metadata_path) -> bytes:
    with open(metadata_path, "rb") as metadata_file:
        return metadata_file.read()


@pytest.fixture(scope="session")
def test_certificate() -> Tuple[x509.Certificate, str]:
    return make_test_certificate("sp.example.com")


@pytest.fixture
def key_decoder() -> KeyDecoder:
    return KeyDecoder()


@pytest.fixture
def entity_decoder(key_decoder) -> EntityDecoder:
    return EntityDecoder(key_decoder=key_decoder)


@pytest.fixture
def expiration_guard() -> ExpirationGuard:
    return ExpirationGuard()


@pytest.fixture
def metadata_decoder(expiration_guard, entity_decoder) -> MetadataDecoder:
    return MetadataDecoder(
        expiration_guard=expiration_guard, entity_decoder=entity_decoder
    )
