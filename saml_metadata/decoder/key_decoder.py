# pylint: disable=c-extension-no-member, protected-access
import base64
import binascii
from typing import List, Optional

from cryptography import x509
from cryptography.x509 import Certificate
from lxml import etree

from saml_metadata.exceptions.metadata_exceptions import MalformedKeyError
from saml_metadata.misc.utils import get_attribute, local_name
from saml_metadata.models.constants import (
    ENCRYPTION_METHOD,
    KEY_NAME,
    X509_CERTIFICATE,
)
from saml_metadata.models.key_descriptor import KeyDescriptor


class KeyDecoder:
    """
    Decodes a complete KeyDescriptor element. Certificates are loaded here, so
    a broken certificate fails the entity it belongs to.
    """

    def decode(self, element: etree._Element) -> KeyDescriptor:
        certificates: List[Certificate] = []
        key_names: List[str] = []
        encryption_methods: List[str] = []

        for child in element.iter():
            name = local_name(child.tag)
            if name == X509_CERTIFICATE:
                certificates.append(self.load_certificate(child.text))
            elif name == KEY_NAME and child.text:
                key_names.append(child.text.strip())
            elif name == ENCRYPTION_METHOD:
                algorithm = get_attribute(child.attrib, "Algorithm")
                if algorithm is not None:
                    encryption_methods.append(algorithm)

        return KeyDescriptor(
            usage=get_attribute(element.attrib, "use") or "",
            certificates=tuple(certificates),
            key_names=tuple(key_names),
            encryption_methods=tuple(encryption_methods),
        )

    @staticmethod
    def load_certificate(cert_data: Optional[str]) -> Certificate:
        cert_data = "".join((cert_data or "").split())
        try:
            der = base64.b64decode(cert_data, validate=True)
        except binascii.Error as decode_error:
            raise MalformedKeyError(
                error_description="X509Certificate is not valid base64",
                log_message=str(decode_error),
            ) from decode_error

        try:
            return x509.load_der_x509_certificate(der)
        except ValueError as load_error:
            raise MalformedKeyError(
                error_description="X509Certificate could not be loaded",
                log_message=str(load_error),
            ) from load_error
