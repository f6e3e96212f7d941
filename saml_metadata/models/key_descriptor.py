from typing import List, Tuple, Union

from cryptography.x509 import Certificate
from cryptography.x509.oid import NameOID
from pydantic import BaseModel, ConfigDict

from saml_metadata.exceptions.metadata_exceptions import MalformedKeyError
from saml_metadata.misc.utils import keyname_from_certificate, pem_from_certificate


class CertificateChain:
    def __init__(self, certificates: List[Certificate]):
        self.certificates = certificates
        self.leaf = certificates[0]

    @property
    def common_name(self) -> Union[str, None]:
        attributes = self.leaf.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
        if not attributes:
            return None
        value = attributes[0].value
        return value if isinstance(value, str) else value.decode("utf-8")

    @property
    def keyname(self) -> str:
        return keyname_from_certificate(self.leaf)

    @property
    def pem(self) -> str:
        return pem_from_certificate(self.leaf)


class KeyDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    usage: str = ""
    certificates: Tuple[Certificate, ...] = ()
    key_names: Tuple[str, ...] = ()
    encryption_methods: Tuple[str, ...] = ()

    def cert(self) -> CertificateChain:
        """
        Return the certificates of this key, the first one is considered the leaf.
        """
        if not self.certificates:
            raise MalformedKeyError(
                error_description=f"KeyDescriptor with use {self.usage!r} "
                "does not contain a X509Certificate"
            )
        return CertificateChain(list(self.certificates))
