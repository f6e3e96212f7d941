import base64
from datetime import datetime, timezone, timedelta
from typing import Optional, Tuple

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

MD_NS = "urn:oasis:names:tc:SAML:2.0:metadata"
DS_NS = "http://www.w3.org/2000/09/xmldsig#"


def make_test_certificate(
    common_name: str = "sp.example.com",
) -> Tuple[x509.Certificate, str]:
    """
    Returns a self signed certificate and its base64 DER encoding, the form it
    takes inside a ds:X509Certificate element.
    """
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    subject = issuer = x509.Name(
        [
            x509.NameAttribute(NameOID.COUNTRY_NAME, "NL"),
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Test Org"),
            x509.NameAttribute(NameOID.COMMON_NAME, common_name),
        ]
    )
    cert = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(issuer)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(datetime.now(timezone.utc))
        .not_valid_after(datetime.now(timezone.utc) + timedelta(days=10))
        .sign(key, algorithm=hashes.SHA256())
    )
    der = cert.public_bytes(encoding=serialization.Encoding.DER)
    return cert, base64.b64encode(der).decode("ascii")


def key_descriptor(cert_data: str, use: Optional[str] = None) -> str:
    use_attribute = f' use="{use}"' if use is not None else ""
    return (
        f"<md:KeyDescriptor{use_attribute}><ds:KeyInfo><ds:X509Data>"
        f"<ds:X509Certificate>{cert_data}</ds:X509Certificate>"
        "</ds:X509Data></ds:KeyInfo></md:KeyDescriptor>"
    )


def entity_descriptor(
    body: str = "",
    entity_id: Optional[str] = "https://sp.example.com/metadata",
    attributes: str = "",
) -> str:
    entity_id_attribute = f' entityID="{entity_id}"' if entity_id is not None else ""
    return (
        f"<md:EntityDescriptor{entity_id_attribute}{attributes}>{body}"
        "</md:EntityDescriptor>"
    )


def metadata_document(body: str, root_attributes: str = "") -> bytes:
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<md:EntitiesDescriptor xmlns:md="{MD_NS}" xmlns:ds="{DS_NS}"'
        f"{root_attributes}>{body}</md:EntitiesDescriptor>"
    ).encode("utf-8")


def single_entity_document(body: str = "", root_attributes: str = "") -> bytes:
    return (
        f'<md:EntityDescriptor xmlns:md="{MD_NS}" xmlns:ds="{DS_NS}"'
        f' entityID="https://idp.example.com/metadata"{root_attributes}>{body}'
        "</md:EntityDescriptor>"
    ).encode("utf-8")


def fixed_clock(moment: datetime):
    return lambda: moment
