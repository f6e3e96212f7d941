from os import path
from typing import Mapping, Union

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.x509 import Certificate


def file_content(filepath: str) -> Union[bytes, None]:
    if filepath is not None and path.exists(filepath):
        with open(filepath, "rb") as file:
            return file.read()
    return None


def file_content_raise_if_none(filepath: str) -> bytes:
    optional_file_content = file_content(filepath)
    if optional_file_content is None:
        raise ValueError(f"file_content for {filepath} shouldn't be None")
    return optional_file_content


def as_bool(input_str: Union[str, None]) -> bool:
    return input_str is not None and input_str.lower() == "true"


def local_name(tag) -> str:
    """
    Strip the namespace from an lxml tag, `{urn:...:metadata}KeyDescriptor`
    becomes `KeyDescriptor`. Comments and processing instructions have no
    string tag and yield an empty name.
    """
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]


def get_attribute(attributes: Mapping[str, str], name: str) -> Union[str, None]:
    for key, value in attributes.items():
        if local_name(key) == name:
            return value
    return None


def keyname_from_certificate(certificate: Certificate) -> str:
    return certificate.fingerprint(hashes.SHA256()).hex()


def pem_from_certificate(certificate: Certificate) -> str:
    return certificate.public_bytes(encoding=serialization.Encoding.PEM).decode(
        "utf-8"
    )
