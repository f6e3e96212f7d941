import configparser
from typing import Dict

_PATH = "saml_metadata.conf"
_CONFIG = None


# pylint:disable=global-statement
def get_config(path=None) -> configparser.ConfigParser:
    """
    Use this method only when it's not possible to inject config variables
    """
    global _CONFIG
    global _PATH
    if path is None:
        path = _PATH
    if _CONFIG is None or _PATH != path:
        _PATH = path
        _CONFIG = configparser.ConfigParser()
        _CONFIG.read(_PATH)
    return _CONFIG


def as_dict(config: configparser.ConfigParser) -> Dict[str, Dict[str, str]]:
    return {section: dict(config[section]) for section in config.sections()}
