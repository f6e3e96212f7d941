import logging
from configparser import ConfigParser
from typing import Union

from saml_metadata.dependency_injection.config import as_dict, get_config
from saml_metadata.dependency_injection.container import Container


def create_container(
    config: Union[ConfigParser, None] = None, container: Union[Container, None] = None
) -> Container:
    container = container if container is not None else Container()
    _config: ConfigParser = config if config is not None else get_config()
    loglevel = logging.getLevelName(
        _config.get("app", "loglevel", fallback="info").upper()
    )

    if isinstance(loglevel, str):
        raise ValueError(f"Invalid loglevel {loglevel.upper()}")
    logging.basicConfig(
        level=loglevel,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    container.config.from_dict(as_dict(_config))
    return container
