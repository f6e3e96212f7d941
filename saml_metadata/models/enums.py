from enum import Enum


class EntityType(str, Enum):
    IDP = "IDP"
    SP = "SP"
    UNKNOWN = "Unknown"


class KeyUsage(str, Enum):
    SIGNING = "signing"
    ENCRYPTION = "encryption"
