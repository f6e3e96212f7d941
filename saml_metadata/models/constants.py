VALID_UNTIL = "validUntil"

ENTITY_DESCRIPTOR = "EntityDescriptor"
IDP_SSO_DESCRIPTOR = "IDPSSODescriptor"
SP_SSO_DESCRIPTOR = "SPSSODescriptor"
KEY_DESCRIPTOR = "KeyDescriptor"
NAME_ID_FORMAT = "NameIDFormat"
SINGLE_LOGOUT_SERVICE = "SingleLogoutService"
SINGLE_SIGN_ON_SERVICE = "SingleSignOnService"
ASSERTION_CONSUMER_SERVICE = "AssertionConsumerService"

X509_CERTIFICATE = "X509Certificate"
KEY_NAME = "KeyName"
ENCRYPTION_METHOD = "EncryptionMethod"
