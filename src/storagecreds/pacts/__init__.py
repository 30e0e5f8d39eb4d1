"""Public contracts: data types, errors, manifest helpers."""

from storagecreds.pacts.types import (
    Classification, CredentialConfig, GCSConfig, InjectionTarget,
    S3Config, SecretReference, ServiceAccountIdentity,
)
from storagecreds.pacts.errors import (
    CredentialError, CredentialConfigError, ObjectStoreError, ObjectNotFoundError,
)
from storagecreds.pacts.helpers import fold_string_data, env_from_secret

__all__ = [
    "Classification",
    "CredentialConfig",
    "GCSConfig",
    "InjectionTarget",
    "S3Config",
    "SecretReference",
    "ServiceAccountIdentity",
    "CredentialError",
    "CredentialConfigError",
    "ObjectStoreError",
    "ObjectNotFoundError",
    "fold_string_data",
    "env_from_secret",
]
