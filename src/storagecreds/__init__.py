"""storagecreds — inject S3 / GCS storage credentials from a ServiceAccount's secrets.

Re-exports the public API. Callers can import directly from here or from
storagecreds.pacts.
"""

from storagecreds.pacts.types import (
    Classification, CredentialConfig, GCSConfig, InjectionTarget,
    S3Config, SecretReference, ServiceAccountIdentity,
)
from storagecreds.pacts.errors import (
    CredentialError, CredentialConfigError, ObjectStoreError, ObjectNotFoundError,
)
from storagecreds.core.classify import classify
from storagecreds.core.mutate import apply_credentials
from storagecreds.core.builder import CredentialBuilder
from storagecreds.io.config import (
    parse_credential_config, credential_config_from_configmap, load_configmap,
)
from storagecreds.io.stores import ObjectStore, ManifestObjectStore, KubernetesObjectStore

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
    "classify",
    "apply_credentials",
    "CredentialBuilder",
    "parse_credential_config",
    "credential_config_from_configmap",
    "load_configmap",
    "ObjectStore",
    "ManifestObjectStore",
    "KubernetesObjectStore",
]
