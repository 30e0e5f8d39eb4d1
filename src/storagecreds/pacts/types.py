"""Public data types: overlay config, lookup keys, injection target."""

from dataclasses import dataclass, field
from enum import Enum

from storagecreds.core.constants import (
    AWS_ACCESS_KEY_ID_NAME, AWS_SECRET_ACCESS_KEY_NAME,
    DEFAULT_SERVICE_ACCOUNT, GCS_CREDENTIAL_FILE_NAME,
)


class Classification(Enum):
    """Which credential backend a secret carries."""
    S3 = "s3"
    GCS = "gcs"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class S3Config:
    """S3 overrides. Empty strings mean "use the default"."""
    s3_access_key_id_name: str = ""
    s3_secret_access_key_name: str = ""
    s3_endpoint: str = ""
    s3_use_https: str = ""
    s3_region: str = ""
    s3_verify_ssl: str = ""

    def access_key_id_key(self) -> str:
        return self.s3_access_key_id_name or AWS_ACCESS_KEY_ID_NAME

    def secret_access_key_key(self) -> str:
        return self.s3_secret_access_key_name or AWS_SECRET_ACCESS_KEY_NAME


@dataclass(frozen=True)
class GCSConfig:
    """GCS overrides. Empty strings mean "use the default"."""
    gcs_credential_file_name: str = ""

    def credential_file_key(self) -> str:
        return self.gcs_credential_file_name or GCS_CREDENTIAL_FILE_NAME


@dataclass(frozen=True)
class CredentialConfig:
    """Overlay of the data-key names used to recognize each backend."""
    s3: S3Config = field(default_factory=S3Config)
    gcs: GCSConfig = field(default_factory=GCSConfig)

    def s3_access_key_id_key(self) -> str:
        return self.s3.access_key_id_key()

    def s3_secret_access_key_key(self) -> str:
        return self.s3.secret_access_key_key()

    def gcs_credential_file_key(self) -> str:
        return self.gcs.credential_file_key()


@dataclass
class ServiceAccountIdentity:
    """Namespace and name of the account whose secrets are scanned."""
    namespace: str
    name: str = ""

    def __post_init__(self):
        if not self.name:
            self.name = DEFAULT_SERVICE_ACCOUNT


@dataclass(frozen=True)
class SecretReference:
    """Lookup key for one secret attached to a service account."""
    namespace: str
    name: str


@dataclass
class InjectionTarget:
    """Container spec and pod volumes that credentials are appended to.

    Owned by the caller. Entries are only ever appended; missing
    ``env`` / ``volumeMounts`` lists are created on first append.
    """
    container: dict
    volumes: list = field(default_factory=list)

    def append_env(self, envs: list[dict]) -> None:
        self.container.setdefault("env", []).extend(envs)

    def append_volume(self, volume: dict, volume_mount: dict) -> None:
        self.volumes.append(volume)
        self.container.setdefault("volumeMounts", []).append(volume_mount)
