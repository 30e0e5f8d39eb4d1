"""GCS credentials — the secret mounted as a file, plus the env var locating it."""

from storagecreds.core.constants import GCS_CREDENTIAL_ENV_KEY, GCS_CREDENTIAL_VOLUME_MOUNT_PATH
from storagecreds.pacts.helpers import secret_name


def build_secret_volume(secret: dict) -> tuple[dict, dict]:
    """Return (volume, volumeMount) mounting the secret read-only at the credential path."""
    name = secret_name(secret)
    volume = {"name": name, "secret": {"secretName": name}}
    volume_mount = {
        "name": name,
        "mountPath": GCS_CREDENTIAL_VOLUME_MOUNT_PATH,
        "readOnly": True,
    }
    return volume, volume_mount


def build_credential_env(file_name: str) -> dict:
    return {
        "name": GCS_CREDENTIAL_ENV_KEY,
        "value": GCS_CREDENTIAL_VOLUME_MOUNT_PATH + file_name,
    }
