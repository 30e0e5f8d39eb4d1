"""Apply a classified secret to the injection target."""

from storagecreds.core.gcs import build_credential_env, build_secret_volume
from storagecreds.core.s3 import build_secret_envs
from storagecreds.pacts.types import Classification, CredentialConfig, InjectionTarget


def apply_credentials(classification: Classification, secret: dict,
                      config: CredentialConfig, target: InjectionTarget) -> None:
    """Append the env vars / volume for one secret to target.

    Nothing already in target is read back: two GCS secrets yield two
    volumes, two mounts on the same path and two GOOGLE_APPLICATION_CREDENTIALS
    entries.
    """
    if classification is Classification.S3:
        target.append_env(build_secret_envs(secret, config.s3))
    elif classification is Classification.GCS:
        volume, volume_mount = build_secret_volume(secret)
        target.append_volume(volume, volume_mount)
        target.append_env([build_credential_env(config.gcs_credential_file_key())])
