"""Secret classification — decide which backend a secret's data belongs to."""

from storagecreds.pacts.types import Classification, CredentialConfig


def classify(secret_data: dict | None, config: CredentialConfig) -> Classification:
    """Classify a secret by the presence of backend data keys.

    The S3 access key ID key is checked before the GCS credential file key,
    so a secret holding both is always S3. Total over all inputs: empty or
    missing data is UNRECOGNIZED.
    """
    data = secret_data or {}
    if config.s3_access_key_id_key() in data:
        return Classification.S3
    if config.gcs_credential_file_key() in data:
        return Classification.GCS
    return Classification.UNRECOGNIZED
