"""Credential overlay parsing — ConfigMap blob to CredentialConfig."""

import json
import os

import yaml

from storagecreds.core.constants import CREDENTIAL_CONFIG_KEY_NAME
from storagecreds.pacts.errors import CredentialConfigError
from storagecreds.pacts.types import CredentialConfig, GCSConfig, S3Config

# JSON field name → dataclass field name, per section
_S3_FIELDS = {
    "s3AccessKeyIDName": "s3_access_key_id_name",
    "s3SecretAccessKeyName": "s3_secret_access_key_name",
    "s3Endpoint": "s3_endpoint",
    "s3UseHttps": "s3_use_https",
    "s3Region": "s3_region",
    "s3VerifySSL": "s3_verify_ssl",
}
_GCS_FIELDS = {
    "gcsCredentialFileName": "gcs_credential_file_name",
}


def _section(raw: dict, section: str, fields: dict[str, str]) -> dict[str, str]:
    """Extract known string fields of one overlay section; unknown keys are ignored."""
    body = raw.get(section)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise CredentialConfigError(
            f"credential config section '{section}' must be an object, "
            f"got {type(body).__name__}")
    kwargs = {}
    for json_name, attr in fields.items():
        val = body.get(json_name)
        if val is None:
            continue
        if not isinstance(val, str):
            raise CredentialConfigError(
                f"credential config field '{section}.{json_name}' must be a string, "
                f"got {type(val).__name__}")
        kwargs[attr] = val
    return kwargs


def parse_credential_config(blob: str) -> CredentialConfig:
    """Parse the credential overlay JSON. Raises CredentialConfigError on bad input."""
    try:
        raw = json.loads(blob)
    except (TypeError, ValueError) as exc:
        raise CredentialConfigError(f"unable to parse credential config: {exc}") from exc
    if not isinstance(raw, dict):
        raise CredentialConfigError(
            f"credential config must be a JSON object, got {type(raw).__name__}")
    return CredentialConfig(
        s3=S3Config(**_section(raw, "s3", _S3_FIELDS)),
        gcs=GCSConfig(**_section(raw, "gcs", _GCS_FIELDS)),
    )


def credential_config_from_configmap(configmap: dict) -> CredentialConfig:
    """Read the overlay from a ConfigMap; defaults when the credentials key is absent."""
    data = configmap.get("data") or {}
    if CREDENTIAL_CONFIG_KEY_NAME not in data:
        return CredentialConfig()
    return parse_credential_config(data[CREDENTIAL_CONFIG_KEY_NAME])


def load_configmap(path: str) -> dict:
    """Load a ConfigMap manifest from a YAML file."""
    if not os.path.exists(path):
        raise CredentialConfigError(f"ConfigMap file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            configmap = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise CredentialConfigError(
            f"unable to parse {path}: {exc.__class__.__name__}") from exc
    if not isinstance(configmap, dict):
        raise CredentialConfigError(f"{path} does not contain a ConfigMap manifest")
    return configmap
