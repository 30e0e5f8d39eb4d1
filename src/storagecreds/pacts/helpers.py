"""Public helper functions for reading manifest-shaped Secrets and ServiceAccounts."""

import base64


def fold_string_data(secret: dict) -> dict:
    """Merge stringData into base64 data, as the API server does on write.

    Returns a new Secret dict; stringData keys win over data keys.
    """
    string_data = secret.get("stringData") or {}
    if not string_data:
        return secret
    folded = {k: v for k, v in secret.items() if k != "stringData"}
    data = dict(secret.get("data") or {})
    for key, val in string_data.items():
        data[key] = base64.b64encode(str(val).encode("utf-8")).decode("ascii")
    folded["data"] = data
    return folded


def secret_data(secret: dict) -> dict:
    """Return the data mapping of a Secret, empty when absent or null."""
    return secret.get("data") or {}


def secret_name(secret: dict) -> str:
    return (secret.get("metadata") or {}).get("name", "")


def secret_annotations(secret: dict) -> dict:
    return (secret.get("metadata") or {}).get("annotations") or {}


def secret_ref_names(service_account: dict) -> list[str]:
    """Names of the secrets attached to a ServiceAccount, in listed order."""
    return [ref.get("name", "") for ref in (service_account.get("secrets") or [])]


def env_from_secret(name: str, secret: str, key: str) -> dict:
    """Build an env entry whose value comes from a secret key."""
    return {
        "name": name,
        "valueFrom": {"secretKeyRef": {"name": secret, "key": key}},
    }
