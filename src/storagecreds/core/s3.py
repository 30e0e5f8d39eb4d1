"""S3 credentials — env vars pointing at the secret's access keys."""

from storagecreds.core.constants import (
    AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_ENDPOINT_URL, AWS_REGION,
    S3_ENDPOINT, S3_USE_HTTPS, S3_VERIFY_SSL,
    S3_ENDPOINT_ANNOTATION, S3_USE_HTTPS_ANNOTATION,
    S3_REGION_ANNOTATION, S3_VERIFY_SSL_ANNOTATION,
)
from storagecreds.pacts.helpers import (
    env_from_secret, secret_annotations, secret_data, secret_name,
)
from storagecreds.pacts.types import S3Config


def _endpoint_envs(endpoint: str, use_https: str) -> list[dict]:
    """S3_USE_HTTPS (if set), S3_ENDPOINT, AWS_ENDPOINT_URL, in that order."""
    envs = []
    scheme = "https://"
    if use_https:
        if use_https == "0":
            scheme = "http://"
        envs.append({"name": S3_USE_HTTPS, "value": use_https})
    envs.append({"name": S3_ENDPOINT, "value": endpoint})
    envs.append({"name": AWS_ENDPOINT_URL, "value": scheme + endpoint})
    return envs


def build_secret_envs(secret: dict, s3_config: S3Config) -> list[dict]:
    """Build the S3 env vars for one secret.

    Access keys are secretKeyRefs, so values reach the container verbatim
    without being copied into the pod spec. Only keys present in the
    secret data are referenced. Endpoint, https, region and
    verify-ssl come from the secret annotations, falling back to s3_config.
    """
    name = secret_name(secret)
    data = secret_data(secret)
    envs = [
        env_from_secret(env_name, name, key)
        for env_name, key in (
            (AWS_ACCESS_KEY_ID, s3_config.access_key_id_key()),
            (AWS_SECRET_ACCESS_KEY, s3_config.secret_access_key_key()),
        )
        if key in data
    ]

    annotations = secret_annotations(secret)
    endpoint = annotations.get(S3_ENDPOINT_ANNOTATION, s3_config.s3_endpoint)
    if endpoint:
        use_https = annotations.get(S3_USE_HTTPS_ANNOTATION, s3_config.s3_use_https)
        envs.extend(_endpoint_envs(endpoint, use_https))

    region = annotations.get(S3_REGION_ANNOTATION, s3_config.s3_region)
    if region:
        envs.append({"name": AWS_REGION, "value": region})

    verify_ssl = annotations.get(S3_VERIFY_SSL_ANNOTATION, s3_config.s3_verify_ssl)
    if verify_ssl:
        envs.append({"name": S3_VERIFY_SSL, "value": verify_ssl})

    return envs
