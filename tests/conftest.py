"""Shared fixtures: manifest builders and an in-memory object store."""

import base64
import logging

import pytest

from storagecreds import CredentialBuilder, InjectionTarget, ManifestObjectStore


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def make_secret(name: str, data: dict[str, str], namespace: str = "ns1",
                annotations: dict | None = None) -> dict:
    meta = {"name": name, "namespace": namespace}
    if annotations:
        meta["annotations"] = annotations
    return {
        "apiVersion": "v1",
        "kind": "Secret",
        "metadata": meta,
        "data": {k: b64(v) for k, v in data.items()},
    }


def make_service_account(name: str, secret_names: list[str], namespace: str = "ns1") -> dict:
    return {
        "apiVersion": "v1",
        "kind": "ServiceAccount",
        "metadata": {"name": name, "namespace": namespace},
        "secrets": [{"name": s} for s in secret_names],
    }


S3_DATA = {"awsAccessKeyID": "AKIA", "awsSecretAccessKey": "secret"}
GCS_DATA = {"gcloud-application-credentials.json": '{"type": "service_account"}'}


@pytest.fixture
def logger():
    return logging.getLogger("storagecreds.test")


@pytest.fixture
def target():
    return InjectionTarget(container={"name": "user-container", "image": "model:latest"})


@pytest.fixture
def mixed_store():
    """default SA in ns1 referencing [s3cred, other, gcscred]."""
    return ManifestObjectStore([
        make_service_account("default", ["s3cred", "other", "gcscred"]),
        make_secret("s3cred", S3_DATA),
        make_secret("other", {"token": "abc"}),
        make_secret("gcscred", GCS_DATA),
    ])


@pytest.fixture
def builder(mixed_store, logger):
    return CredentialBuilder(mixed_store, logger=logger)
