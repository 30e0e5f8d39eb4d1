"""End-to-end injection through CredentialBuilder."""

import logging

from conftest import GCS_DATA, S3_DATA, make_secret, make_service_account

from storagecreds import (
    CredentialBuilder, CredentialConfig, InjectionTarget, ManifestObjectStore,
    ObjectNotFoundError, ObjectStoreError, S3Config, ServiceAccountIdentity,
)


class FlakyStore(ManifestObjectStore):
    """Fails to fetch the named secrets."""

    def __init__(self, manifests, failing: set[str]):
        super().__init__(manifests)
        self.failing = failing

    def get_secret(self, namespace, name):
        if name in self.failing:
            raise ObjectStoreError(f"connection reset fetching {name}")
        return super().get_secret(namespace, name)


def test_empty_name_means_default_account():
    assert ServiceAccountIdentity(namespace="ns1").name == "default"
    assert ServiceAccountIdentity(namespace="ns1", name="").name == "default"
    assert ServiceAccountIdentity(namespace="ns1", name="sa").name == "sa"


def test_s3_secret_on_default_account(logger):
    store = ManifestObjectStore([
        make_service_account("default", ["s3cred"]),
        make_secret("s3cred", {"awsAccessKeyID": "AKIA"}),
    ])
    container, volumes = {"name": "c"}, []
    CredentialBuilder(store, logger=logger).create_secret_volume_and_env(
        "ns1", "", container, volumes)
    assert container["env"] == [{
        "name": "AWS_ACCESS_KEY_ID",
        "valueFrom": {"secretKeyRef": {"name": "s3cred", "key": "awsAccessKeyID"}},
    }]
    assert volumes == []


def test_mutations_follow_secret_order(builder, target):
    builder.inject_credentials(ServiceAccountIdentity("ns1", "default"), target)
    assert [e["name"] for e in target.container["env"]] == [
        "AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "GOOGLE_APPLICATION_CREDENTIALS"]
    assert [v["name"] for v in target.volumes] == ["gcscred"]
    assert [m["name"] for m in target.container["volumeMounts"]] == ["gcscred"]


def test_missing_account_is_fail_open(builder, target, caplog):
    with caplog.at_level(logging.ERROR, logger="storagecreds.test"):
        result = builder.inject_credentials(ServiceAccountIdentity("ns1", "ghost"), target)
    assert result is None
    assert target.container == {"name": "user-container", "image": "model:latest"}
    assert target.volumes == []
    assert any(r.service_account == "ghost" for r in caplog.records)


def test_account_in_other_namespace_not_found(builder, target):
    builder.inject_credentials(ServiceAccountIdentity("ns2", "default"), target)
    assert "env" not in target.container


def test_secret_fetch_failure_skips_only_that_secret(logger, target, caplog):
    store = FlakyStore([
        make_service_account("sa", ["x", "y", "z"]),
        make_secret("x", S3_DATA),
        make_secret("y", S3_DATA),
        make_secret("z", GCS_DATA),
    ], failing={"y"})
    with caplog.at_level(logging.ERROR, logger="storagecreds.test"):
        CredentialBuilder(store, logger=logger).inject_credentials(
            ServiceAccountIdentity("ns1", "sa"), target)
    refs = [e["valueFrom"]["secretKeyRef"]["name"]
            for e in target.container["env"] if "valueFrom" in e]
    assert refs == ["x", "x"]
    assert [v["name"] for v in target.volumes] == ["z"]
    assert [r.secret for r in caplog.records] == ["y"]


def test_dangling_secret_reference_is_skipped(logger, target):
    store = ManifestObjectStore([
        make_service_account("sa", ["gone", "gcscred"]),
        make_secret("gcscred", GCS_DATA),
    ])
    CredentialBuilder(store, logger=logger).inject_credentials(
        ServiceAccountIdentity("ns1", "sa"), target)
    assert [v["name"] for v in target.volumes] == ["gcscred"]


def test_unrecognized_secret_logged_at_debug(builder, target, caplog):
    with caplog.at_level(logging.DEBUG, logger="storagecreds.test"):
        builder.inject_credentials(ServiceAccountIdentity("ns1", "default"), target)
    skipped = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert [r.secret for r in skipped] == ["other"]
    assert skipped[0].backend == "unrecognized"


def test_overlay_key_used_for_classification(logger, target):
    store = ManifestObjectStore([
        make_service_account("default", ["custom"]),
        make_secret("custom", {"custom-key": "AKIA"}),
    ])
    config = CredentialConfig(s3=S3Config(s3_access_key_id_name="custom-key"))
    CredentialBuilder(store, config, logger=logger).inject_credentials(
        ServiceAccountIdentity("ns1"), target)
    assert target.container["env"][0]["valueFrom"]["secretKeyRef"] == {
        "name": "custom", "key": "custom-key"}


def test_account_without_secrets(logger, target):
    store = ManifestObjectStore([make_service_account("default", [])])
    CredentialBuilder(store, logger=logger).inject_credentials(
        ServiceAccountIdentity("ns1"), target)
    assert target.volumes == []
    assert "env" not in target.container


def test_two_gcs_secrets_are_not_deduplicated(logger, target):
    # Current behaviour: both secrets mount at /var/secrets/ and both set
    # GOOGLE_APPLICATION_CREDENTIALS. Kept until deduplication is decided.
    store = ManifestObjectStore([
        make_service_account("default", ["gcs-a", "gcs-b"]),
        make_secret("gcs-a", GCS_DATA),
        make_secret("gcs-b", GCS_DATA),
    ])
    CredentialBuilder(store, logger=logger).inject_credentials(
        ServiceAccountIdentity("ns1"), target)
    assert [v["name"] for v in target.volumes] == ["gcs-a", "gcs-b"]
    assert [m["mountPath"] for m in target.container["volumeMounts"]] == [
        "/var/secrets/", "/var/secrets/"]
    assert [e["name"] for e in target.container["env"]] == [
        "GOOGLE_APPLICATION_CREDENTIALS", "GOOGLE_APPLICATION_CREDENTIALS"]


def test_secrets_refetched_on_every_call(logger):
    store = ManifestObjectStore([make_service_account("default", ["cred"])])
    builder = CredentialBuilder(store, logger=logger)
    first = InjectionTarget(container={})
    builder.inject_credentials(ServiceAccountIdentity("ns1"), first)
    assert first.volumes == []

    store.add(make_secret("cred", GCS_DATA))
    second = InjectionTarget(container={})
    builder.inject_credentials(ServiceAccountIdentity("ns1"), second)
    assert [v["name"] for v in second.volumes] == ["cred"]


def test_default_logger_name(mixed_store):
    assert CredentialBuilder(mixed_store).logger.name == "storagecreds"


def test_not_found_error_fields():
    err = ObjectNotFoundError("Secret", "ns1", "s3cred")
    assert (err.kind, err.namespace, err.name) == ("Secret", "ns1", "s3cred")
    assert "ns1/s3cred" in str(err)
