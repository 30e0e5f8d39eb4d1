"""CredentialBuilder — resolve a ServiceAccount's secrets and inject storage credentials."""

import logging

from storagecreds.core.classify import classify
from storagecreds.core.mutate import apply_credentials
from storagecreds.io.config import credential_config_from_configmap
from storagecreds.io.stores import ObjectStore
from storagecreds.pacts.errors import ObjectStoreError
from storagecreds.pacts.helpers import secret_data, secret_ref_names
from storagecreds.pacts.types import (
    Classification, CredentialConfig, InjectionTarget,
    SecretReference, ServiceAccountIdentity,
)


class CredentialBuilder:
    """Attach S3 / GCS credentials from a ServiceAccount's secrets to a container.

    Lookup failures never propagate: a missing ServiceAccount means nothing
    is injected, and a secret that cannot be fetched is skipped. Existing
    deployments rely on this, so the only observable symptom is missing
    env vars / volumes (plus the log events).
    """

    def __init__(self, store: ObjectStore, config: CredentialConfig | None = None,
                 logger: logging.Logger | None = None):
        self.store = store
        self.config = config or CredentialConfig()
        self.logger = logger or logging.getLogger("storagecreds")

    @classmethod
    def from_configmap(cls, store: ObjectStore, configmap: dict,
                       logger: logging.Logger | None = None) -> "CredentialBuilder":
        """Build from a ConfigMap. Raises CredentialConfigError on a malformed overlay."""
        return cls(store, credential_config_from_configmap(configmap), logger=logger)

    def inject_credentials(self, identity: ServiceAccountIdentity,
                           target: InjectionTarget) -> None:
        """Append credentials for every recognized secret of *identity* to *target*."""
        try:
            service_account = self.store.get_service_account(identity.namespace, identity.name)
        except ObjectStoreError as exc:
            self.logger.error("Failed to find service account %s: %s", identity.name, exc,
                              extra={"service_account": identity.name,
                                     "namespace": identity.namespace})
            return

        for name in secret_ref_names(service_account):
            ref = SecretReference(namespace=identity.namespace, name=name)
            try:
                secret = self.store.get_secret(ref.namespace, ref.name)
            except ObjectStoreError as exc:
                self.logger.error("Failed to find secret %s: %s", ref.name, exc,
                                  extra={"secret": ref.name, "namespace": ref.namespace})
                continue
            self._apply(secret, ref, target)

    def _apply(self, secret: dict, ref: SecretReference, target: InjectionTarget) -> None:
        classification = classify(secret_data(secret), self.config)
        extra = {"secret": ref.name, "namespace": ref.namespace,
                 "backend": classification.value}
        if classification is Classification.S3:
            self.logger.info("Setting secret envs for s3 from %s", ref.name, extra=extra)
        elif classification is Classification.GCS:
            self.logger.info("Setting secret volume for gcs from %s", ref.name, extra=extra)
        else:
            self.logger.debug("Skipping non gcs/s3 secret %s", ref.name, extra=extra)
        apply_credentials(classification, secret, self.config, target)

    def create_secret_volume_and_env(self, namespace: str, service_account_name: str,
                                     container: dict, volumes: list) -> None:
        """Inject into a bare container dict and pod volume list.

        An empty *service_account_name* means the namespace's ``default`` account.
        """
        self.inject_credentials(
            ServiceAccountIdentity(namespace=namespace, name=service_account_name),
            InjectionTarget(container=container, volumes=volumes),
        )
