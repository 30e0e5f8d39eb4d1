"""Cluster object stores — where ServiceAccounts, Secrets and ConfigMaps come from.

Every store returns manifest-shaped dicts (camelCase keys, as rendered by
``kubectl get -o yaml``) and raises ObjectNotFoundError / ObjectStoreError.
"""

import logging
from pathlib import Path

import urllib3
import yaml
from kubernetes import client, config
from kubernetes.client.rest import ApiException

from storagecreds.core.constants import CONFIG_MAP_KIND, SECRET_KIND, SERVICE_ACCOUNT_KIND
from storagecreds.pacts.errors import ObjectNotFoundError, ObjectStoreError
from storagecreds.pacts.helpers import fold_string_data

logger = logging.getLogger(__name__)


class ObjectStore:
    """Base class for get-by-namespaced-name lookups."""

    def get(self, kind: str, namespace: str, name: str) -> dict:
        raise NotImplementedError

    def get_service_account(self, namespace: str, name: str) -> dict:
        return self.get(SERVICE_ACCOUNT_KIND, namespace, name)

    def get_secret(self, namespace: str, name: str) -> dict:
        return self.get(SECRET_KIND, namespace, name)

    def get_config_map(self, namespace: str, name: str) -> dict:
        return self.get(CONFIG_MAP_KIND, namespace, name)


class ManifestObjectStore(ObjectStore):
    """In-memory store indexed from manifest dicts.

    Manifests without a namespace are filed under *default_namespace*.
    Secret stringData is folded into data so lookups see what the API
    server would return.
    """

    def __init__(self, manifests: list[dict] | None = None,
                 default_namespace: str = "default"):
        self.default_namespace = default_namespace
        self._objects: dict[tuple[str, str, str], dict] = {}
        for manifest in manifests or []:
            self.add(manifest)

    def add(self, manifest: dict) -> None:
        meta = manifest.get("metadata") or {}
        name = meta.get("name", "")
        if not name:
            return
        kind = manifest.get("kind", "")
        namespace = meta.get("namespace") or self.default_namespace
        if kind == SECRET_KIND:
            manifest = fold_string_data(manifest)
        self._objects[(kind, namespace, name)] = manifest

    def get(self, kind: str, namespace: str, name: str) -> dict:
        try:
            return self._objects[(kind, namespace, name)]
        except KeyError:
            raise ObjectNotFoundError(kind, namespace, name) from None

    @classmethod
    def from_directory(cls, directory: str,
                       default_namespace: str = "default") -> "ManifestObjectStore":
        """Load every YAML document under *directory* (recursively)."""
        store = cls(default_namespace=default_namespace)
        root = Path(directory)
        files = sorted(list(root.rglob("*.yaml")) + list(root.rglob("*.yml")))
        for yaml_file in files:
            try:
                with open(yaml_file, encoding="utf-8") as f:
                    for doc in yaml.safe_load_all(f):
                        if not doc or not isinstance(doc, dict):
                            continue
                        store.add(doc)
            except (yaml.YAMLError, UnicodeDecodeError) as exc:
                logger.warning("Skipping %s: %s", yaml_file.name,
                               exc.__class__.__name__,
                               extra={"file": str(yaml_file)})
        return store


class KubernetesObjectStore(ObjectStore):
    """Live lookups through the Kubernetes CoreV1 API."""

    def __init__(self, api: client.CoreV1Api | None = None):
        self._api = api or client.CoreV1Api()
        self._readers = {
            SERVICE_ACCOUNT_KIND: self._api.read_namespaced_service_account,
            SECRET_KIND: self._api.read_namespaced_secret,
            CONFIG_MAP_KIND: self._api.read_namespaced_config_map,
        }

    @classmethod
    def from_environment(cls) -> "KubernetesObjectStore":
        """Use in-cluster credentials, falling back to the local kubeconfig."""
        try:
            config.load_incluster_config()
        except config.ConfigException:
            config.load_kube_config()
        return cls()

    def get(self, kind: str, namespace: str, name: str) -> dict:
        reader = self._readers.get(kind)
        if reader is None:
            raise ObjectStoreError(f"unsupported kind '{kind}'")
        try:
            obj = reader(name, namespace)
        except ApiException as exc:
            if exc.status == 404:
                raise ObjectNotFoundError(kind, namespace, name) from exc
            raise ObjectStoreError(
                f"failed to read {kind} '{namespace}/{name}': {exc.status} {exc.reason}"
            ) from exc
        except (urllib3.exceptions.HTTPError, OSError) as exc:
            raise ObjectStoreError(
                f"failed to read {kind} '{namespace}/{name}': {exc}"
            ) from exc
        return self._api.api_client.sanitize_for_serialization(obj)
