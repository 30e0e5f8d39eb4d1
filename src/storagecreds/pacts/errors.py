"""Exceptions raised by storagecreds.

Only CredentialConfigError is meant to reach callers of the builder;
store errors are absorbed per item during injection.
"""


class CredentialError(Exception):
    """Base class for all storagecreds errors."""


class CredentialConfigError(CredentialError):
    """The credential overlay could not be parsed."""


class ObjectStoreError(CredentialError):
    """A cluster object could not be fetched."""


class ObjectNotFoundError(ObjectStoreError):
    """The requested cluster object does not exist."""

    def __init__(self, kind: str, namespace: str, name: str):
        super().__init__(f"{kind} '{namespace}/{name}' not found")
        self.kind = kind
        self.namespace = namespace
        self.name = name
