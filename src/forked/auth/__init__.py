"""Authentication primitives."""

from forked.auth.credentials import CredentialStore

__all__ = ["CredentialStore"]
