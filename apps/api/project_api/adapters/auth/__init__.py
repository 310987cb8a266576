"""Caller identity verifier adapters."""

from .base import CallerIdentityVerifier, IdentityVerificationError
from .uuid_header import UuidHeaderIdentityVerifier

__all__ = [
    "CallerIdentityVerifier",
    "IdentityVerificationError",
    "UuidHeaderIdentityVerifier",
]
