# -*- encoding: utf-8 -*-
"""
Exception types.

Consent-side extraction never raises: malformed data degrades to None.
Issuance-side operations reject bad credential requests with
BadRequestError, which carries an OAuth error code and description.
"""

from typing import Any


class Oid4vcClaimsError(Exception):
    """Base class for errors raised by oid4vc_claims."""


class BadRequestError(Oid4vcClaimsError):
    """
    A credential request the issuer must reject.

    Mirrors the OAuth 2.0 error response: `error` is the error code
    (e.g. "invalid_credential_request") and `error_description` the
    human-readable explanation.
    """

    def __init__(self, error: str, error_description: str):
        super().__init__(error_description)
        self.error = error
        self.error_description = error_description

    def to_dict(self) -> dict[str, Any]:
        """Serialize as an OAuth error response body."""
        return {
            "error": self.error,
            "error_description": self.error_description,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BadRequestError):
            return NotImplemented
        return (
            self.error == other.error
            and self.error_description == other.error_description
        )

    def __hash__(self) -> int:
        return hash((self.error, self.error_description))


class ClaimsMapperConfigError(Oid4vcClaimsError, ValueError):
    """A claims mapper table is missing, unreadable or malformed."""
