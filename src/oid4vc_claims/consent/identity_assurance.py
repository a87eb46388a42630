# -*- encoding: utf-8 -*-
"""
Identity assurance summary for the consent screen.

Collects the verified claims requested for the ID token and for the
UserInfo response, together with the overall `purpose` of the request.
Identity assurance is required as soon as any of them is present.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .purpose import ClaimNamePurposePair, extract_requested_claims


@dataclass(frozen=True)
class IdentityAssurance:
    """Verified-claims part of the authorization page model."""
    purpose: Optional[str] = None
    verified_claims_for_id_token: Optional[list[ClaimNamePurposePair]] = None
    verified_claims_for_userinfo: Optional[list[ClaimNamePurposePair]] = None

    @property
    def identity_assurance_required(self) -> bool:
        """True if a purpose or any verified claims were requested."""
        return (
            self.purpose is not None
            or self.verified_claims_for_id_token is not None
            or self.verified_claims_for_userinfo is not None
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "purpose": self.purpose,
            "verified_claims_for_id_token": _pairs_to_list(self.verified_claims_for_id_token),
            "verified_claims_for_userinfo": _pairs_to_list(self.verified_claims_for_userinfo),
            "identity_assurance_required": self.identity_assurance_required,
        }


def _pairs_to_list(pairs: Optional[list[ClaimNamePurposePair]]) -> Optional[list[dict]]:
    if pairs is None:
        return None
    return [pair.to_dict() for pair in pairs]


def build_identity_assurance(
    purpose: Optional[str] = None,
    id_token_claims: Optional[str] = None,
    userinfo_claims: Optional[str] = None,
) -> IdentityAssurance:
    """
    Build the identity assurance summary of an authorization request.

    Args:
        purpose: `purpose` request parameter
        id_token_claims: JSON claims request for the ID token
        userinfo_claims: JSON claims request for the UserInfo response

    Returns:
        IdentityAssurance for the consent screen
    """
    return IdentityAssurance(
        purpose=purpose,
        verified_claims_for_id_token=extract_requested_claims(id_token_claims),
        verified_claims_for_userinfo=extract_requested_claims(userinfo_claims),
    )
