# -*- encoding: utf-8 -*-
"""
Consent-screen claims projection.

- Claims trees: requested claims with values replaced by {} markers
- Purposes: (claim, purpose) pairs from OIDC4IDA verified_claims
- Identity assurance summary for the authorization page
"""

from .requested_claims import (
    ClaimsTree,
    build_requested_claims,
)

from .purpose import (
    ClaimNamePurposePair,
    VERIFIED_CLAIMS,
    extract_purpose,
    extract_claim_name_purpose_pair,
    extract_requested_claims_from_object,
    extract_requested_claims_from_array,
    extract_requested_claims,
)

from .identity_assurance import (
    IdentityAssurance,
    build_identity_assurance,
)

__all__ = [
    # Claims tree
    "ClaimsTree",
    "build_requested_claims",
    # Purposes
    "ClaimNamePurposePair",
    "VERIFIED_CLAIMS",
    "extract_purpose",
    "extract_claim_name_purpose_pair",
    "extract_requested_claims_from_object",
    "extract_requested_claims_from_array",
    "extract_requested_claims",
    # Identity assurance
    "IdentityAssurance",
    "build_identity_assurance",
]
