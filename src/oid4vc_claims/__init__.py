# -*- encoding: utf-8 -*-
"""
oid4vc-claims - Claims projection for OpenID authorization servers

Turns the raw JSON an authorization server receives into the small
structures its consent screen and credential issuer need.

Key Insight:
    A claims request says WHICH claims are wanted and WHY, but arrives as
    arbitrary JSON. The consent screen only needs the shape; the issuer
    only needs what the access token permits.

Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                consent                                  │
    │  - Claims trees ({} markers) for display                │
    │  - verified_claims (claim, purpose) pairs               │
    │  - Identity assurance summary                           │
    └─────────────────────────────────────────────────────────┘
    ┌─────────────────────────────────────────────────────────┐
    │                mdoc                                     │
    │  - User attributes -> doctype/namespace claims          │
    │  - Permission check against issuable credentials        │
    │  - Claims to issue, with issue/expiry dates             │
    └─────────────────────────────────────────────────────────┘
    ┌─────────────────────────────────────────────────────────┐
    │                enums                                    │
    │  - Prompt (bit-mask conversion)                         │
    │  - ClientAuthMethod (classification flags)              │
    └─────────────────────────────────────────────────────────┘

Usage:
    from oid4vc_claims import build_requested_claims, extract_requested_claims

    build_requested_claims({"a": 1, "b": {"c": 2}})
    # {"a": {}, "b": {"c": {}}}

    extract_requested_claims('{"verified_claims": {"claims": {"given_name": null}}}')
    # [ClaimNamePurposePair(key="given_name", value=None)]
"""

from oid4vc_claims.errors import (
    Oid4vcClaimsError,
    BadRequestError,
    ClaimsMapperConfigError,
)

from oid4vc_claims.json_kind import (
    JsonKind,
    classify,
    is_object,
    is_array,
    is_present,
)

from oid4vc_claims.enums import (
    Prompt,
    AuthMethodFlag,
    ClientAuthMethod,
)

from oid4vc_claims.consent import (
    ClaimsTree,
    build_requested_claims,
    ClaimNamePurposePair,
    extract_purpose,
    extract_claim_name_purpose_pair,
    extract_requested_claims_from_object,
    extract_requested_claims_from_array,
    extract_requested_claims,
    IdentityAssurance,
    build_identity_assurance,
)

from oid4vc_claims.mdoc import (
    ClaimsMapper,
    Mdoc,
    Mdocs,
    FederationProtocol,
    MapUserAttributesToMdoc,
    map_attributes,
    create_map_user_attributes_to_mdoc,
    build_mdoc_claims,
    compute_credential_duration,
    mdoc_check_permissions,
    mdoc_build_requested_credential,
    create_mdoc_claims_getter,
    mdoc_collect_claims,
)

from oid4vc_claims.config import (
    DEFAULT_OIDC_CLAIMS_MAPPER,
    DEFAULT_SAML2_CLAIMS_MAPPER,
    ClaimsMapperConfig,
    load_claims_mapper,
    validate_claims_mapper,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "Oid4vcClaimsError",
    "BadRequestError",
    "ClaimsMapperConfigError",
    # JSON kinds
    "JsonKind",
    "classify",
    "is_object",
    "is_array",
    "is_present",
    # Enums
    "Prompt",
    "AuthMethodFlag",
    "ClientAuthMethod",
    # Consent
    "ClaimsTree",
    "build_requested_claims",
    "ClaimNamePurposePair",
    "extract_purpose",
    "extract_claim_name_purpose_pair",
    "extract_requested_claims_from_object",
    "extract_requested_claims_from_array",
    "extract_requested_claims",
    "IdentityAssurance",
    "build_identity_assurance",
    # mdoc
    "ClaimsMapper",
    "Mdoc",
    "Mdocs",
    "FederationProtocol",
    "MapUserAttributesToMdoc",
    "map_attributes",
    "create_map_user_attributes_to_mdoc",
    "build_mdoc_claims",
    "compute_credential_duration",
    "mdoc_check_permissions",
    "mdoc_build_requested_credential",
    "create_mdoc_claims_getter",
    "mdoc_collect_claims",
    # Configuration
    "DEFAULT_OIDC_CLAIMS_MAPPER",
    "DEFAULT_SAML2_CLAIMS_MAPPER",
    "ClaimsMapperConfig",
    "load_claims_mapper",
    "validate_claims_mapper",
]
