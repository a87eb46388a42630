# -*- encoding: utf-8 -*-
"""
mdoc (ISO/IEC 18013-5) claims for credential issuance.

Provides:
- Mapping of flat user attributes to doctype/namespace-keyed mdoc claims,
  per federation protocol (OIDC, SAML2)
- Permission checks of credential requests against issuable credentials
- Completion of requests without claims from the issuable credential
- Building and collecting the claims of an mdoc to issue, including
  issuer-supplied issue and expiry dates
"""

from .constants import (
    FORMAT,
    DOCTYPE,
    CLAIMS,
    MSO_MDOC,
    MDL_DOCTYPE,
    MDL_NAMESPACE,
    ISSUE_DATE,
    EXPIRY_DATE,
    INVALID_CREDENTIAL_REQUEST,
)

from .attribute_mapper import (
    ClaimsMapper,
    Mdoc,
    Mdocs,
    FederationProtocol,
    MapUserAttributesToMdoc,
    map_attributes,
    create_map_user_attributes_to_mdoc,
)

from .claims import (
    Claims,
    format_cbor_date,
    next_year,
    compute_credential_duration,
    add_mdoc_date_claims,
    build_mdoc_sub_claims,
    build_mdoc_claims,
)

from .permissions import (
    DEFAULT_MAX_RECURSION_DEPTH,
    contains_all_properties,
    match_format,
    match_doctype,
    contains_requested_mdoc_claims,
    mdoc_check_permissions,
)

from .requested_credential import mdoc_build_requested_credential

from .collect import (
    GetUserAttributes,
    GetMdocClaims,
    create_mdoc_claims_getter,
    mdoc_collect_claims,
)

__all__ = [
    # Constants
    "FORMAT",
    "DOCTYPE",
    "CLAIMS",
    "MSO_MDOC",
    "MDL_DOCTYPE",
    "MDL_NAMESPACE",
    "ISSUE_DATE",
    "EXPIRY_DATE",
    "INVALID_CREDENTIAL_REQUEST",
    # Attribute mapping
    "ClaimsMapper",
    "Mdoc",
    "Mdocs",
    "FederationProtocol",
    "MapUserAttributesToMdoc",
    "map_attributes",
    "create_map_user_attributes_to_mdoc",
    # Claims building
    "Claims",
    "format_cbor_date",
    "next_year",
    "compute_credential_duration",
    "add_mdoc_date_claims",
    "build_mdoc_sub_claims",
    "build_mdoc_claims",
    # Permissions
    "DEFAULT_MAX_RECURSION_DEPTH",
    "contains_all_properties",
    "match_format",
    "match_doctype",
    "contains_requested_mdoc_claims",
    "mdoc_check_permissions",
    # Requested credential
    "mdoc_build_requested_credential",
    # Collection
    "GetUserAttributes",
    "GetMdocClaims",
    "create_mdoc_claims_getter",
    "mdoc_collect_claims",
]
