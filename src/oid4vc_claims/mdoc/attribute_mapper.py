# -*- encoding: utf-8 -*-
"""
User Attributes to mdoc Claims Mapping.

Maps a flat bag of user attributes, as resolved from the user directory
after an OIDC or SAML2 federated login, into the nested structure of mdoc
(ISO/IEC 18013-5) claims:

    doctype -> namespace -> claim name -> value

Which attribute feeds which claim is configured per source protocol by a
claims mapper table of the same shape whose leaves are attribute keys:

    {"org.iso.18013.5.1.mDL": {"org.iso.18013.5.1": {"family_name": "familyName"}}}

Key mappings:
    - Every doctype and namespace of the table appears in the result, even
      when none of its claims matched ({} namespace)
    - A claim appears only if its attribute key is present in the bag;
      present-but-falsy values (False, 0, "", None) are copied
    - Values are copied verbatim; one attribute may feed several claims
"""

from enum import Enum
from typing import Any, Callable, Mapping, Union

# doctype -> namespace -> claim name -> attribute key
ClaimsMapper = dict[str, dict[str, dict[str, str]]]

# namespace -> claim name -> value
Mdoc = dict[str, dict[str, Any]]

# doctype -> Mdoc
Mdocs = dict[str, Mdoc]


class FederationProtocol(str, Enum):
    """Protocol the user attributes were obtained with."""
    OIDC = "oidc"
    SAML2 = "saml2"


MapUserAttributesToMdoc = Callable[
    [Mapping[str, Any], Union[FederationProtocol, str]], Mdocs
]


def map_attributes(
    user_attributes: Mapping[str, Any],
    claims_mapper: Mapping[str, Mapping[str, Mapping[str, str]]],
) -> Mdocs:
    """
    Map user attributes through one claims mapper table.

    Args:
        user_attributes: Flat attribute bag
        claims_mapper: doctype -> namespace -> claim -> attribute key

    Returns:
        Mdocs with the same doctypes and namespaces as the table
    """
    result: Mdocs = {}
    for doctype, namespaces in claims_mapper.items():
        result[doctype] = {}
        for namespace, claims in namespaces.items():
            sub_claims: dict[str, Any] = {}
            for claim, attribute in claims.items():
                if attribute in user_attributes:
                    sub_claims[claim] = user_attributes[attribute]
            result[doctype][namespace] = sub_claims
    return result


def create_map_user_attributes_to_mdoc(
    oidc_claims_mapper: Mapping[str, Mapping[str, Mapping[str, str]]],
    saml2_claims_mapper: Mapping[str, Mapping[str, Mapping[str, str]]],
) -> MapUserAttributesToMdoc:
    """
    Create the attribute mapping function for a pair of mapper tables.

    The tables are read, never modified; the returned function can be
    created once at startup and shared.

    Args:
        oidc_claims_mapper: Table for attributes from OIDC federation
        saml2_claims_mapper: Table for attributes from SAML2 federation

    Returns:
        map_user_attributes_to_mdoc(user_attributes, protocol) -> Mdocs,
        using the OIDC table for protocol "oidc" and the SAML2 table
        otherwise
    """

    def map_user_attributes_to_mdoc(
        user_attributes: Mapping[str, Any],
        protocol: Union[FederationProtocol, str],
    ) -> Mdocs:
        if protocol == FederationProtocol.OIDC:
            claims_mapper = oidc_claims_mapper
        else:
            claims_mapper = saml2_claims_mapper
        return map_attributes(user_attributes, claims_mapper)

    return map_user_attributes_to_mdoc
