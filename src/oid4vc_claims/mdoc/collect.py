# -*- encoding: utf-8 -*-
"""
mdoc Claims Collection.

Collects the claims of an mdoc credential for a subject at issuance time:

    1. Resolve the subject's attributes from the user directory
    2. Map them into mdoc claims for the login protocol (attribute_mapper)
    3. Pick the requested doctype
    4. Keep the requested claims and add issuer date claims (claims)

The user directory is a collaborator passed in as a callable.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Union

from ..errors import BadRequestError
from ..json_kind import is_object
from .attribute_mapper import FederationProtocol, MapUserAttributesToMdoc, Mdoc
from .claims import build_mdoc_claims
from .constants import CLAIMS, DOCTYPE, INVALID_CREDENTIAL_REQUEST

logger = logging.getLogger(__name__)

GetUserAttributes = Callable[[str], Optional[Mapping[str, Any]]]
GetMdocClaims = Callable[[str, str], Optional[Mdoc]]


def create_mdoc_claims_getter(
    get_user_attributes: GetUserAttributes,
    map_user_attributes_to_mdoc: MapUserAttributesToMdoc,
    protocol: Union[FederationProtocol, str],
) -> GetMdocClaims:
    """
    Create a lookup of mdoc claims by subject and doctype.

    Args:
        get_user_attributes: subject -> attribute bag, or None if unknown
        map_user_attributes_to_mdoc: Mapping function for the deployment
        protocol: Protocol the attributes were obtained with

    Returns:
        get_mdoc_claims(subject, doctype) -> namespace claims, or None
    """

    def get_mdoc_claims(subject: str, doctype: str) -> Optional[Mdoc]:
        attributes = get_user_attributes(subject)
        if attributes is None:
            logger.debug(f"No attributes for subject {subject}")
            return None
        mdocs = map_user_attributes_to_mdoc(attributes, protocol)
        return mdocs.get(doctype)

    return get_mdoc_claims


def mdoc_collect_claims(
    subject: str,
    requested_credential: Optional[Mapping[str, Any]],
    get_mdoc_claims: GetMdocClaims,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """
    Collect the mdoc claims to issue for a subject.

    Args:
        subject: Subject of the access token
        requested_credential: Credential requested by the wallet; must
            carry a doctype
        get_mdoc_claims: Lookup of the subject's claims per doctype
        now: Issuance time for date claims

    Returns:
        {"doctype": ..., "claims": namespace -> issued claims}

    Raises:
        BadRequestError: Missing request or doctype, no claims known for
            the subject, or no claims requested
    """
    if requested_credential is None:
        raise BadRequestError(
            INVALID_CREDENTIAL_REQUEST,
            "requestedCredential is required",
        )

    doctype = requested_credential.get(DOCTYPE)
    if not doctype:
        raise BadRequestError(
            INVALID_CREDENTIAL_REQUEST,
            "doctype field is required in requestedCredential",
        )

    user_claims = get_mdoc_claims(subject, doctype)
    if user_claims is None:
        raise BadRequestError(
            INVALID_CREDENTIAL_REQUEST,
            f'No mdoc claims found for subject "{subject}" and doctype "{doctype}"',
        )

    requested_claims = requested_credential.get(CLAIMS)
    claims = build_mdoc_claims(
        user_claims,
        requested_claims if is_object(requested_claims) else None,
        now,
    )

    logger.info(f"Collected {len(claims)} namespaces of {doctype} claims for {subject}")
    return {DOCTYPE: doctype, CLAIMS: claims}
