# -*- encoding: utf-8 -*-
"""
Requested credential completion.

A wallet may request an mdoc without listing claims. The request is then
completed with every claim of the issuable credential, expressed as a
claims tree ({} markers instead of values).
"""

from typing import Any, Mapping, Optional

from ..consent.requested_claims import build_requested_claims
from ..json_kind import is_present
from .constants import CLAIMS


def mdoc_build_requested_credential(
    issuable_credential: Optional[Mapping[str, Any]],
    requested_credential: Optional[Mapping[str, Any]],
) -> dict[str, Any]:
    """
    Build the credential to issue for a request.

    Args:
        issuable_credential: Credential permitted by the access token
        requested_credential: Credential requested by the wallet

    Returns:
        The requested credential, with claims taken from the issuable
        credential when the request has none. Inputs are not modified.
    """
    if issuable_credential is None and requested_credential is None:
        return {}

    if issuable_credential is None:
        return dict(requested_credential)

    if requested_credential is None:
        return {CLAIMS: build_requested_claims(issuable_credential.get(CLAIMS))}

    issuable_claims = issuable_credential.get(CLAIMS)
    requested_claims = requested_credential.get(CLAIMS)

    if not is_present(issuable_claims) and not is_present(requested_claims):
        return {}

    if not is_present(requested_claims):
        credential = dict(requested_credential)
        credential[CLAIMS] = build_requested_claims(issuable_claims)
        return credential

    return dict(requested_credential)
