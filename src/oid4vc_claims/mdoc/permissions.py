# -*- encoding: utf-8 -*-
"""
mdoc Credential Permissions.

An access token lists the credentials it allows to be issued
("issuable credentials"). A credential request is permitted if one of
them has format mso_mdoc, the requested doctype, and at least every
requested claim:

    issuable:  {"format": "mso_mdoc", "doctype": "org.iso.18013.5.1.mDL",
                "claims": {"org.iso.18013.5.1": {"family_name": {}, "age": {}}}}
    requested: {"doctype": "org.iso.18013.5.1.mDL",
                "claims": {"org.iso.18013.5.1": {"age": {}}}}   -> permitted
"""

from typing import Any, Mapping, Optional, Sequence

from ..errors import BadRequestError
from ..json_kind import is_array, is_object
from .constants import CLAIMS, DOCTYPE, FORMAT, INVALID_CREDENTIAL_REQUEST, MSO_MDOC

# namespace -> claim -> nested claim; deeper keys are not compared
DEFAULT_MAX_RECURSION_DEPTH = 3


def contains_all_properties(
    source: Mapping[str, Any],
    target: Mapping[str, Any],
    max_recursion_depth: int,
    current_recursion_depth: int = 1,
) -> bool:
    """
    Check that source has every key path of target.

    Comparison descends into object values of target until
    max_recursion_depth is reached. Values themselves are not compared.

    Args:
        source: Object that must contain the keys
        target: Object whose keys are required
        max_recursion_depth: Deepest level compared
        current_recursion_depth: Level of source/target (1 at the top)

    Returns:
        True if all keys of target are present in source
    """
    for key, target_value in target.items():
        if key not in source:
            return False

        if current_recursion_depth == max_recursion_depth or not is_object(target_value):
            continue

        source_value = source[key]
        if not is_object(source_value):
            return False

        if not contains_all_properties(
            source_value,
            target_value,
            max_recursion_depth,
            current_recursion_depth + 1,
        ):
            return False

    return True


def _get(credential: Any, field: str) -> Any:
    return credential.get(field) if is_object(credential) else None


def match_format(credential: Optional[Mapping[str, Any]], credential_format: str) -> bool:
    """True if the credential has the given format."""
    value = _get(credential, FORMAT)
    return bool(value) and value == credential_format


def match_doctype(
    issuable_credential: Optional[Mapping[str, Any]],
    requested_credential: Optional[Mapping[str, Any]],
) -> bool:
    """True if both credentials carry the same non-empty doctype."""
    issuable_doctype = _get(issuable_credential, DOCTYPE)
    requested_doctype = _get(requested_credential, DOCTYPE)
    return bool(issuable_doctype) and issuable_doctype == requested_doctype


def contains_requested_mdoc_claims(
    issuable_credential: Optional[Mapping[str, Any]],
    requested_credential: Optional[Mapping[str, Any]],
    max_recursion_depth: int = DEFAULT_MAX_RECURSION_DEPTH,
) -> bool:
    """
    Check that the issuable credential covers the requested claims.

    An issuable credential without claims covers nothing; a request
    without claims is covered by any issuable credential with claims.
    """
    issuable_claims = _get(issuable_credential, CLAIMS)
    requested_claims = _get(requested_credential, CLAIMS)

    if not is_object(issuable_claims):
        return False

    if not is_object(requested_claims):
        return True

    return contains_all_properties(
        issuable_claims,
        requested_claims,
        max_recursion_depth,
        1,
    )


def mdoc_check_permissions(
    issuable_credentials: Optional[Sequence[Mapping[str, Any]]],
    requested_credential: Optional[Mapping[str, Any]],
    max_recursion_depth: int = DEFAULT_MAX_RECURSION_DEPTH,
) -> Mapping[str, Any]:
    """
    Check that an mdoc credential request is permitted by the access token.

    Args:
        issuable_credentials: Credentials the access token allows
        requested_credential: Credential requested by the wallet

    Returns:
        The first issuable credential permitting the request

    Raises:
        BadRequestError: No issuable credentials, or none permits the request
    """
    if not is_array(issuable_credentials) or not issuable_credentials:
        raise BadRequestError(
            INVALID_CREDENTIAL_REQUEST,
            "No credential can be issued with the access token.",
        )

    for issuable_credential in issuable_credentials:
        if (
            match_format(issuable_credential, MSO_MDOC)
            and match_doctype(issuable_credential, requested_credential)
            and contains_requested_mdoc_claims(
                issuable_credential, requested_credential, max_recursion_depth
            )
        ):
            return issuable_credential

    raise BadRequestError(
        INVALID_CREDENTIAL_REQUEST,
        "The access token does not have permissions to request the credential.",
    )
