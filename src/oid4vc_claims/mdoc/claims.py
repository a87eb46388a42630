# -*- encoding: utf-8 -*-
"""
mdoc Claims Building.

Builds the claims of an mdoc credential to issue from the claims known
for the user and the claims requested by the wallet. Only requested
claims are issued. The issuer fills in `issue_date` and `expiry_date`
itself when they are requested; dates are CBOR full-date values (tag
1004) in the textual form the credential API accepts:

    cbor:1004("2024-01-01")

Credentials are valid for one calendar year from issuance.
"""

from datetime import date, datetime, timezone
from typing import Any, Mapping, Optional

from ..errors import BadRequestError
from ..json_kind import is_object
from .constants import EXPIRY_DATE, INVALID_CREDENTIAL_REQUEST, ISSUE_DATE

Claims = dict[str, Any]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_cbor_date(value: date) -> str:
    """
    Format a date as a CBOR full-date (tag 1004).

    Args:
        value: date or datetime; only the calendar date is used

    Returns:
        String of the form cbor:1004("YYYY-MM-DD")
    """
    return f'cbor:1004("{value.strftime("%Y-%m-%d")}")'


def next_year(moment: datetime) -> datetime:
    """
    Same instant one calendar year later.

    February 29 has no counterpart in the following year and rolls over
    to March 1.
    """
    try:
        return moment.replace(year=moment.year + 1)
    except ValueError:
        return moment.replace(year=moment.year + 1, month=3, day=1)


def compute_credential_duration(now: Optional[datetime] = None) -> int:
    """
    Validity period of an mdoc credential issued now.

    Args:
        now: Issuance time (default: current UTC time)

    Returns:
        Whole seconds from now until the same instant next year
    """
    now = now or _utcnow()
    return int((next_year(now) - now).total_seconds())


def add_mdoc_date_claims(
    sub_claims: Claims,
    requested_sub_claims: Optional[Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> None:
    """
    Add issue_date and expiry_date to sub-claims if they are requested.

    Modifies sub_claims in place; other entries are left untouched.

    Args:
        sub_claims: Claims of one namespace being built
        requested_sub_claims: Requested claims of that namespace
        now: Issuance time (default: current UTC time)
    """
    if not requested_sub_claims:
        return

    now = now or _utcnow()

    if ISSUE_DATE in requested_sub_claims:
        sub_claims[ISSUE_DATE] = format_cbor_date(now)

    if EXPIRY_DATE in requested_sub_claims:
        sub_claims[EXPIRY_DATE] = format_cbor_date(next_year(now))


def build_mdoc_sub_claims(
    user_sub_claims: Mapping[str, Any],
    requested_sub_claims: Optional[Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> Claims:
    """
    Build the claims of one namespace.

    Args:
        user_sub_claims: Claims known for the user in this namespace
        requested_sub_claims: Requested claims of this namespace, or None
            to issue everything known
        now: Issuance time for date claims

    Returns:
        Requested claims that have a user value, plus requested date
        claims. With no requested claims, all user claims.
    """
    sub_claims: Claims = {}
    add_mdoc_date_claims(sub_claims, requested_sub_claims, now)

    if requested_sub_claims is None:
        return {**user_sub_claims, **sub_claims}

    for claim_name in requested_sub_claims:
        if claim_name in user_sub_claims:
            sub_claims[claim_name] = user_sub_claims[claim_name]

    return sub_claims


def build_mdoc_claims(
    user_claims: Mapping[str, Any],
    requested_claims: Optional[Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> Claims:
    """
    Build mdoc claims from user claims and requested claims.

    Requested namespaces the user has no claims for are left out. A
    namespace requested as null issues all of its user claims; one
    requested as anything but an object (a list, a string) issues none.

    Args:
        user_claims: namespace -> claims known for the user
        requested_claims: namespace -> requested claims
        now: Issuance time for date claims

    Returns:
        namespace -> issued claims

    Raises:
        BadRequestError: No claims were requested
    """
    if not requested_claims:
        raise BadRequestError(
            INVALID_CREDENTIAL_REQUEST,
            "No requested claims provided",
        )

    claims: Claims = {}
    for namespace, requested_sub_claims in requested_claims.items():
        if namespace not in user_claims:
            continue
        # a list, string or boolean names no claim
        if requested_sub_claims is not None and not is_object(requested_sub_claims):
            requested_sub_claims = {}
        claims[namespace] = build_mdoc_sub_claims(
            user_claims[namespace],
            requested_sub_claims,
            now,
        )
    return claims
