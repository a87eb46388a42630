# -*- encoding: utf-8 -*-
"""
Requested Claims and Purposes.

Extracts (claim name, purpose) pairs from the `verified_claims` element
of an OpenID Connect for Identity Assurance claims request, for display
on the consent screen.

`verified_claims` comes in two shapes:

    {"verified_claims": {"verification": {...}, "claims": {...}}}
    {"verified_claims": [{"claims": {...}}, {"claims": {...}}]}

Both are handled as a list of bundles; the pairs of every bundle are
concatenated in order.

Nothing here raises. Stored claims requests are data, and malformed data
must not break consent rendering: a JSON parse failure is logged and
reported as None, and a purpose that is not a string is reported as None
for that claim only. None means "nothing to show", both when claims are
absent and when they are present but empty.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..json_kind import JsonKind, classify

logger = logging.getLogger(__name__)

VERIFIED_CLAIMS = "verified_claims"


@dataclass(frozen=True)
class ClaimNamePurposePair:
    """A requested claim and the purpose shown to the end user."""
    key: str
    value: Optional[str] = None

    def to_dict(self) -> dict[str, Optional[str]]:
        """Serialize to dictionary."""
        return {"key": self.key, "value": self.value}


def extract_purpose(container: Any) -> Optional[str]:
    """
    Get the purpose of a claim request entry.

    Args:
        container: Claim request entry, e.g. {"purpose": "To verify age"}

    Returns:
        The purpose if it is a non-empty string, else None
    """
    if classify(container) is not JsonKind.OBJECT:
        return None

    purpose = container.get("purpose")
    if classify(purpose) is JsonKind.STRING and purpose:
        return purpose
    return None


def extract_claim_name_purpose_pair(key: str, container: Any) -> ClaimNamePurposePair:
    """Pair a claim name with the purpose of its request entry."""
    return ClaimNamePurposePair(key=key, value=extract_purpose(container))


def extract_requested_claims_from_object(
    container: Any,
) -> Optional[list[ClaimNamePurposePair]]:
    """
    Extract pairs from one verified_claims bundle.

    Args:
        container: Bundle with an optional `claims` object

    Returns:
        One pair per entry of `claims` in order, or None if the bundle
        is not an object or `claims` is absent, not an object, or empty
    """
    if classify(container) is not JsonKind.OBJECT:
        return None

    claims = container.get("claims")
    if classify(claims) is not JsonKind.OBJECT or not claims:
        return None

    return [
        extract_claim_name_purpose_pair(key, entry)
        for key, entry in claims.items()
    ]


def extract_requested_claims_from_array(
    containers: Iterable[Any],
) -> Optional[list[ClaimNamePurposePair]]:
    """
    Extract pairs from a list of verified_claims bundles.

    Bundles yielding None are skipped.

    Returns:
        Concatenated pairs in bundle order, or None if no bundle yielded any
    """
    pairs: list[ClaimNamePurposePair] = []
    for container in containers:
        from_object = extract_requested_claims_from_object(container)
        if from_object:
            pairs.extend(from_object)
    return pairs or None


def extract_requested_claims(
    claims_json: Optional[str],
) -> Optional[list[ClaimNamePurposePair]]:
    """
    Extract requested claims and their purposes from a claims request.

    Args:
        claims_json: JSON-encoded claims request, e.g. the stored value of
            the `claims` parameter for the ID token or the UserInfo response

    Returns:
        List of pairs, or None if there is nothing to show (no input,
        malformed JSON, no verified_claims, or no claims)
    """
    if not claims_json:
        return None

    try:
        document = json.loads(claims_json)
    except (TypeError, ValueError, RecursionError) as e:
        logger.error(f"Failed to parse claims request: {e}")
        return None

    if classify(document) is not JsonKind.OBJECT:
        return None

    verified_claims = document.get(VERIFIED_CLAIMS)
    kind = classify(verified_claims)

    if kind is JsonKind.ARRAY:
        return extract_requested_claims_from_array(verified_claims)
    if kind is JsonKind.OBJECT:
        return extract_requested_claims_from_array([verified_claims])
    return None
