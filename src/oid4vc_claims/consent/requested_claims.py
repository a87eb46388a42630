# -*- encoding: utf-8 -*-
"""
Requested Claims Tree.

Builds a claims-name tree from an arbitrary JSON value: the tree keeps
every object-valued key path of the input and replaces every other value
with an empty marker `{}`. The markers mean "this claim is requested"
without carrying the original value, which is the shape OID4VCI uses for
the `claims` of a credential request:

    {"org.iso.18013.5.1": {"family_name": "Doe", "age": 42}}
        -> {"org.iso.18013.5.1": {"family_name": {}, "age": {}}}
"""

from typing import Any

from ..json_kind import JsonKind, classify

ClaimsTree = dict[str, "ClaimsTree"]


def build_requested_claims(value: Any) -> ClaimsTree:
    """
    Build a claims tree from a JSON value.

    Only a JSON object yields a non-empty tree. None, arrays and scalars
    yield {}. Within an object, object values are walked recursively and
    all other values (strings, numbers, booleans, null, arrays) become {}.

    Args:
        value: Decoded JSON value

    Returns:
        Claims tree; keys follow the insertion order of the input
    """
    if classify(value) is not JsonKind.OBJECT:
        return {}

    tree: ClaimsTree = {}
    for key, child in value.items():
        if classify(child) is JsonKind.OBJECT:
            tree[key] = build_requested_claims(child)
        else:
            tree[key] = {}
    return tree
