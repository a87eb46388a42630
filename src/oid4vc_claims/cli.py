#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
oid4vc-claims CLI

Inspect claims requests and mdoc claims mapping from the command line.

Commands:
    oid4vc-claims tree [<file>]                         Claims tree of a JSON document
    oid4vc-claims purposes [<file>]                     Verified claims and purposes
    oid4vc-claims map-mdoc <file> --protocol <p> [--config <file>]
    oid4vc-claims prompt-bits <name>...                 Prompt names to bit mask
    oid4vc-claims prompt-names <bits>                   Bit mask to prompt names
    oid4vc-claims auth-method <name-or-value>           Describe a client auth method

<file> defaults to stdin ("-").
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from oid4vc_claims.config import ClaimsMapperConfig
from oid4vc_claims.consent import build_requested_claims, extract_requested_claims
from oid4vc_claims.enums import ClientAuthMethod, Prompt
from oid4vc_claims.errors import ClaimsMapperConfigError
from oid4vc_claims.json_kind import is_object
from oid4vc_claims.mdoc import FederationProtocol

logger = logging.getLogger(__name__)


def read_input(source: str) -> str:
    """Read a file, or stdin for "-"."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def print_json(value: Any) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False))


def load_json(source: str) -> Any:
    """Read and decode a JSON document; errors go to stderr as ValueError."""
    try:
        return json.loads(read_input(source))
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Cannot read {source}: {e}") from e
    except (json.JSONDecodeError, RecursionError) as e:
        raise ValueError(f"Invalid JSON in {source}: {e}") from e


def cmd_tree(args):
    """Print the claims tree of a JSON document."""
    try:
        document = load_json(args.file)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    print_json(build_requested_claims(document))
    return 0


def cmd_purposes(args):
    """Print requested verified claims and their purposes."""
    try:
        claims_json = read_input(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    pairs = extract_requested_claims(claims_json)
    if pairs is None:
        print_json(None)
    else:
        print_json([pair.to_dict() for pair in pairs])
    return 0


def cmd_map_mdoc(args):
    """Map a user attribute bag to mdoc claims."""
    try:
        attributes = load_json(args.attributes)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    if not is_object(attributes):
        print("User attributes must be a JSON object", file=sys.stderr)
        return 1

    try:
        config = ClaimsMapperConfig.from_file(args.config) if args.config else ClaimsMapperConfig.default()
    except ClaimsMapperConfigError as e:
        print(str(e), file=sys.stderr)
        return 1

    mapper = config.create_mapper()
    print_json(mapper(attributes, FederationProtocol(args.protocol)))
    return 0


def cmd_prompt_bits(args):
    """Convert prompt names to a bit mask."""
    prompts = []
    for name in args.names:
        prompt = Prompt.get_by_name(name)
        if prompt is None:
            print(f"Unknown prompt: {name}", file=sys.stderr)
            return 1
        prompts.append(prompt)

    print(Prompt.to_bits(prompts))
    return 0


def cmd_prompt_names(args):
    """Convert a bit mask to prompt names."""
    print(" ".join(prompt.wire_name for prompt in Prompt.to_array(args.bits)))
    return 0


def cmd_auth_method(args):
    """Describe a client authentication method."""
    if args.method.isdigit():
        method = ClientAuthMethod.get_by_value(int(args.method))
    else:
        method = ClientAuthMethod.get_by_name(args.method)

    if method is None:
        print(f"Unknown client authentication method: {args.method}", file=sys.stderr)
        return 1

    print(method.describe())
    return 0


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="oid4vc-claims - claims projection and mdoc claims mapping",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="oid4vc-claims 0.1.0",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # tree
    p_tree = subparsers.add_parser("tree", help="Print the claims tree of a JSON document")
    p_tree.add_argument("file", nargs="?", default="-", help="JSON file (default: stdin)")
    p_tree.set_defaults(func=cmd_tree)

    # purposes
    p_purposes = subparsers.add_parser("purposes", help="Print verified claims and purposes")
    p_purposes.add_argument("file", nargs="?", default="-", help="Claims request JSON (default: stdin)")
    p_purposes.set_defaults(func=cmd_purposes)

    # map-mdoc
    p_map = subparsers.add_parser("map-mdoc", help="Map user attributes to mdoc claims")
    p_map.add_argument("attributes", help="User attributes JSON file (- for stdin)")
    p_map.add_argument(
        "--protocol", "-p",
        required=True,
        choices=[protocol.value for protocol in FederationProtocol],
        help="Protocol the attributes came from",
    )
    p_map.add_argument("--config", "-c", help="Claims mapper configuration JSON")
    p_map.set_defaults(func=cmd_map_mdoc)

    # prompt-bits
    p_bits = subparsers.add_parser("prompt-bits", help="Convert prompt names to a bit mask")
    p_bits.add_argument("names", nargs="+", help="Prompt names, e.g. login consent")
    p_bits.set_defaults(func=cmd_prompt_bits)

    # prompt-names
    p_names = subparsers.add_parser("prompt-names", help="Convert a bit mask to prompt names")
    p_names.add_argument("bits", type=int, help="Bit mask")
    p_names.set_defaults(func=cmd_prompt_names)

    # auth-method
    p_auth = subparsers.add_parser("auth-method", help="Describe a client authentication method")
    p_auth.add_argument("method", help="Method name or integer value")
    p_auth.set_defaults(func=cmd_auth_method)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    logger.debug(f"oid4vc-claims {args.command}")

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
