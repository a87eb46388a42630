# -*- encoding: utf-8 -*-
"""
Claims Mapper Configuration.

Claims mapper tables tell the attribute mapper which user attribute feeds
which mdoc claim. There is one table per federation protocol, because an
OIDC provider and a SAML2 identity provider name the same attribute
differently (`familyName` vs `urn:oid:2.5.4.4`).

Tables are deployment configuration: built-in defaults cover the mobile
driving licence, and a deployment may load its own from a JSON file:

    {
      "oidc":  {"org.iso.18013.5.1.mDL": {"org.iso.18013.5.1": {"family_name": "familyName"}}},
      "saml2": {"org.iso.18013.5.1.mDL": {"org.iso.18013.5.1": {"family_name": "urn:oid:2.5.4.4"}}}
    }

Tables are validated and copied when loaded and are read-only afterwards.
"""

import copy
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union

from .errors import ClaimsMapperConfigError
from .json_kind import JsonKind, classify
from .mdoc.attribute_mapper import (
    ClaimsMapper,
    FederationProtocol,
    MapUserAttributesToMdoc,
    create_map_user_attributes_to_mdoc,
)
from .mdoc.constants import MDL_DOCTYPE, MDL_NAMESPACE

logger = logging.getLogger(__name__)


# mDL claims from OIDC standard claims (as held by the user directory)
DEFAULT_OIDC_CLAIMS_MAPPER: ClaimsMapper = {
    MDL_DOCTYPE: {
        MDL_NAMESPACE: {
            "family_name": "familyName",
            "given_name": "givenName",
            "birth_date": "birthdate",
            "issuing_country": "issuingCountry",
            "issuing_authority": "issuingAuthority",
            "document_number": "documentNumber",
            "portrait": "picture",
            "driving_privileges": "drivingPrivileges",
            "nationality": "nationality",
            "resident_address": "streetAddress",
            "resident_city": "locality",
            "resident_postal_code": "postalCode",
            "resident_country": "country",
        },
    },
}

# mDL claims from SAML2 attributes (X.500 / PKIX attribute OIDs)
DEFAULT_SAML2_CLAIMS_MAPPER: ClaimsMapper = {
    MDL_DOCTYPE: {
        MDL_NAMESPACE: {
            "family_name": "urn:oid:2.5.4.4",
            "given_name": "urn:oid:2.5.4.42",
            "birth_date": "urn:oid:1.3.6.1.5.5.7.9.1",
            "nationality": "urn:oid:1.3.6.1.5.5.7.9.4",
            "resident_address": "urn:oid:2.5.4.9",
            "resident_city": "urn:oid:2.5.4.7",
            "resident_postal_code": "urn:oid:2.5.4.17",
            "resident_country": "urn:oid:2.5.4.6",
        },
    },
}


def validate_claims_mapper(data: Any, source: str = "<mapper>") -> ClaimsMapper:
    """
    Validate the shape of a claims mapper table.

    Args:
        data: Decoded table, doctype -> namespace -> claim -> attribute key
        source: Name used in error messages (file name, protocol)

    Returns:
        Deep copy of the table

    Raises:
        ClaimsMapperConfigError: A level is not an object or an attribute
            key is not a non-empty string; the message names the path
    """
    if classify(data) is not JsonKind.OBJECT:
        raise ClaimsMapperConfigError(f"{source}: claims mapper must be an object")

    for doctype, namespaces in data.items():
        if classify(namespaces) is not JsonKind.OBJECT:
            raise ClaimsMapperConfigError(
                f"{source}: {doctype} must map namespaces to claims"
            )
        for namespace, claims in namespaces.items():
            if classify(claims) is not JsonKind.OBJECT:
                raise ClaimsMapperConfigError(
                    f"{source}: {doctype}.{namespace} must map claims to attribute keys"
                )
            for claim, attribute in claims.items():
                if classify(attribute) is not JsonKind.STRING or not attribute:
                    raise ClaimsMapperConfigError(
                        f"{source}: {doctype}.{namespace}.{claim} must be an attribute key"
                    )

    return copy.deepcopy(dict(data))


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ClaimsMapperConfigError(f"{path}: cannot read claims mapper: {e}") from e
    except ValueError as e:
        raise ClaimsMapperConfigError(f"{path}: invalid JSON: {e}") from e


def load_claims_mapper(path: Union[str, Path]) -> ClaimsMapper:
    """
    Load one claims mapper table from a JSON file.

    Raises:
        ClaimsMapperConfigError: File unreadable, not JSON, or malformed
    """
    path = Path(path)
    mapper = validate_claims_mapper(_read_json(path), source=str(path))
    logger.info(f"Loaded claims mapper {path} ({len(mapper)} doctypes)")
    return mapper


@dataclass(frozen=True)
class ClaimsMapperConfig:
    """
    Claims mapper tables of a deployment, one per federation protocol.
    """
    oidc: ClaimsMapper = field(
        default_factory=lambda: copy.deepcopy(DEFAULT_OIDC_CLAIMS_MAPPER)
    )
    saml2: ClaimsMapper = field(
        default_factory=lambda: copy.deepcopy(DEFAULT_SAML2_CLAIMS_MAPPER)
    )

    @classmethod
    def default(cls) -> "ClaimsMapperConfig":
        """Configuration with the built-in mDL tables."""
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], source: str = "<config>") -> "ClaimsMapperConfig":
        """
        Build from {"oidc": table, "saml2": table}.

        A missing protocol falls back to its built-in table.

        Raises:
            ClaimsMapperConfigError: Not an object, unknown protocol key,
                or a malformed table
        """
        if classify(data) is not JsonKind.OBJECT:
            raise ClaimsMapperConfigError(f"{source}: configuration must be an object")

        known = {protocol.value for protocol in FederationProtocol}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ClaimsMapperConfigError(
                f"{source}: unknown protocols {', '.join(unknown)} "
                f"(expected {', '.join(sorted(known))})"
            )

        tables = {}
        for protocol in FederationProtocol:
            if protocol.value in data:
                tables[protocol.value] = validate_claims_mapper(
                    data[protocol.value], source=f"{source}:{protocol.value}"
                )
            else:
                logger.debug(f"{source}: no {protocol.value} table, using default")
        return cls(**tables)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ClaimsMapperConfig":
        """
        Load from a JSON file in the from_dict() format.

        Raises:
            ClaimsMapperConfigError: File unreadable, not JSON, or malformed
        """
        path = Path(path)
        config = cls.from_dict(_read_json(path), source=str(path))
        logger.info(
            f"Loaded claims mapper configuration {path} "
            f"(oidc: {len(config.oidc)} doctypes, saml2: {len(config.saml2)} doctypes)"
        )
        return config

    def create_mapper(self) -> MapUserAttributesToMdoc:
        """Attribute mapping function over these tables."""
        return create_map_user_attributes_to_mdoc(self.oidc, self.saml2)
