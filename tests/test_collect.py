# -*- encoding: utf-8 -*-
"""
Tests for mdoc claims collection.

Tests the path from user directory attributes to issued mdoc claims.
"""

import logging
from datetime import datetime, timezone

import pytest

from oid4vc_claims.config import ClaimsMapperConfig
from oid4vc_claims.errors import BadRequestError
from oid4vc_claims.mdoc import (
    MDL_DOCTYPE,
    MDL_NAMESPACE,
    FederationProtocol,
    create_mdoc_claims_getter,
    mdoc_check_permissions,
    mdoc_collect_claims,
)

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)

USERS = {
    "1004": {
        "familyName": "Doe",
        "givenName": "John",
        "birthdate": "1974-01-01",
    },
}


@pytest.fixture
def get_mdoc_claims():
    """Claims lookup over an in-memory user directory."""
    mapper = ClaimsMapperConfig.default().create_mapper()
    return create_mdoc_claims_getter(USERS.get, mapper, FederationProtocol.OIDC)


class TestCreateMdocClaimsGetter:
    """Tests for create_mdoc_claims_getter()."""

    def test_known_subject(self, get_mdoc_claims):
        claims = get_mdoc_claims("1004", MDL_DOCTYPE)
        assert claims[MDL_NAMESPACE]["family_name"] == "Doe"
        assert claims[MDL_NAMESPACE]["birth_date"] == "1974-01-01"

    def test_unknown_subject(self, get_mdoc_claims, caplog):
        with caplog.at_level(logging.DEBUG, logger="oid4vc_claims.mdoc.collect"):
            assert get_mdoc_claims("9999", MDL_DOCTYPE) is None
        assert "No attributes for subject 9999" in caplog.text

    def test_unknown_doctype(self, get_mdoc_claims):
        assert get_mdoc_claims("1004", "org.example.pid") is None

    def test_protocol_passed_to_mapper(self):
        calls = []

        def mapper(attributes, protocol):
            calls.append(protocol)
            return {}

        getter = create_mdoc_claims_getter(lambda subject: {}, mapper, "saml2")
        getter("s", "d")
        assert calls == ["saml2"]


class TestMdocCollectClaims:
    """Tests for mdoc_collect_claims()."""

    def test_collect(self, get_mdoc_claims):
        requested = {
            "format": "mso_mdoc",
            "doctype": MDL_DOCTYPE,
            "claims": {MDL_NAMESPACE: {"family_name": {}, "issue_date": {}}},
        }
        result = mdoc_collect_claims("1004", requested, get_mdoc_claims, NOW)
        assert result == {
            "doctype": MDL_DOCTYPE,
            "claims": {
                MDL_NAMESPACE: {
                    "issue_date": 'cbor:1004("2024-06-01")',
                    "family_name": "Doe",
                },
            },
        }

    def test_logs_collection(self, get_mdoc_claims, caplog):
        requested = {"doctype": MDL_DOCTYPE, "claims": {MDL_NAMESPACE: {"given_name": {}}}}
        with caplog.at_level(logging.INFO, logger="oid4vc_claims.mdoc.collect"):
            mdoc_collect_claims("1004", requested, get_mdoc_claims, NOW)
        assert f"of {MDL_DOCTYPE} claims for 1004" in caplog.text

    def test_no_request(self, get_mdoc_claims):
        with pytest.raises(BadRequestError) as exc_info:
            mdoc_collect_claims("1004", None, get_mdoc_claims)
        assert exc_info.value.error_description == "requestedCredential is required"

    @pytest.mark.parametrize("requested", [{}, {"doctype": ""}, {"format": "mso_mdoc"}])
    def test_no_doctype(self, get_mdoc_claims, requested):
        with pytest.raises(BadRequestError) as exc_info:
            mdoc_collect_claims("1004", requested, get_mdoc_claims)
        assert exc_info.value.error_description == (
            "doctype field is required in requestedCredential"
        )

    def test_unknown_subject(self, get_mdoc_claims):
        with pytest.raises(BadRequestError) as exc_info:
            mdoc_collect_claims("9999", {"doctype": MDL_DOCTYPE}, get_mdoc_claims)
        assert exc_info.value.error_description == (
            f'No mdoc claims found for subject "9999" and doctype "{MDL_DOCTYPE}"'
        )

    def test_no_requested_claims(self, get_mdoc_claims):
        with pytest.raises(BadRequestError) as exc_info:
            mdoc_collect_claims("1004", {"doctype": MDL_DOCTYPE}, get_mdoc_claims)
        assert exc_info.value.error_description == "No requested claims provided"

    def test_error_code(self, get_mdoc_claims):
        with pytest.raises(BadRequestError) as exc_info:
            mdoc_collect_claims("1004", None, get_mdoc_claims)
        assert exc_info.value.error == "invalid_credential_request"


class TestIssuanceWithinPermissions:
    """Tests for the check-permissions-then-collect issuance path."""

    @pytest.fixture
    def issuable_credentials(self):
        """Access token permitting only age_over_18."""
        return [{
            "format": "mso_mdoc",
            "doctype": MDL_DOCTYPE,
            "claims": {MDL_NAMESPACE: {"age_over_18": {}}},
        }]

    @pytest.fixture
    def get_user_mdoc(self):
        user_mdoc = {
            MDL_NAMESPACE: {
                "age_over_18": True,
                "family_name": "Doe",
                "portrait": "xx",
            },
        }
        return lambda subject, doctype: user_mdoc

    def _issue(self, issuable_credentials, requested, get_user_mdoc):
        mdoc_check_permissions(issuable_credentials, requested)
        return mdoc_collect_claims("1004", requested, get_user_mdoc, NOW)

    def test_permitted_claim_issued(self, issuable_credentials, get_user_mdoc):
        requested = {
            "doctype": MDL_DOCTYPE,
            "claims": {MDL_NAMESPACE: {"age_over_18": {}}},
        }
        result = self._issue(issuable_credentials, requested, get_user_mdoc)
        assert result["claims"] == {MDL_NAMESPACE: {"age_over_18": True}}

    @pytest.mark.parametrize("requested_sub_claims", [
        ["age_over_18"],
        ["family_name", "portrait"],
        True,
        "portrait",
    ])
    def test_non_object_namespace_issues_no_claim(
        self, issuable_credentials, get_user_mdoc, requested_sub_claims
    ):
        """Test a namespace requested as a list or scalar cannot widen the grant."""
        requested = {
            "doctype": MDL_DOCTYPE,
            "claims": {MDL_NAMESPACE: requested_sub_claims},
        }
        result = self._issue(issuable_credentials, requested, get_user_mdoc)
        assert result["claims"] == {MDL_NAMESPACE: {}}

    def test_unpermitted_claim_rejected(self, issuable_credentials, get_user_mdoc):
        requested = {
            "doctype": MDL_DOCTYPE,
            "claims": {MDL_NAMESPACE: {"family_name": {}}},
        }
        with pytest.raises(BadRequestError):
            self._issue(issuable_credentials, requested, get_user_mdoc)
