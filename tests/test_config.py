# -*- encoding: utf-8 -*-
"""
Tests for claims mapper configuration.
"""

import json
import logging

import pytest

from oid4vc_claims.config import (
    DEFAULT_OIDC_CLAIMS_MAPPER,
    DEFAULT_SAML2_CLAIMS_MAPPER,
    ClaimsMapperConfig,
    load_claims_mapper,
    validate_claims_mapper,
)
from oid4vc_claims.errors import ClaimsMapperConfigError, Oid4vcClaimsError
from oid4vc_claims.mdoc import MDL_DOCTYPE, MDL_NAMESPACE


CUSTOM_TABLE = {"org.example.pid": {"org.example.pid.1": {"surname": "sn"}}}


@pytest.fixture
def config_file(tmp_path):
    """Configuration file overriding the OIDC table."""
    path = tmp_path / "claims_mapper.json"
    path.write_text(json.dumps({"oidc": CUSTOM_TABLE}))
    return path


class TestValidateClaimsMapper:
    """Tests for validate_claims_mapper()."""

    def test_defaults_are_valid(self):
        assert validate_claims_mapper(DEFAULT_OIDC_CLAIMS_MAPPER) == DEFAULT_OIDC_CLAIMS_MAPPER
        assert validate_claims_mapper(DEFAULT_SAML2_CLAIMS_MAPPER) == DEFAULT_SAML2_CLAIMS_MAPPER

    def test_returns_copy(self):
        result = validate_claims_mapper(CUSTOM_TABLE)
        result["org.example.pid"]["org.example.pid.1"]["surname"] = "changed"
        assert CUSTOM_TABLE["org.example.pid"]["org.example.pid.1"]["surname"] == "sn"

    def test_not_object(self):
        with pytest.raises(ClaimsMapperConfigError, match="must be an object"):
            validate_claims_mapper([], source="x")

    def test_bad_namespaces(self):
        with pytest.raises(ClaimsMapperConfigError, match="t: doc must map namespaces"):
            validate_claims_mapper({"doc": "ns"}, source="t")

    def test_bad_claims(self):
        with pytest.raises(ClaimsMapperConfigError, match=r"doc\.ns must map claims"):
            validate_claims_mapper({"doc": {"ns": ["a"]}})

    @pytest.mark.parametrize("attribute", ["", 1, None, {"key": "a"}])
    def test_bad_attribute_key(self, attribute):
        with pytest.raises(ClaimsMapperConfigError, match=r"doc\.ns\.claim must be an attribute key"):
            validate_claims_mapper({"doc": {"ns": {"claim": attribute}}})

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_claims_mapper(None)


class TestLoadClaimsMapper:
    """Tests for load_claims_mapper()."""

    def test_load(self, tmp_path, caplog):
        path = tmp_path / "oidc.json"
        path.write_text(json.dumps(CUSTOM_TABLE))
        with caplog.at_level(logging.INFO, logger="oid4vc_claims.config"):
            assert load_claims_mapper(path) == CUSTOM_TABLE
        assert "Loaded claims mapper" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(ClaimsMapperConfigError, match="cannot read"):
            load_claims_mapper(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ClaimsMapperConfigError, match="invalid JSON"):
            load_claims_mapper(str(path))


class TestClaimsMapperConfig:
    """Tests for ClaimsMapperConfig."""

    def test_default(self):
        config = ClaimsMapperConfig.default()
        assert config.oidc == DEFAULT_OIDC_CLAIMS_MAPPER
        assert config.saml2 == DEFAULT_SAML2_CLAIMS_MAPPER
        assert config.oidc is not DEFAULT_OIDC_CLAIMS_MAPPER

    def test_from_dict_partial(self, caplog):
        """Test a missing protocol falls back to its default table."""
        with caplog.at_level(logging.DEBUG, logger="oid4vc_claims.config"):
            config = ClaimsMapperConfig.from_dict({"saml2": CUSTOM_TABLE})
        assert config.saml2 == CUSTOM_TABLE
        assert config.oidc == DEFAULT_OIDC_CLAIMS_MAPPER
        assert "no oidc table, using default" in caplog.text

    def test_from_dict_unknown_protocol(self):
        with pytest.raises(ClaimsMapperConfigError, match="unknown protocols ws-fed"):
            ClaimsMapperConfig.from_dict({"ws-fed": CUSTOM_TABLE})

    def test_from_dict_not_object(self):
        with pytest.raises(Oid4vcClaimsError):
            ClaimsMapperConfig.from_dict(["oidc"])

    def test_from_dict_bad_table(self):
        with pytest.raises(ClaimsMapperConfigError, match="<config>:oidc: doc.ns.claim"):
            ClaimsMapperConfig.from_dict({"oidc": {"doc": {"ns": {"claim": 3}}}})

    def test_from_file(self, config_file):
        config = ClaimsMapperConfig.from_file(config_file)
        assert config.oidc == CUSTOM_TABLE
        assert config.saml2 == DEFAULT_SAML2_CLAIMS_MAPPER

    def test_create_mapper_default(self):
        mapper = ClaimsMapperConfig.default().create_mapper()
        oidc = mapper({"familyName": "Doe", "country": "JP"}, "oidc")
        saml2 = mapper({"urn:oid:2.5.4.4": "Doe"}, "saml2")
        assert oidc[MDL_DOCTYPE][MDL_NAMESPACE] == {"family_name": "Doe", "resident_country": "JP"}
        assert saml2[MDL_DOCTYPE][MDL_NAMESPACE] == {"family_name": "Doe"}

    def test_create_mapper_from_file(self, config_file):
        mapper = ClaimsMapperConfig.from_file(config_file).create_mapper()
        assert mapper({"sn": "Doe"}, "oidc") == {
            "org.example.pid": {"org.example.pid.1": {"surname": "Doe"}},
        }

    def test_frozen(self):
        config = ClaimsMapperConfig.default()
        with pytest.raises(AttributeError):
            config.oidc = {}
