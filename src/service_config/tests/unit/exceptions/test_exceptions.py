# ABOUTME: Unit tests for the configuration exception hierarchy
# ABOUTME: Verifies messages name the offending key or file and codes/details are populated

import pytest

from service_config.exceptions import (
    ServiceConfigException,
    ConfigurationException,
    MissingRequiredKeyError,
    ManifestNotFoundError,
    MissingManifestNameError,
    MissingPublicKeyError,
    ConfigSourceError,
)


class TestServiceConfigException:
    """Test suite for the base exception."""

    @pytest.mark.unit
    def test_message_code_and_details(self):
        details = {"key": "database.host"}
        exc = ServiceConfigException("boom", code="E1", details=details)

        assert str(exc) == "boom"
        assert exc.message == "boom"
        assert exc.code == "E1"
        assert exc.details == {"key": "database.host"}

        # Details are copied
        details["key"] = "other"
        assert exc.details["key"] == "database.host"

    @pytest.mark.unit
    def test_defaults(self):
        exc = ServiceConfigException("boom")
        assert exc.code is None
        assert exc.details == {}


class TestConfigurationErrors:
    """Test suite for the specific configuration errors."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "exc",
        [
            MissingRequiredKeyError("database.host"),
            ManifestNotFoundError("pyproject.toml"),
            MissingManifestNameError("pyproject.toml"),
            MissingPublicKeyError("/srv/keys/public_key.pem"),
            ConfigSourceError("config/default.toml", "bad syntax"),
        ],
    )
    def test_inherit_from_configuration_exception(self, exc):
        assert isinstance(exc, ConfigurationException)
        assert isinstance(exc, ServiceConfigException)
        assert exc.code is not None

    @pytest.mark.unit
    def test_missing_required_key_names_key(self):
        exc = MissingRequiredKeyError("database.password")

        assert exc.key == "database.password"
        assert '"database.password"' in str(exc)
        assert exc.details == {"key": "database.password"}
        assert exc.code == "MISSING_REQUIRED_KEY"

    @pytest.mark.unit
    def test_missing_public_key_names_path(self):
        exc = MissingPublicKeyError("/srv/keys/public_key.pem")

        assert str(exc) == "missing public key: /srv/keys/public_key.pem"
        assert exc.path == "/srv/keys/public_key.pem"

    @pytest.mark.unit
    def test_manifest_errors_name_path(self):
        assert "pyproject.toml" in str(MissingManifestNameError("pyproject.toml"))
        exc = ManifestNotFoundError("pyproject.toml", "No such file or directory")
        assert str(exc) == "package manifest not found: pyproject.toml (No such file or directory)"

    @pytest.mark.unit
    def test_config_source_error_names_source(self):
        exc = ConfigSourceError("SERVICE_CONFIG", "expected a JSON object")
        assert exc.source == "SERVICE_CONFIG"
        assert "SERVICE_CONFIG" in str(exc)
        assert "expected a JSON object" in str(exc)
