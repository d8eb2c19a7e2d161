# ABOUTME: Unit tests for LayeredConfigSource
# ABOUTME: Tests file layer ordering, SERVICE_CONFIG overrides and parse error reporting

import pytest

from service_config.exceptions import ConfigSourceError
from service_config.implementations.layered import LayeredConfigSource, load_toml


@pytest.fixture
def config_dir(tmp_path):
    directory = tmp_path / "config"
    directory.mkdir()
    return directory


class TestLayeredConfigSource:
    """Test suite for LayeredConfigSource.load."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_no_files_no_overrides(self, config_dir):
        source = LayeredConfigSource.load(config_dir, "development", environ={})

        assert source.as_dict() == {}
        assert source.layers == []

    @pytest.mark.unit
    @pytest.mark.config
    def test_missing_directory_is_empty(self, tmp_path):
        source = LayeredConfigSource.load(tmp_path / "nowhere", "production", environ={})
        assert not source.has("database.host")

    @pytest.mark.unit
    @pytest.mark.config
    def test_file_layers_merge_in_order(self, config_dir):
        (config_dir / "default.toml").write_text(
            '[database]\nhost = "default-host"\nport = 5432\nuser = "svc"\n\n[logger]\nlevel = "INFO"\n'
        )
        (config_dir / "production.toml").write_text('[database]\nhost = "prod-host"\n')
        (config_dir / "development.toml").write_text('[database]\nhost = "dev-host"\n')
        (config_dir / "local.toml").write_text('[logger]\nlevel = "WARNING"\n')

        source = LayeredConfigSource.load(config_dir, "production", environ={})

        assert source.get("database.host") == "prod-host"
        assert source.get("database.port") == 5432
        assert source.get("database.user") == "svc"
        assert source.get("logger.level") == "WARNING"
        assert source.layers == [
            str(config_dir / "default.toml"),
            str(config_dir / "production.toml"),
            str(config_dir / "local.toml"),
        ]

    @pytest.mark.unit
    @pytest.mark.config
    def test_json_environment_override(self, config_dir):
        (config_dir / "default.toml").write_text('[database]\nhost = "file-host"\nport = 5432\n')
        environ = {"SERVICE_CONFIG": '{"database": {"host": "json-host"}, "kafka.brokers": ["b1:9092"]}'}

        source = LayeredConfigSource.load(config_dir, "development", environ=environ)

        assert source.get("database.host") == "json-host"
        assert source.get("database.port") == 5432
        assert source.get("kafka.brokers") == ["b1:9092"]
        assert source.layers[-1] == "SERVICE_CONFIG"

    @pytest.mark.unit
    @pytest.mark.config
    def test_per_key_environment_overrides(self, config_dir):
        environ = {
            "SERVICE_CONFIG": '{"database": {"host": "json-host"}}',
            "SERVICE_CONFIG__DATABASE__HOST": "env-host",
            "SERVICE_CONFIG__DATABASE__PORT": "6543",
            "SERVICE_CONFIG__DOCUMENTATION__EXPOSE_ROUTE": "false",
            "SERVICE_CONFIG__KAFKA__BROKERS": "a:9092,b:9092",
            "SERVICE_CONFIG_DIR": "ignored",
            "UNRELATED": "x",
        }

        source = LayeredConfigSource.load(config_dir, "development", environ=environ)

        # Per-key variables beat the JSON blob
        assert source.get("database.host") == "env-host"
        assert source.get("database.port") == "6543"
        assert source.get("documentation.expose_route") == "false"
        assert source.get("kafka.brokers") == "a:9092,b:9092"
        assert not source.has("dir")
        assert not source.has("unrelated")

    @pytest.mark.unit
    @pytest.mark.config
    def test_scalar_overrides_stay_strings(self, config_dir):
        environ = {
            "SERVICE_CONFIG__DATABASE__PASSWORD": "123456",
            "SERVICE_CONFIG__APPLICATION__VERSION": "2",
            "SERVICE_CONFIG__LOGGER__LEVEL": "null",
        }

        source = LayeredConfigSource.load(config_dir, "development", environ=environ)

        assert source.get("database.password") == "123456"
        assert source.get("application.version") == "2"
        assert source.get("logger.level") == "null"

    @pytest.mark.unit
    @pytest.mark.config
    def test_list_and_table_overrides_are_decoded(self, config_dir):
        environ = {
            "SERVICE_CONFIG__KAFKA__BROKERS": '["a:9092", "b:9092"]',
            "SERVICE_CONFIG__LOGGER__PRETTY_PRINT": '{"colorize": false}',
        }

        source = LayeredConfigSource.load(config_dir, "development", environ=environ)

        assert source.get("kafka.brokers") == ["a:9092", "b:9092"]
        assert source.get("logger.pretty_print") == {"colorize": False}

    @pytest.mark.unit
    @pytest.mark.config
    def test_reads_os_environ_by_default(self, config_dir, monkeypatch):
        monkeypatch.setenv("SERVICE_CONFIG__APPLICATION__PORT", "9000")

        source = LayeredConfigSource.load(config_dir, "development")

        assert source.get("application.port") == "9000"

    @pytest.mark.unit
    @pytest.mark.config
    def test_malformed_toml_names_file(self, config_dir):
        (config_dir / "default.toml").write_text("[database\nhost = ")

        with pytest.raises(ConfigSourceError) as exc_info:
            LayeredConfigSource.load(config_dir, "development", environ={})

        assert exc_info.value.source == str(config_dir / "default.toml")

    @pytest.mark.unit
    @pytest.mark.config
    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]"])
    def test_malformed_json_override(self, config_dir, raw):
        with pytest.raises(ConfigSourceError) as exc_info:
            LayeredConfigSource.load(config_dir, "development", environ={"SERVICE_CONFIG": raw})

        assert exc_info.value.source == "SERVICE_CONFIG"


class TestLoadToml:
    """Test suite for load_toml."""

    @pytest.mark.unit
    def test_load(self, tmp_path):
        path = tmp_path / "a.toml"
        path.write_text('name = "orders-api"\n[project]\nversion = "2.3.0"\n')

        assert load_toml(path) == {"name": "orders-api", "project": {"version": "2.3.0"}}

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigSourceError):
            load_toml(tmp_path / "missing.toml")
