"""
Unit tests for stack configuration.

Tests StackConfig validation and loading from Pulumi stack config.
Dependencies: pytest, pulumi, search_infra.configs
System role: Configuration contract validation
"""

import pulumi
import pytest

from search_infra.configs.base import StackConfig
from search_infra.configs.environment import get_config


class TestStackConfigDefaults:
    """Defaults reproduce the documented deployment."""

    def test_defaults(self):
        config = StackConfig(environment="dev")

        assert config.mount_path == "/mnt/lambda"
        assert config.access_point_path == "/lambda"
        assert config.max_azs == 2
        assert config.lambda_memory == 128
        assert config.lambda_timeout == 3
        assert config.backtrace is True
        assert config.indexer_schedule is None
        assert config.enable_search_url is False

    def test_diagnostics_flag(self):
        assert StackConfig(environment="dev").diagnostics_flag == "1"
        assert StackConfig(environment="dev", backtrace=False).diagnostics_flag == "0"

    def test_is_production(self):
        assert StackConfig(environment="prod").is_production is True
        assert StackConfig(environment="dev").is_production is False

    def test_config_is_frozen(self):
        config = StackConfig(environment="dev")

        with pytest.raises(AttributeError):
            config.max_azs = 3


class TestStackConfigValidation:
    """Invalid settings are rejected before any resource is declared."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"environment": ""},
            {"mount_path": "/efs/index"},
            {"mount_path": "/mnt"},
            {"mount_path": "/mnt/"},
            {"access_point_path": "lambda"},
            {"max_azs": 0},
            {"max_azs": 4},
            {"lambda_memory": 64},
            {"lambda_memory": 20480},
            {"lambda_timeout": 0},
            {"lambda_timeout": 901},
            {"log_retention_days": 0},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        values = {"environment": "dev", **overrides}

        with pytest.raises(ValueError):
            StackConfig(**values)

    def test_nested_mount_path_accepted(self):
        config = StackConfig(environment="dev", mount_path="/mnt/search/index")

        assert config.mount_path == "/mnt/search/index"


class TestGetConfig:
    """Loading from stack config."""

    def test_environment_is_required(self, stack_config):
        """
        Test missing environment fails loudly.

        Arrange: Stack config without environment
        Act: Load config
        Assert: ConfigMissingError raised
        """
        stack_config({"lambdas_root": "build/lambdas"})

        with pytest.raises(pulumi.ConfigMissingError, match="rust-search:environment"):
            get_config()

    def test_only_environment_set(self, stack_config):
        """
        Test unset keys fall back to defaults.

        Arrange: Stack config with environment only
        Act: Load config
        Assert: Defaults match StackConfig defaults
        """
        # Arrange
        stack_config({"environment": "dev"})

        # Act
        config = get_config()

        # Assert
        assert config == StackConfig(environment="dev")

    def test_overrides_parsed(self, stack_config):
        """
        Test every key is read and converted.

        Arrange: Stack config with all keys
        Act: Load config
        Assert: Values converted to their types
        """
        # Arrange
        stack_config(
            {
                "environment": "staging",
                "lambdas_root": "build/lambdas",
                "mount_path": "/mnt/index",
                "access_point_path": "/index",
                "max_azs": "3",
                "lambda_memory": "512",
                "lambda_timeout": "30",
                "log_retention_days": "7",
                "backtrace": "false",
                "indexer_schedule": "rate(1 hour)",
                "enable_search_url": "true",
            }
        )

        # Act
        config = get_config()

        # Assert
        assert config.environment == "staging"
        assert config.lambdas_root == "build/lambdas"
        assert config.mount_path == "/mnt/index"
        assert config.access_point_path == "/index"
        assert config.max_azs == 3
        assert config.lambda_memory == 512
        assert config.lambda_timeout == 30
        assert config.log_retention_days == 7
        assert config.backtrace is False
        assert config.indexer_schedule == "rate(1 hour)"
        assert config.enable_search_url is True

    def test_keys_of_other_projects_ignored(self, stack_config):
        pulumi.runtime.set_all_config({"aws:region": "eu-west-1", "rust-search:environment": "dev"})

        assert get_config() == StackConfig(environment="dev")

    def test_malformed_flag_rejected(self, stack_config):
        stack_config({"environment": "dev", "backtrace": "maybe"})

        with pytest.raises(pulumi.ConfigTypeError):
            get_config()

    def test_invalid_loaded_value_rejected(self, stack_config):
        stack_config({"environment": "dev", "mount_path": "/tmp/index"})

        with pytest.raises(ValueError):
            get_config()
