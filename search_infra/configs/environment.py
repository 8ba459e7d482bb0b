"""
Stack configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from search_infra.configs.base import StackConfig


def get_config() -> StackConfig:
    """
    Load stack configuration from Pulumi stack config.

    Returns:
        StackConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ValueError: If a value is outside what the stack supports
    """
    config = pulumi.Config()

    return StackConfig(
        environment=config.require("environment"),
        lambdas_root=config.get("lambdas_root") or "lambdas",
        mount_path=config.get("mount_path") or "/mnt/lambda",
        access_point_path=config.get("access_point_path") or "/lambda",
        max_azs=int(config.get("max_azs") or "2"),
        lambda_memory=int(config.get("lambda_memory") or "128"),
        lambda_timeout=int(config.get("lambda_timeout") or "3"),
        log_retention_days=int(config.get("log_retention_days") or "30"),
        backtrace=config.get_bool("backtrace") is not False,
        indexer_schedule=config.get("indexer_schedule") or None,
        enable_search_url=config.get_bool("enable_search_url") or False,
    )
