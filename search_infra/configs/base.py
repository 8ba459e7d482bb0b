"""
Base configuration dataclass for stack settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass

from search_infra.configs.constants import SUBNET_CIDRS


@dataclass(frozen=True)
class StackConfig:
    """
    Stack-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        lambdas_root: Directory holding the Lambda crates and their build output
        mount_path: Absolute path where both functions see the shared filesystem
        access_point_path: Root directory exposed by the EFS access point
        max_azs: Number of availability zones the network spans
        lambda_memory: Lambda function memory in MB
        lambda_timeout: Lambda function timeout in seconds
        log_retention_days: CloudWatch log retention for function logs
        backtrace: Enable Rust backtraces in function logs
        indexer_schedule: EventBridge schedule expression for the indexer
        enable_search_url: Expose the searcher through a public function URL
    """
    environment: str
    lambdas_root: str = "lambdas"
    mount_path: str = "/mnt/lambda"
    access_point_path: str = "/lambda"
    max_azs: int = 2
    lambda_memory: int = 128
    lambda_timeout: int = 3
    log_retention_days: int = 30
    backtrace: bool = True
    indexer_schedule: str | None = None
    enable_search_url: bool = False

    def __post_init__(self) -> None:
        if not self.environment:
            raise ValueError("environment must not be empty")
        if not self.mount_path.startswith("/mnt/") or self.mount_path.rstrip("/") == "/mnt":
            raise ValueError(
                f"mount_path must be a directory under /mnt/, got {self.mount_path!r}"
            )
        if not self.access_point_path.startswith("/"):
            raise ValueError(
                f"access_point_path must be absolute, got {self.access_point_path!r}"
            )
        if not 1 <= self.max_azs <= len(SUBNET_CIDRS):
            raise ValueError(
                f"max_azs must be between 1 and {len(SUBNET_CIDRS)}, got {self.max_azs}"
            )
        if not 128 <= self.lambda_memory <= 10240:
            raise ValueError(f"lambda_memory out of range: {self.lambda_memory}")
        if not 1 <= self.lambda_timeout <= 900:
            raise ValueError(f"lambda_timeout out of range: {self.lambda_timeout}")
        if self.log_retention_days <= 0:
            raise ValueError("log_retention_days must be positive")

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def diagnostics_flag(self) -> str:
        """Value of the backtrace variable passed to the functions."""
        return "1" if self.backtrace else "0"

    def get_tags(self) -> dict[str, str]:
        """Get environment-specific tags."""
        return {
            "Environment": self.environment,
        }
