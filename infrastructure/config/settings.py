"""
Environment-specific configuration settings.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings with cost-optimized defaults."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"  # Default AWS region

    # Upstream owners API (Petclinic gateway or customers service)
    petclinic_base_url: str = "http://localhost:8080"
    owner_endpoint_paths: str = "/api/customer/owners,/api/gateway/owners,/api/owners"
    upstream_timeout_seconds: int = 10

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 30
    lambda_architecture: str = "ARM_64"  # 20% cheaper

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        base_url = os.environ.get("PETCLINIC_BASE_URL", cls.petclinic_base_url)
        region = os.environ.get("AWS_REGION", cls.aws_region)

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                petclinic_base_url=base_url,
                lambda_memory_mb=512,
                lambda_timeout_seconds=60,
            )

        return cls(environment=env, aws_region=region, petclinic_base_url=base_url)
