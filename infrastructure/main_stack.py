"""
Main CDK Stack for the Customer Success API.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class CustomerSuccessStack(Stack):
    """Stack holding the single API Lambda and its HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Global tags for cost/accounting.
        Tags.of(self).add("Project", "customer-success-dashboard")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            petclinic_base_url=settings.petclinic_base_url,
            owner_endpoint_paths=settings.owner_endpoint_paths,
            upstream_timeout_seconds=settings.upstream_timeout_seconds,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
            lambda_architecture=settings.lambda_architecture,
        )

        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "ApiFunctionName", value=api_construct.main_lambda.function_name)
