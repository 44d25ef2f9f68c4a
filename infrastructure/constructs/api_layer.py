"""
API layer construct: shared Lambda + HTTP API routes.

A single Lambda keeps the HTTP session warm across routes.
"""

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_lambda as _lambda,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as integrations,
    aws_logs as logs,
)
from constructs import Construct


class ApiLayerConstruct(Construct):
    """Expose the customer pipeline via HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        petclinic_base_url: str,
        owner_endpoint_paths: str,
        upstream_timeout_seconds: int = 10,
        lambda_memory_mb: int = 256,
        lambda_timeout_seconds: int = 30,
        lambda_architecture: str = "ARM_64",
    ) -> None:
        super().__init__(scope, construct_id)

        architecture = (
            _lambda.Architecture.ARM_64
            if lambda_architecture == "ARM_64"
            else _lambda.Architecture.X86_64
        )

        # Bundle Lambda code with its runtime dependencies (pydantic, requests,
        # python-json-logger) using Docker.
        bundled_code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install pydantic requests python-json-logger -t /asset-output && "
                    "cp -r . /asset-output"
                ],
            ),
        )

        self.main_lambda = _lambda.Function(
            self,
            "ApiHandler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handlers.main.lambda_handler",
            code=bundled_code,
            memory_size=lambda_memory_mb,
            timeout=Duration.seconds(lambda_timeout_seconds),
            architecture=architecture,
            environment={
                "ENVIRONMENT": environment,
                "PETCLINIC_BASE_URL": petclinic_base_url,
                "OWNER_ENDPOINT_PATHS": owner_endpoint_paths,
                "UPSTREAM_TIMEOUT_SECONDS": str(upstream_timeout_seconds),
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"customer-success-api-{environment}",
            cors_preflight=apigw.CorsPreflightOptions(
                allow_origins=["*"],
                allow_methods=[apigw.CorsHttpMethod.GET],
            ),
        )

        integration = integrations.HttpLambdaIntegration(
            "LambdaIntegration", self.main_lambda
        )

        route_paths = [
            "/health",
            "/customers",
            "/customers/hub",
            "/customers/{id}",
            "/customers/{id}/interactions",
            "/segmentation",
            "/overview",
            "/debug/owners",
        ]

        for path in route_paths:
            self.api.add_routes(
                path=path,
                methods=[apigw.HttpMethod.GET],
                integration=integration,
            )
