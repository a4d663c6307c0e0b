"""
API layer construct: one Lambda behind an HTTP API.

The function keeps its in-memory stores for the lifetime of a warm container.
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

ROUTES = (
    (apigw.HttpMethod.GET, "/health"),
    (apigw.HttpMethod.POST, "/tickets"),
    (apigw.HttpMethod.GET, "/tickets"),
    (apigw.HttpMethod.POST, "/tickets/import"),
    (apigw.HttpMethod.POST, "/tickets/classify"),
    (apigw.HttpMethod.GET, "/tickets/{id}"),
    (apigw.HttpMethod.PUT, "/tickets/{id}"),
    (apigw.HttpMethod.DELETE, "/tickets/{id}"),
    (apigw.HttpMethod.POST, "/tickets/{id}/auto-classify"),
    (apigw.HttpMethod.POST, "/transactions"),
    (apigw.HttpMethod.GET, "/transactions"),
    (apigw.HttpMethod.GET, "/transactions/export"),
    (apigw.HttpMethod.GET, "/transactions/{id}"),
    (apigw.HttpMethod.GET, "/accounts/{accountId}/balance"),
    (apigw.HttpMethod.GET, "/accounts/{accountId}/summary"),
)


class ApiLayerConstruct(Construct):
    """Expose the ticket and transaction endpoints via HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        log_level: str = "INFO",
        max_import_bytes: int = 10 * 1024 * 1024,
        lambda_memory_mb: int = 256,
        lambda_timeout_seconds: int = 15,
    ) -> None:
        super().__init__(scope, construct_id)

        self.main_lambda = _lambda.Function(
            self,
            "ApiHandler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handlers.main.lambda_handler",
            code=_lambda.Code.from_asset(
                "src",
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                    command=[
                        "bash", "-c",
                        "pip install -r requirements-lambda.txt -t /asset-output && "
                        "cp -r . /asset-output",
                    ],
                ),
            ),
            memory_size=lambda_memory_mb,
            timeout=Duration.seconds(lambda_timeout_seconds),
            architecture=_lambda.Architecture.ARM_64,
            environment={
                "ENVIRONMENT": environment,
                "LOG_LEVEL": log_level,
                "MAX_IMPORT_BYTES": str(max_import_bytes),
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"support-desk-api-{environment}",
        )

        integration = integrations.HttpLambdaIntegration(
            "LambdaIntegration", self.main_lambda
        )
        for method, path in ROUTES:
            self.api.add_routes(path=path, methods=[method], integration=integration)
