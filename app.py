"""
CDK app entrypoint.

Deploys the support desk API; ``-c environment=prod`` overrides ENVIRONMENT.
"""

import os

import aws_cdk as cdk

from infrastructure.config.settings import Settings
from infrastructure.main_stack import SupportDeskStack


def main() -> None:
    app = cdk.App()
    environment = app.node.try_get_context("environment")
    if environment:
        os.environ["ENVIRONMENT"] = environment
    settings = Settings.from_environment()

    SupportDeskStack(
        app,
        f"SupportDeskStack-{settings.environment}",
        settings=settings,
        description="Support ticket import/classification and transactions API",
        env=cdk.Environment(
            account=app.node.try_get_context("account"),
            region=settings.aws_region,
        ),
    )

    app.synth()


if __name__ == "__main__":
    main()
