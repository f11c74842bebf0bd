import os

from aws_cdk import Environment

CDK_APP_NAME = "slr"

DEV_ENV = Environment(
    account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
    region=os.environ.get("CDK_DEFAULT_REGION"),
)

# service whose service-linked role the stack ensures
AWS_SERVICE_NAME_DEV = "inspector.amazonaws.com"
LOG_LEVEL_DEV = "info"
