#!/usr/bin/env python3
from aws_cdk import App

# The AWS CDK application entry point
import constants
from deployment import SLR

app = App()

# Development
SLR(
    app,
    f"{constants.CDK_APP_NAME}-dev",
    env=constants.DEV_ENV,
)

app.synth()
