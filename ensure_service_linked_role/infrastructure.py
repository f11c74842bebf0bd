# import modules
from constructs import Construct
from aws_cdk import (
    aws_iam as iam,
    aws_lambda as _lambda,
    aws_logs as logs,
    CfnOutput,
    CustomResource,
    custom_resources as cr,
    Duration,
    RemovalPolicy,
    Stack,
)
from typing import Any, Optional
from pathlib import Path

dirname = Path(__file__).parent

RESOURCE_TYPE = "Custom::IdempotentCreateServiceLinkedRole"


class ServiceLinkedRoleProvider(Construct):
    """Lambda function and provider backing every service-linked role resource of a stack."""

    PROVIDER_ID = "service_linked_role_provider"

    def __init__(
        self,
        scope: Construct,
        id: str,
        log_level: str = "info",
        **kwargs,
    ) -> None:
        super().__init__(scope, id)

        # the function needs to look up and create service-linked roles
        on_event_lambda = _lambda.Function(
            self,
            "on_event_lambda",
            code=_lambda.Code.from_asset(
                str(dirname.joinpath("runtime")), exclude=["__pycache__", "*.pyc"]
            ),
            handler="on_event.lambda_function.lambda_handler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            description="Create service-linked role if it doesn't already exist",
            environment={
                "LOG_LEVEL": log_level,
            },
            memory_size=128,
            timeout=Duration.seconds(30),
            log_retention=logs.RetentionDays.ONE_DAY,
            initial_policy=[
                iam.PolicyStatement(
                    effect=iam.Effect.ALLOW,
                    actions=["iam:GetRole", "iam:CreateServiceLinkedRole"],
                    resources=["*"],
                ),
            ],
        )

        provider = cr.Provider(
            self,
            "provider",
            on_event_handler=on_event_lambda,
            log_retention=logs.RetentionDays.ONE_DAY,
        )

        self.on_event_lambda = on_event_lambda
        self.service_token = provider.service_token

    @classmethod
    def of(cls, scope: Construct, log_level: str = "info") -> "ServiceLinkedRoleProvider":
        """ get the provider of the stack containing scope, creating it once """
        stack = Stack.of(scope)
        existing = stack.node.try_find_child(cls.PROVIDER_ID)
        if existing is not None:
            return existing
        return cls(stack, cls.PROVIDER_ID, log_level=log_level)


class IdempotentServiceLinkedRole(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        service: str,
        provider: Optional[ServiceLinkedRoleProvider] = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, id)

        if provider is None:
            provider = ServiceLinkedRoleProvider.of(self)

        # the role outlives the stack
        resource = CustomResource(
            self,
            "resource",
            service_token=provider.service_token,
            resource_type=RESOURCE_TYPE,
            properties={
                "AWSServiceName": service,
            },
            removal_policy=RemovalPolicy.RETAIN,
        )

        self.resource = resource
        self.arn = resource.get_att_string("Arn")
        self.role_id = resource.get_att_string("RoleId")


class ServiceLinkedRoleStack(Stack):
    def __init__(
        self,
        scope: Construct,
        id: str,
        AWS_SERVICE_NAME: str,
        LOG_LEVEL: str = "info",
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        provider = ServiceLinkedRoleProvider.of(self, log_level=LOG_LEVEL)

        # the second resource finds the role the first one created
        role1 = IdempotentServiceLinkedRole(
            self, "role1", service=AWS_SERVICE_NAME, provider=provider
        )
        role2 = IdempotentServiceLinkedRole(
            self, "role2", service=AWS_SERVICE_NAME, provider=provider
        )
        role2.node.add_dependency(role1)

        # cfn outputs
        CfnOutput(self, "Role1Arn", value=role1.arn, description="Role 1 ARN")
        CfnOutput(self, "Role1RoleId", value=role1.role_id, description="Role 1 RoleId")
        CfnOutput(self, "Role2Arn", value=role2.arn, description="Role 2 ARN")
        CfnOutput(self, "Role2RoleId", value=role2.role_id, description="Role 2 RoleId")
