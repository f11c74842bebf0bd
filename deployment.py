from typing import Any

# cdk stuff
from constructs import Construct
from aws_cdk import Stage

# get constants
import constants

# get stacks
from ensure_service_linked_role.infrastructure import ServiceLinkedRoleStack


class SLR(Stage):
    def __init__(
        self,
        scope: Construct,
        id_: str,
        **kwargs: Any,
    ):
        super().__init__(scope, id_, **kwargs)

        # service-linked role stack
        ServiceLinkedRoleStack(
            self,
            "servicelinkedrole",
            AWS_SERVICE_NAME=constants.AWS_SERVICE_NAME_DEV,
            LOG_LEVEL=constants.LOG_LEVEL_DEV,
        )
