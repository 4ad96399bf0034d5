"""AWS integration models."""

from typing import Annotated

from .base import MackerelModel, OmitEmpty, OpenStrEnum
from .service import RoleFullname

AWSIntegrationId = str


class AWSServiceName(OpenStrEnum):
    """AWS services Mackerel can collect metrics from."""

    EC2 = "EC2"
    ELB = "ELB"
    ALB = "ALB"
    NLB = "NLB"
    RDS = "RDS"
    REDSHIFT = "Redshift"
    ELASTICACHE = "ElastiCache"
    SQS = "SQS"
    LAMBDA = "Lambda"
    DYNAMODB = "DynamoDB"
    CLOUDFRONT = "CloudFront"
    API_GATEWAY = "APIGateway"
    KINESIS = "Kinesis"
    S3 = "S3"
    ES = "ES"
    ECS_CLUSTER = "ECSCluster"
    SES = "SES"
    STATES = "States"
    EFS = "EFS"
    FIREHOSE = "Firehose"
    BATCH = "Batch"
    WAF = "WAF"
    BILLING = "Billing"
    ROUTE53 = "Route53"
    CONNECT = "Connect"
    DOCDB = "DocDB"
    CODEBUILD = "CodeBuild"


class AWSServiceConfig(MackerelModel):
    """Collection settings for one AWS service."""

    enable: bool = True
    role: RoleFullname | None = None
    excluded_metrics: Annotated[list[str], OmitEmpty] = []
    retire_automatically: Annotated[bool, OmitEmpty] = False


class AWSIntegrationValue(MackerelModel):
    """Fields accepted when creating or updating an AWS integration.

    Authenticate either with an access key (``key`` and ``secret_key``) or
    with an IAM role (``role_arn`` and ``external_id``). The secret key is
    write-only and never returned by the API.
    """

    name: str
    memo: str = ""
    key: str | None = None
    secret_key: str | None = None
    role_arn: str | None = None
    external_id: str | None = None
    region: str = ""
    included_tags: str = ""
    excluded_tags: str = ""
    services: dict[AWSServiceName, AWSServiceConfig] = {}


class AWSIntegration(AWSIntegrationValue):
    """A registered AWS integration."""

    id: AWSIntegrationId


# Service name to the metric names that can be excluded for it
AWSExcludableMetrics = dict[AWSServiceName, list[str]]
