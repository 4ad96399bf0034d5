"""Graph definition and graph annotation models."""

from typing import Annotated

from pydantic import Field

from .base import MackerelModel, OmitEmpty, OpenStrEnum, Timestamp
from .service import RoleName, ServiceName

GraphAnnotationId = str


class GraphUnit(OpenStrEnum):
    """Unit of the metrics of a graph."""

    FLOAT = "float"
    INTEGER = "integer"
    PERCENTAGE = "percentage"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    BYTES = "bytes"
    BYTES_PER_SEC = "bytes/sec"
    BITS_PER_SEC = "bits/sec"
    IOPS = "iops"


class GraphMetric(MackerelModel):
    """A metric series inside a graph definition."""

    name: str
    display_name: str | None = None
    is_stacked: Annotated[bool, OmitEmpty] = False


class GraphDefinition(MackerelModel):
    """A custom graph definition for host metrics."""

    name: str
    display_name: Annotated[str, OmitEmpty] = ""
    unit: GraphUnit = GraphUnit.FLOAT
    metrics: list[GraphMetric] = []


class GraphAnnotationValue(MackerelModel):
    """Fields accepted when creating or updating a graph annotation."""

    title: str
    description: str = ""
    from_: Timestamp = Field(alias="from")
    to: Timestamp
    service: ServiceName
    roles: list[RoleName] | None = None


class GraphAnnotation(GraphAnnotationValue):
    """A graph annotation."""

    id: GraphAnnotationId
