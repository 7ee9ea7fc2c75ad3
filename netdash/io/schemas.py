"""Pydantic schemas for the JSON snapshot wire format."""

from pydantic import BaseModel, ConfigDict, field_validator

from netdash.configs.constants import DEFAULT_LINK_INFO, DEFAULT_LINK_TYPE


class SnapshotEndpoint(BaseModel):
    """An endpoint entry of a node."""

    model_config = ConfigDict(extra="ignore")

    address: str
    name: str

    @field_validator("address", mode="before")
    @classmethod
    def _address_to_str(cls, value: object) -> object:
        # Endpoint ids are sent as numbers by some servers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class SnapshotNode(BaseModel):
    """A node entry; its position in the nodes array is its id."""

    model_config = ConfigDict(extra="ignore")

    endpoints: list[SnapshotEndpoint] = []


class SnapshotRoute(BaseModel):
    """A route entry, ``typestring`` carries the link type."""

    model_config = ConfigDict(extra="ignore")

    source: int
    target: int
    id: str
    typestring: str | None = DEFAULT_LINK_TYPE
    info: str | None = DEFAULT_LINK_INFO

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class SnapshotTopology(BaseModel):
    """One named topology of a JSON snapshot."""

    model_config = ConfigDict(extra="ignore")

    nodes: list[SnapshotNode]
    routes: list[SnapshotRoute] = []
