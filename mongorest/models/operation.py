from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_ID_FIELD = "_id"


class MongoConfig(BaseModel):
    """Connection settings for the document store."""
    url: str = Field(..., description="MongoDB connection string.")
    name: str = Field(..., description="Name of the database holding the resource collections.")
    object_store: str = Field(default="mongo", description="Client implementation: \"mongo\" or \"mongomock\".")


class BackendConfig(BaseModel):
    """
    Per-resource settings naming the target collection and its identifying field(s).
    """
    model_config = ConfigDict(populate_by_name=True)

    collection: str = Field(..., description="Name of the target collection.")
    id_field: Union[str, list[str]] = Field(
        default=DEFAULT_ID_FIELD,
        alias="idField",
        description="A single id field name or an ordered list of alternative id fields.",
    )


class ResourceConfig(BaseModel):
    """Static configuration of a resource type exposed by the REST layer."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, description="Resource name used in routes.")
    backend_config: BackendConfig = Field(..., alias="backendConfig")


class Operation(BaseModel):
    """
    Request context handed to every backend method.

    `payload` is an awaitable resolving to the request document. It is awaited
    exactly once, by the backend, before any store call that embeds it.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    resource: ResourceConfig
    id: Any = None
    payload: Any = None
