from .operation import DEFAULT_ID_FIELD, BackendConfig, MongoConfig, Operation, ResourceConfig

__all__ = ["DEFAULT_ID_FIELD", "BackendConfig", "MongoConfig", "Operation", "ResourceConfig"]
