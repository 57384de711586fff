from .mongo_backend import MongoRestBackend, create_backend
from .rest_backend import RestBackendInterface

__all__ = ["MongoRestBackend", "RestBackendInterface", "create_backend"]
