"""
This module defines the configuration and setup for the MongoRest backend.

It includes:
- The `Settings` class, which manages application configuration using Pydantic's `BaseSettings`.
- Logger setup for consistent logging throughout the application.
- The `Context` accessor handed to backends, exposing the `mongodb` and `resources` sections.
- A factory for the document store client, backed by either a MongoDB server or mongomock.

Attributes:
    settings (Settings): Singleton instance of the application settings.
    logger (logging.Logger): Configured logger for the application.
    context (Context): Configuration accessor built from `settings`.
"""
import logging

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from mongorest.models import BackendConfig, MongoConfig, ResourceConfig


class Settings(BaseSettings):
    """
    Settings configuration class for the MongoRest backend.
    Values can be overridden through environment variables or a `.env` file.
    Attributes:
        PROJECT_NAME (str): The name of the project, also used as the logger name. Default is "MongoRest".
        LOG_LEVEL (str): Logging level name. Default is "INFO".
        MONGO_DB_USER (str): MongoDB username.
        MONGO_DB_PASSWORD (str): MongoDB password.
        MONGO_DB_URI (str): URI for connecting to the MongoDB instance, may reference the user and password.
        MONGO_DB_NAME (str): Name of the MongoDB database. Default is "mongorest".
        OBJECT_STORE (str): Type of object store to use ("mongo", "mongomock"). Default is "mongo".
        MONGOMOCK_DB_NAME (str): Name of the MongoMock database. Default is "test".
        RESOURCES (dict[str, BackendConfig]): Resource name to backend configuration, JSON encoded in the environment.
        model_config (ConfigDict): Configuration for loading environment variables from a `.env` file.
    """

    PROJECT_NAME: str = "MongoRest"
    LOG_LEVEL: str = "INFO"
    MONGO_DB_USER: str = ""
    MONGO_DB_PASSWORD: str = ""
    MONGO_DB_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "mongorest"
    OBJECT_STORE: str = "mongo"  # mongo, mongomock
    MONGOMOCK_DB_NAME: str = "test"
    RESOURCES: dict[str, BackendConfig] = {}

    model_config = ConfigDict(env_file=".env", extra="ignore")


class Context:
    """
    Read-only configuration accessor handed to backends.

    Sections are resolved once into explicit structs so backends never probe
    optional paths at runtime.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._sections = {
            "mongodb": self._mongo_config,
            "resources": self._resources,
        }

    def get(self, key: str):
        if key not in self._sections:
            raise KeyError(f"Unknown configuration section: {key}")
        return self._sections[key]()

    def _mongo_config(self) -> MongoConfig:
        if self.settings.OBJECT_STORE == "mongomock":
            return MongoConfig(url="mongomock://localhost", name=self.settings.MONGOMOCK_DB_NAME, object_store="mongomock")
        url = self.settings.MONGO_DB_URI.format(
            MONGO_DB_USER=self.settings.MONGO_DB_USER,
            MONGO_DB_PASSWORD=self.settings.MONGO_DB_PASSWORD,
        )
        return MongoConfig(url=url, name=self.settings.MONGO_DB_NAME, object_store=self.settings.OBJECT_STORE)

    def _resources(self) -> dict[str, ResourceConfig]:
        return {
            name: ResourceConfig(name=name, backend_config=backend_config)
            for name, backend_config in self.settings.RESOURCES.items()
        }


# Initialize settings
settings = Settings()

# Logger setup
def setup_logger():
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)-8s %(levelname)-8s %(name)s:%(filename)s:%(lineno)d %(funcName)s:%(message)s",
    )
    return logging.getLogger(settings.PROJECT_NAME)

# Initialize logger
logger = setup_logger()

context = Context(settings)


def get_mongo_client(cfg: MongoConfig):
    """
    Build the document store client for the given connection settings.

    pymongo connects in the background, so this never blocks on the server.
    """
    if cfg.object_store == "mongomock":
        import mongomock
        return mongomock.MongoClient()
    if cfg.object_store == "mongo":
        from pymongo import MongoClient
        return MongoClient(cfg.url)
    raise ValueError(f"Unsupported object store type: {cfg.object_store}")
