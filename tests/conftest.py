from unittest.mock import MagicMock

import pytest

from mongorest.config import Context, Settings
from mongorest.models import Operation, ResourceConfig
from mongorest.services.backend import MongoRestBackend


@pytest.fixture
def mock_context():
    return Context(Settings(_env_file=None, OBJECT_STORE="mongomock", MONGOMOCK_DB_NAME="unit"))


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def backend(mock_logger, mock_context):
    return MongoRestBackend(logger=mock_logger, context=mock_context)


def make_resource(collection: str, id_field=None) -> ResourceConfig:
    backend_config = {"collection": collection}
    if id_field is not None:
        backend_config["idField"] = id_field
    return ResourceConfig(name=collection, backendConfig=backend_config)


def make_operation(collection: str, id=None, payload=None, id_field=None) -> Operation:
    return Operation(resource=make_resource(collection, id_field), id=id, payload=payload)


async def resolved(value):
    return value
