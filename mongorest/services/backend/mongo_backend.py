import asyncio
import logging
from typing import Optional

from mongorest import config
from mongorest.config import Context, get_mongo_client
from mongorest.models import Operation
from mongorest.services.backend.rest_backend import RestBackendInterface
from mongorest.services.helpers import build_id_query, build_patch_update


class MongoRestBackend(RestBackendInterface):
    """
    Translates REST operations into MongoDB collection calls.

    The client is created once and shared by every call; collections are
    resolved per call from the operation's resource configuration. Blocking
    driver calls run on a worker thread so callers are never blocked.
    """

    def __init__(self, logger: logging.Logger, context: Context):
        self.logger = logger
        self.cfg = context.get("mongodb")
        self.logger.debug("Initializing the MongoDB REST Backend: %s", self.cfg)
        self.client = get_mongo_client(self.cfg)

    async def _get_collection(self, operation: Operation):
        collection_name = operation.resource.backend_config.collection
        return self.client[self.cfg.name][collection_name]

    async def _run(self, coll, name: str, func, *args):
        try:
            return await asyncio.to_thread(func, *args)
        except Exception as e:
            self.logger.error("Error running %s on collection '%s': %s", name, coll.name, e)
            raise

    async def list(self, operation: Operation) -> list[dict]:
        self.logger.debug("mongo:list: %s", operation.resource)
        coll = await self._get_collection(operation)
        return await self._run(coll, "list", lambda: list(coll.find({})))

    async def read(self, operation: Operation) -> dict:
        q = build_id_query(operation)
        self.logger.debug("mongo:read: %s", q)
        coll = await self._get_collection(operation)
        return await self._run(coll, "read", coll.find_one, q)

    async def create(self, operation: Operation):
        data = await operation.payload
        coll = await self._get_collection(operation)
        self.logger.debug("mongo:create: %s", coll.name)
        return await self._run(coll, "create", coll.insert_one, data)

    async def update(self, operation: Operation):
        q = build_id_query(operation)
        data = await operation.payload
        coll = await self._get_collection(operation)
        self.logger.debug("mongo:update: %s", q)
        return await self._run(coll, "update", coll.replace_one, q, data)

    async def patch(self, operation: Operation):
        q = build_id_query(operation)
        data = await operation.payload
        coll = await self._get_collection(operation)
        update_op = build_patch_update(data)
        self.logger.debug("mongo:patch: %s %s", q, update_op)
        return await self._run(coll, "patch", coll.update_one, q, update_op)

    async def remove(self, operation: Operation):
        q = build_id_query(operation)
        self.logger.debug("mongo:remove: %s", q)
        coll = await self._get_collection(operation)
        return await self._run(coll, "remove", coll.delete_one, q)


def create_backend(logger: Optional[logging.Logger] = None, context: Optional[Context] = None) -> MongoRestBackend:
    """
    Build a MongoDB REST backend, falling back to the application logger and context.
    """
    logger = logger or config.logger
    context = context or config.context
    return MongoRestBackend(logger=logger, context=context)
