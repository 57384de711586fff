import json
from functools import lru_cache

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder

from mongorest.config import context, logger
from mongorest.models import DEFAULT_ID_FIELD, Operation, ResourceConfig
from mongorest.services.backend import RestBackendInterface, create_backend

router = APIRouter(prefix="/api/v1")


@lru_cache
def get_backend() -> RestBackendInterface:
    return create_backend()


def get_resources() -> dict[str, ResourceConfig]:
    return context.get("resources")


def resolve_resource(resource_name: str, resources: dict = Depends(get_resources)) -> ResourceConfig:
    if resource_name not in resources:
        raise HTTPException(status_code=404, detail=f"Unknown resource '{resource_name}'")
    return resources[resource_name]


def parse_id(resource: ResourceConfig, value: str):
    """
    Convert a path id to an ObjectId when it addresses the default `_id` field.
    """
    if resource.backend_config.id_field == DEFAULT_ID_FIELD and len(value) == 24 and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def serialize(document):
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


async def read_json_object(request: Request) -> dict:
    """
    Parse the request body, rejecting anything that is not a JSON object with a 400.
    """
    try:
        data = await request.json()
    except json.JSONDecodeError as e:
        logger.error("Invalid request body: %s", e)
        raise HTTPException(status_code=400, detail="Request body is not valid JSON") from e
    if not isinstance(data, dict):
        logger.error("Request body is a %s, expected an object", type(data).__name__)
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return data


@router.get("/{resource_name}")
async def list_documents(resource: ResourceConfig = Depends(resolve_resource),
                         backend: RestBackendInterface = Depends(get_backend)):
    documents = await backend.list(Operation(resource=resource))
    return serialize(documents)


@router.get("/{resource_name}/{document_id}")
async def read_document(document_id: str, resource: ResourceConfig = Depends(resolve_resource),
                        backend: RestBackendInterface = Depends(get_backend)):
    document = await backend.read(Operation(resource=resource, id=parse_id(resource, document_id)))
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return serialize(document)


@router.post("/{resource_name}", status_code=status.HTTP_201_CREATED)
async def create_document(request: Request, resource: ResourceConfig = Depends(resolve_resource),
                          backend: RestBackendInterface = Depends(get_backend)):
    result = await backend.create(Operation(resource=resource, payload=read_json_object(request)))
    return {"id": serialize(result.inserted_id)}


@router.put("/{resource_name}/{document_id}")
async def update_document(document_id: str, request: Request, resource: ResourceConfig = Depends(resolve_resource),
                          backend: RestBackendInterface = Depends(get_backend)):
    operation = Operation(resource=resource, id=parse_id(resource, document_id), payload=read_json_object(request))
    result = await backend.update(operation)
    return {"matched": result.matched_count, "modified": result.modified_count}


@router.patch("/{resource_name}/{document_id}")
async def patch_document(document_id: str, request: Request, resource: ResourceConfig = Depends(resolve_resource),
                         backend: RestBackendInterface = Depends(get_backend)):
    operation = Operation(resource=resource, id=parse_id(resource, document_id), payload=read_json_object(request))
    result = await backend.patch(operation)
    return {"matched": result.matched_count, "modified": result.modified_count}


@router.delete("/{resource_name}/{document_id}")
async def remove_document(document_id: str, resource: ResourceConfig = Depends(resolve_resource),
                          backend: RestBackendInterface = Depends(get_backend)):
    result = await backend.remove(Operation(resource=resource, id=parse_id(resource, document_id)))
    return {"deleted": result.deleted_count}
