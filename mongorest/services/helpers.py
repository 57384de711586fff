from typing import Union

from mongorest.models import DEFAULT_ID_FIELD, Operation

PATCH_DIRECTIVES = ("$set", "$unset", "$push", "$pull")


def get_id_field(operation: Operation) -> Union[str, list[str]]:
    """
    Return the id field(s) configured for the operation's resource.
    """
    return operation.resource.backend_config.id_field or DEFAULT_ID_FIELD


def build_id_query(operation: Operation) -> dict:
    """
    Build the filter matching the operation id against the configured id field(s).

    Several id fields are OR-ed together in their configured order, so a record
    can be addressed by any of its identifying attributes.
    """
    id_field = get_id_field(operation)
    if isinstance(id_field, list):
        return {"$or": [{field: operation.id} for field in id_field]}
    return {id_field: operation.id}


def build_patch_update(data: dict) -> dict:
    """
    Turn a patch payload into a MongoDB update document.

    A payload carrying any update directive is passed through with only those
    directives; anything else is applied as a `$set` of the whole payload.
    """
    directives = {key: data[key] for key in PATCH_DIRECTIVES if data.get(key) is not None}
    if directives:
        return directives
    return {"$set": data}
