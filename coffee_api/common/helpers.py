from typing import Any
from urllib.parse import urlsplit, urlunsplit

from bson import ObjectId
from bson.errors import InvalidId

from ..handlers.exceptions import InvalidDocumentIdError

### Identifier and serialization helpers ###

def parse_object_id(document_id: str) -> ObjectId:
    """
    Build an ObjectId from a path parameter.
    Args:
        document_id: The identifier as sent by the client.
    Returns:
        The parsed ObjectId.
    Raises:
        InvalidDocumentIdError: if the string is not a valid ObjectId.
    """
    try:
        return ObjectId(document_id)
    except (InvalidId, TypeError) as e:
        raise InvalidDocumentIdError(document_id) from e

def serialize_document(value: Any) -> Any:
    """
    Convert a document (or any nested value of it) into JSON friendly data.
    ObjectIds become their hex string, everything else is left untouched.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_document(item) for item in value]
    return value

def mask_uri(uri: str) -> str:
    """Hide the password of a connection string before it is logged."""
    parts = urlsplit(uri)
    if parts.password is None:
        return uri
    userinfo, host = parts.netloc.rsplit("@", 1)
    user = userinfo.split(":", 1)[0]
    return urlunsplit(parts._replace(netloc=f"{user}:****@{host}"))
