# src/httpconv/conversion/data_models.py
"""Data models for requests, group trees and collections."""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..core.errors import CollectionFormatError, RequestFormatError
from ..utils.constants import (
    BEARER_TOKEN_KEY,
    DEFAULT_DESCRIPTION,
    POSTMAN_SCHEMA_URL,
    VARIABLE_TYPE,
    AuthType,
    BodyMode,
)


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_list(value: Any) -> List[Any]:
    """Wire lists of the wrong type read as empty."""
    return value if isinstance(value, list) else []


@dataclass
class Header:
    """A single request header."""

    key: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Header":
        return cls(key=_as_str(data.get("key")), value=_as_str(data.get("value")))


@dataclass
class AuthContext:
    """Auth descriptor attached to a collection, folder, item or request."""

    auth_type: str
    token: Optional[str] = None

    @property
    def bearer_token(self) -> Optional[str]:
        """The token if this is bearer auth with a token, else None."""
        if self.auth_type == AuthType.BEARER.value and self.token is not None:
            return self.token
        return None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.auth_type}
        if self.bearer_token is not None:
            data[AuthType.BEARER.value] = [
                {"key": BEARER_TOKEN_KEY, "value": self.token, "type": VARIABLE_TYPE}
            ]
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Optional["AuthContext"]:
        """
        Build an AuthContext from the wire shape.

        Returns None when data is not an auth object at all, so the caller
        keeps the inherited auth.
        """
        if not isinstance(data, dict):
            return None
        auth_type = _as_str(data.get("type"))
        token = None
        if auth_type == AuthType.BEARER.value:
            for entry in _as_list(data.get(AuthType.BEARER.value)):
                if isinstance(entry, dict) and entry.get("key") == BEARER_TOKEN_KEY:
                    if isinstance(entry.get("value"), str):
                        token = entry["value"]
                        break
        return cls(auth_type=auth_type, token=token)


def _url_from_wire(url: Any) -> str:
    if isinstance(url, str):
        return url
    if isinstance(url, dict) and isinstance(url.get("raw"), str):
        return url["raw"]
    return ""


def _body_from_wire(body: Any) -> Optional[str]:
    """Flatten a wire body into request-file text; unsupported modes give None."""
    if not isinstance(body, dict):
        return None
    mode = body.get("mode")
    if mode == BodyMode.RAW.value:
        raw = body.get("raw")
        return raw if isinstance(raw, str) and raw else None
    if mode == BodyMode.FORMDATA.value:
        lines = []
        for fld in _as_list(body.get(BodyMode.FORMDATA.value)):
            if not isinstance(fld, dict):
                continue
            key = _as_str(fld.get("key"))
            if key:
                lines.append(f"{key}: {_as_str(fld.get('value'))}\n")
        return "".join(lines) or None
    return None


@dataclass
class RequestRecord:
    """One HTTP request."""

    name: str
    method: str
    url: str
    headers: List[Header] = field(default_factory=list)
    body: Optional[str] = None
    auth: Optional[AuthContext] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the collection's request shape; body only when non-empty."""
        data: Dict[str, Any] = {
            "method": self.method,
            "url": self.url,
            "header": [h.to_dict() for h in self.headers],
        }
        if self.body:
            data["body"] = {"mode": BodyMode.RAW.value, "raw": self.body}
        if self.auth is not None:
            data["auth"] = self.auth.to_dict()
        return data

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> "RequestRecord":
        headers = [Header.from_dict(h) for h in _as_list(data.get("header")) if isinstance(h, dict)]
        return cls(
            name=name,
            method=_as_str(data.get("method")),
            url=_url_from_wire(data.get("url")),
            headers=headers,
            body=_body_from_wire(data.get("body")),
            auth=AuthContext.from_dict(data.get("auth")),
        )


@dataclass
class RequestNode:
    """Leaf of the group tree: one named request."""

    name: str
    request: RequestRecord
    auth: Optional[AuthContext] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "request": self.request.to_dict()}
        if self.auth is not None:
            data["auth"] = self.auth.to_dict()
        return data


@dataclass
class FolderNode:
    """Container of the group tree: a directory or a request file."""

    name: str
    children: List["GroupNode"] = field(default_factory=list)
    auth: Optional[AuthContext] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "item": [child.to_dict() for child in self.children],
        }
        if self.auth is not None:
            data["auth"] = self.auth.to_dict()
        return data

    def iter_requests(self):
        """Yield every RequestNode below this folder, depth first."""
        for child in self.children:
            if isinstance(child, FolderNode):
                yield from child.iter_requests()
            else:
                yield child


GroupNode = Union[FolderNode, RequestNode]


def node_from_dict(data: Any, children: Optional[List[GroupNode]] = None) -> GroupNode:
    """
    Map one wire node onto its variant.

    A node whose ``item`` is a list is a folder; otherwise it needs a
    ``request`` object. Folder children are not parsed here: callers pass
    them in after handling each child on its own.

    Raises:
        RequestFormatError: If the node is neither a folder nor a request
    """
    if not isinstance(data, dict):
        raise RequestFormatError(f"Expected an object, got {type(data).__name__}")
    name = _as_str(data.get("name"))
    auth = AuthContext.from_dict(data.get("auth"))
    if isinstance(data.get("item"), list):
        return FolderNode(name=name, children=list(children or []), auth=auth)
    request = data.get("request")
    if not isinstance(request, dict):
        raise RequestFormatError(f"Item '{name}' has neither an item list nor a request object")
    return RequestNode(name=name, request=RequestRecord.from_dict(name, request), auth=auth)


@dataclass
class Variable:
    """Collection variable."""

    key: str
    value: str
    type: str = VARIABLE_TYPE

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value, "type": self.type}


@dataclass
class Collection:
    """Root of a request collection."""

    name: str
    items: List[GroupNode] = field(default_factory=list)
    variables: List[Variable] = field(default_factory=list)
    description: str = DEFAULT_DESCRIPTION
    postman_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    schema: str = POSTMAN_SCHEMA_URL
    auth: Optional[AuthContext] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert Collection to the JSON document shape."""
        data: Dict[str, Any] = {
            "info": {
                "name": self.name,
                "_postman_id": self.postman_id,
                "description": self.description,
                "schema": self.schema,
            },
            "item": [node.to_dict() for node in self.items],
            "variable": [v.to_dict() for v in self.variables],
        }
        if self.auth is not None:
            data["auth"] = self.auth.to_dict()
        return data

    @staticmethod
    def top_level_items(data: Any) -> List[Any]:
        """
        Return the raw top-level item list of a collection document.

        Raises:
            CollectionFormatError: If there is no top-level item list
        """
        if not isinstance(data, dict) or not isinstance(data.get("item"), list):
            raise CollectionFormatError("invalid collection format: top-level 'item' list is required")
        return data["item"]

    @classmethod
    def header_from_dict(cls, data: Dict[str, Any]) -> "Collection":
        """Build a Collection with info, variables and auth but no items."""
        info = data.get("info") if isinstance(data.get("info"), dict) else {}
        description = info.get("description")
        if isinstance(description, dict):  # {"content": ..., "type": "text/markdown"}
            description = description.get("content")
        variables = [
            Variable(
                key=_as_str(v.get("key")),
                value=_as_str(v.get("value")),
                type=_as_str(v.get("type")) or VARIABLE_TYPE,
            )
            for v in _as_list(data.get("variable"))
            if isinstance(v, dict)
        ]
        return cls(
            name=_as_str(info.get("name")),
            description=_as_str(description) or DEFAULT_DESCRIPTION,
            postman_id=_as_str(info.get("_postman_id")) or str(uuid.uuid4()),
            schema=_as_str(info.get("schema")) or POSTMAN_SCHEMA_URL,
            variables=variables,
            auth=AuthContext.from_dict(data.get("auth")),
        )

    def count_requests(self) -> int:
        total = 0
        for node in self.items:
            total += sum(1 for _ in node.iter_requests()) if isinstance(node, FolderNode) else 1
        return total
