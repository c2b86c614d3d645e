"""Immutable request/response values passed through the dispatch pipeline."""
import copy
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

HTML_CONTENT_TYPE="text/html; charset=UTF-8"

class ResponseAlreadySentError(RuntimeError):
    pass

def parse_path(uri: Any) -> str:
    if not isinstance(uri, str) or not uri: return "/"
    path=uri.split("#", 1)[0].split("?", 1)[0]
    return path or "/"

class Request(BaseModel):
    """Snapshot of one incoming request.

    ``fields`` and ``query`` hand out deep copies, so callers can mutate what they
    get back without touching the request itself.
    """
    model_config=ConfigDict(frozen=True)

    method: str="GET"
    path: str="/"
    query_params: Dict[str, Any]=Field(default_factory=dict)
    form: Dict[str, Any]=Field(default_factory=dict)

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, v):
        v=v.strip().upper() if isinstance(v, str) else ""
        return v or "GET"

    @field_validator("path", mode="before")
    @classmethod
    def normalize_path(cls, v):
        return parse_path(v)

    @field_validator("query_params", "form", mode="before")
    @classmethod
    def own_copy(cls, v):
        return copy.deepcopy(dict(v)) if v else {}

    @classmethod
    def from_environ(cls, query: Optional[Mapping[str, Any]]=None, form: Optional[Mapping[str, Any]]=None,
                     server: Optional[Mapping[str, Any]]=None) -> "Request":
        server=server or {}
        return cls(method=server.get("REQUEST_METHOD"), path=server.get("REQUEST_URI"),
                   query_params=query or {}, form=form or {})

    @property
    def fields(self) -> Dict[str, Any]:
        return copy.deepcopy(self.form)

    @property
    def query(self) -> Dict[str, Any]:
        return copy.deepcopy(self.query_params)

class ResponseSink(Protocol):
    def status(self, code: int) -> None: ...
    def header(self, name: str, value: str) -> None: ...
    def write(self, body: str) -> None: ...

class Response(BaseModel):
    model_config=ConfigDict(frozen=True)

    status: int=200
    body: str=""
    header_items: Tuple[Tuple[str, str], ...]=(("Content-Type", HTML_CONTENT_TYPE),)
    _sent: bool=PrivateAttr(default=False)

    @field_validator("header_items", mode="after")
    @classmethod
    def ensure_content_type(cls, v):
        if any(name.lower()=="content-type" for name, _ in v): return v
        return (("Content-Type", HTML_CONTENT_TYPE),)+tuple(v)

    @classmethod
    def html(cls, body: str, status: int=200) -> "Response":
        return cls(status=status, body=body, header_items=(("Content-Type", HTML_CONTENT_TYPE),))

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.header_items)

    def send(self, sink: ResponseSink) -> None:
        """Write status, headers and body to ``sink``. Allowed once per response."""
        if self._sent: raise ResponseAlreadySentError(f"response {self.status} already sent")
        self._sent=True
        sink.status(self.status)
        for name, value in self.header_items: sink.header(name, value)
        sink.write(self.body)
