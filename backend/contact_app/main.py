from fastapi import Depends, FastAPI, HTTPException, Request as HTTPRequest
from fastapi.responses import HTMLResponse
from contact_app.models.http_types import Request
from contact_app.routers.dispatch import App, get_app
from contact_app.utils.log_config import resolve_level
from typing import Any, Dict
import logging

logging.basicConfig(level=resolve_level())
logger=logging.getLogger(__name__)

METHODS=["GET","HEAD","POST","PUT","PATCH","DELETE","OPTIONS","TRACE"]

class HTMLResponseSink:
    """Collects what Response.send writes and turns it into a Starlette response."""
    def __init__(self):
        self.status_code=200; self.headers: Dict[str, str]={}; self.body=""
    def status(self, code: int): self.status_code=code
    def header(self, name: str, value: str): self.headers[name]=value
    def write(self, body: str): self.body+=body
    def to_response(self)->HTMLResponse:
        return HTMLResponse(content=self.body, status_code=self.status_code, headers=self.headers)

app=FastAPI(title="Contact Form", version="1.0.0", docs_url=None, redoc_url=None, openapi_url=None)
logger.info("Contact form app initialized")

async def to_request(http_request: HTTPRequest)->Request:
    # empty for anything that is not urlencoded or multipart
    form: Dict[str, Any]=dict(await http_request.form())
    uri=http_request.url.path+(f"?{http_request.url.query}" if http_request.url.query else "")
    return Request(method=http_request.method, path=uri, query_params=dict(http_request.query_params), form=form)

@app.api_route("/{full_path:path}", methods=METHODS, response_class=HTMLResponse)
async def dispatch(http_request: HTTPRequest, full_path: str, contact: App=Depends(get_app)):
    try:
        response=contact.handle(await to_request(http_request))
    except Exception as e:
        logger.error(f"Dispatch error on {http_request.method} /{full_path}: {e}")
        raise HTTPException(500, f"Dispatch error: {e}")
    sink=HTMLResponseSink()
    response.send(sink)
    return sink.to_response()
