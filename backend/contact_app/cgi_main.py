"""CGI entry point: one request from the environment and stdin, one response on stdout.

    python -m contact_app.cgi_main
"""
from http import HTTPStatus
from typing import BinaryIO, Dict, Mapping, Optional, TextIO
from urllib.parse import parse_qs
import os, sys, logging

from contact_app.models.http_types import Request
from contact_app.routers.dispatch import App, default_app
from contact_app.utils.log_config import resolve_level

logger=logging.getLogger(__name__)

class CGIStreamSink:
    def __init__(self, stream: TextIO):
        self.stream=stream
    def status(self, code: int):
        try: phrase=HTTPStatus(code).phrase
        except ValueError: phrase=""
        self.stream.write(f"Status: {code} {phrase}".rstrip()+"\r\n")
    def header(self, name: str, value: str):
        self.stream.write(f"{name}: {value}\r\n")
    def write(self, body: str):
        self.stream.write("\r\n"); self.stream.write(body); self.stream.flush()

def parse_pairs(raw: str)->Dict[str, str]:
    # last value wins for repeated keys
    return {k: v[-1] for k, v in parse_qs(raw, keep_blank_values=True).items()}

def read_form(environ: Mapping[str, str], stdin: BinaryIO)->Dict[str, str]:
    if environ.get("REQUEST_METHOD","").upper()!="POST": return {}
    ctype=(environ.get("CONTENT_TYPE") or "application/x-www-form-urlencoded").strip().lower()
    if not ctype.startswith("application/x-www-form-urlencoded"):
        logger.warning(f"Unsupported CGI content type: {environ.get('CONTENT_TYPE')}"); return {}
    try: length=int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError: length=0
    if length<=0: return {}
    return parse_pairs(stdin.read(length).decode("utf-8", errors="replace"))

def build_request(environ: Mapping[str, str], stdin: BinaryIO)->Request:
    server=dict(environ)
    if not server.get("REQUEST_URI") and server.get("PATH_INFO"):
        qs=server.get("QUERY_STRING","")
        server["REQUEST_URI"]=server["PATH_INFO"]+(f"?{qs}" if qs else "")
    return Request.from_environ(parse_pairs(server.get("QUERY_STRING","")), read_form(server, stdin), server)

def main(environ: Optional[Mapping[str, str]]=None, stdin: Optional[BinaryIO]=None, stdout: Optional[TextIO]=None,
         contact: Optional[App]=None)->int:
    environ=os.environ if environ is None else environ
    stdin=stdin or sys.stdin.buffer; stdout=stdout or sys.stdout
    contact=contact or default_app
    response=contact.handle(build_request(environ, stdin))
    response.send(CGIStreamSink(stdout))
    return 0

if __name__=="__main__":
    logging.basicConfig(level=resolve_level())
    sys.exit(main())
