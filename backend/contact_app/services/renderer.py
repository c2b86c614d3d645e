"""Jinja2 rendering of the contact pages.

Autoescape is always on: every value reaching a template is escaped for both
text and attribute context.
"""
import os
from typing import Dict, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATE_DIR=os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")

class Renderer:
    def __init__(self, template_dir: str=TEMPLATE_DIR):
        self.env=Environment(loader=FileSystemLoader(template_dir), autoescape=select_autoescape(["html"]))

    def render_form(self, old: Optional[Mapping[str, str]]=None, errors: Optional[Mapping[str, str]]=None) -> str:
        old=dict(old or {}); errors=dict(errors or {})
        values: Dict[str, str]={k: old.get(k, "") for k in ("name", "email", "message")}
        return self.env.get_template("form.html").render(old=values, errors=errors)

    def render_success(self, data: Mapping[str, str]) -> str:
        return self.env.get_template("success.html").render(name=data.get("name", ""))

    def render_not_found(self) -> str:
        return self.env.get_template("not_found.html").render()

renderer=Renderer()
