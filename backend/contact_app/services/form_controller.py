from typing import Optional
import logging

from contact_app.models.http_types import Request, Response
from contact_app.services.contact_validator import ContactFormValidator
from contact_app.services.renderer import Renderer, renderer as default_renderer

logger=logging.getLogger(__name__)

class FormController:
    def __init__(self, validator: Optional[ContactFormValidator]=None, renderer: Optional[Renderer]=None):
        self.validator=validator or ContactFormValidator()
        self.renderer=renderer or default_renderer

    def show_form(self, request: Request) -> Response:
        return Response.html(self.renderer.render_form())

    def handle_submit(self, request: Request) -> Response:
        result=self.validator.validate(request.fields)
        if not result.is_valid:
            return Response.html(self.renderer.render_form(old=result.data, errors=result.errors), status=422)
        logger.info(f"Contact form accepted ({len(result.data['message'])} chars message)")
        return Response.html(self.renderer.render_success(result.data))
