from typing import Callable, List, Optional, Tuple
import logging

from contact_app.models.http_types import Request, Response
from contact_app.services.form_controller import FormController
from contact_app.services.renderer import Renderer, renderer as default_renderer

logger=logging.getLogger(__name__)

Action=Callable[[Request], Response]

def not_found_response(renderer: Optional[Renderer]=None) -> Response:
    return Response.html((renderer or default_renderer).render_not_found(), status=404)

class App:
    """Maps (method, path) to a controller action; anything unmatched is a 404."""
    def __init__(self, controller: Optional[FormController]=None):
        self.controller=controller or FormController()
        self.routes: List[Tuple[str, str, Action]]=[
            ("GET", "/", self.controller.show_form),
            ("POST", "/submit", self.controller.handle_submit),
        ]

    def resolve(self, method: str, path: str) -> Optional[Action]:
        for m, p, action in self.routes:
            if m==method and p==path: return action
        return None

    def handle(self, request: Request) -> Response:
        action=self.resolve(request.method, request.path)
        if action is None:
            logger.warning(f"No route for {request.method} {request.path}")
            return not_found_response(self.controller.renderer)
        response=action(request)
        logger.info(f"{request.method} {request.path} -> {response.status}")
        return response

default_app=App()
def get_app()->App: return default_app
