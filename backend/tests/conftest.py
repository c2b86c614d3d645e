"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from contact_app.models.http_types import Request
from contact_app.routers.dispatch import App
from contact_app.services.contact_validator import ContactFormValidator
from contact_app.services.form_controller import FormController


class RecordingSink:
    """Response sink that remembers every call in order."""

    def __init__(self):
        self.calls = []

    def status(self, code):
        self.calls.append(("status", code))

    def header(self, name, value):
        self.calls.append(("header", name, value))

    def write(self, body):
        self.calls.append(("write", body))


@pytest.fixture
def validator():
    return ContactFormValidator()


@pytest.fixture
def controller(validator):
    return FormController(validator)


@pytest.fixture
def contact(controller):
    return App(controller)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_request():
    def _make(method="GET", uri="/", form=None):
        return Request.from_environ({}, form or {}, {"REQUEST_METHOD": method, "REQUEST_URI": uri})
    return _make


@pytest.fixture
def valid_form():
    return {
        "name": "Mario Rossi",
        "email": "mario@example.com",
        "message": "Questo è un messaggio di test",
    }
