from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field

class ContactField(Enum):
    NAME="name"; EMAIL="email"; MESSAGE="message"

class ValidationResult(BaseModel):
    data: Dict[str, str]=Field(default_factory=lambda: {f.value: "" for f in ContactField})
    errors: Dict[str, str]=Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors
