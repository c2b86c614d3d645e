from typing import Any, Dict, Mapping, Optional
import logging

from contact_app.models.contact import ContactField, ValidationResult
from contact_app.utils.validation import FieldValidator

logger=logging.getLogger(__name__)

class ContactFormValidator:
    """Runs every known contact field through :class:`FieldValidator`.

    All failing fields are reported together; unknown keys in the input are ignored.
    """
    def __init__(self, name_min_length: int=2, message_min_length: int=10):
        self.field_validator=FieldValidator(name_min_length=name_min_length, message_min_length=message_min_length)

    def validate(self, raw: Optional[Mapping[str, Any]]) -> ValidationResult:
        raw=raw if isinstance(raw, Mapping) else {}
        data: Dict[str, str]={}; errors: Dict[str, str]={}
        for field in ContactField:
            value, err=self.field_validator.validate(field.value, raw.get(field.value))
            data[field.value]=value
            if err: errors[field.value]=err
        if errors: logger.info(f"Validation failed for fields: {', '.join(errors)}")
        return ValidationResult(data=data, errors=errors)
