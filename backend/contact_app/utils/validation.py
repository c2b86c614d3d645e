import re
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

COMMENT_RE = re.compile(r'<!--.*?-->', re.S)
TAG_RE = re.compile(r'<[^>]+>')
WS_RE = re.compile(r'\s+')
EMAIL_RE = re.compile(r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)+")

def coerce_text(value: Any) -> str:
    """Total conversion of a submitted value to text; never raises."""
    if value is None: return ""
    if isinstance(value, str): return value
    if isinstance(value, (bytes, bytearray)): return bytes(value).decode('utf-8', errors='replace')
    if isinstance(value, (bool, int, float)): return str(value)
    if isinstance(value, (list, tuple, set, frozenset, Mapping)): return ""
    try:
        return str(value)
    except Exception:
        return ""

def strip_tags(text: str) -> str:
    # tag removal only, enclosed text stays visible
    return TAG_RE.sub('', COMMENT_RE.sub('', text))

def collapse_whitespace(text: str) -> str:
    return WS_RE.sub(' ', text)

def sanitize_input(value: Any) -> str:
    return collapse_whitespace(strip_tags(coerce_text(value))).strip()

def is_valid_email(email: str) -> bool:
    if not email or not EMAIL_RE.fullmatch(email): return False
    local, domain = email.split('@')
    if local.startswith('.') or local.endswith('.') or '..' in local: return False
    return all(label and not label.startswith('-') and not label.endswith('-') for label in domain.split('.'))

class ValidationUtils:
    @staticmethod
    def validate_name(name: str, min_length: int=2) -> Dict[str, Any]:
        res={'is_valid': False, 'message': None}
        if not name: res['message']='Il nome è obbligatorio.'; return res
        if len(name)<min_length: res['message']=f'Il nome è obbligatorio e deve contenere almeno {min_length} caratteri.'; return res
        res['is_valid']=True; return res

    @staticmethod
    def validate_email(email: str) -> Dict[str, Any]:
        res={'is_valid': False, 'message': None}
        if not is_valid_email(email): res['message']="Inserisci un'email valida."; return res
        res['is_valid']=True; return res

    @staticmethod
    def validate_message(message: str, min_length: int=10) -> Dict[str, Any]:
        res={'is_valid': False, 'message': None}
        if not message: res['message']='Il messaggio è obbligatorio.'; return res
        if len(message)<min_length: res['message']=f'Il messaggio deve contenere almeno {min_length} caratteri.'; return res
        res['is_valid']=True; return res

class FieldValidator:
    """Sanitizes one submitted value and applies the rule for its field."""

    def __init__(self, name_min_length: int=2, message_min_length: int=10):
        self.name_min_length=name_min_length
        self.message_min_length=message_min_length

    def validate(self, field: str, raw: Any) -> Tuple[str, Optional[str]]:
        value=sanitize_input(raw)
        if field=='name': v=ValidationUtils.validate_name(value, self.name_min_length)
        elif field=='email': v=ValidationUtils.validate_email(value)
        elif field=='message': v=ValidationUtils.validate_message(value, self.message_min_length)
        else: return value, None
        return value, (None if v['is_valid'] else v['message'])
