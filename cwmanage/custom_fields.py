from typing import Any, Dict, List, Optional

from cwmanage.exceptions import CustomFieldNotFoundError, ParseError

CUSTOM_FIELDS = "customFields"


def custom_fields_of(record: Any) -> List[Dict[str, Any]]:
    """The customFields list of a record, [] when the record has none."""
    if not isinstance(record, dict):
        raise ParseError(f"Expected a JSON object, got {type(record).__name__}", raw_error=record)

    fields = record.get(CUSTOM_FIELDS) or []
    if not isinstance(fields, list):
        raise ParseError(f"Expected {CUSTOM_FIELDS} to be a list", raw_error=record)
    return fields


def find_custom_field(fields: List[Dict[str, Any]], caption: str) -> Optional[Dict[str, Any]]:
    # First match wins; captions are unique per record in Manage
    for custom_field in fields:
        if isinstance(custom_field, dict) and custom_field.get("caption") == caption:
            return custom_field
    return None


def require_custom_field(record: Any, caption: str, path: Optional[str] = None) -> Dict[str, Any]:
    custom_field = find_custom_field(custom_fields_of(record), caption)
    if custom_field is None:
        raise CustomFieldNotFoundError(caption, path=path)
    return custom_field


def custom_field_override(field_id: int, value: Any) -> List[Dict[str, Any]]:
    """Replacement customFields collection that sets one field by id."""
    return [{"id": field_id, "value": value}]
