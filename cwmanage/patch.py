from enum import Enum
from typing import Any, Dict, List, Union


class PatchOperation(Enum):
    ADD = "add"
    REPLACE = "replace"
    REMOVE = "remove"

    def __str__(self):
        return self.value

    @classmethod
    def coerce(cls, operation: Union["PatchOperation", str]) -> "PatchOperation":
        """Accept a member or its string value ("replace")."""
        if isinstance(operation, cls):
            return operation
        try:
            return cls(operation)
        except ValueError:
            valid = ", ".join(op.value for op in cls)
            raise ValueError(f"Unknown patch operation {operation!r}, expected one of: {valid}")


def build_patch_body(operation: Union[PatchOperation, str], field: str, value: Any) -> List[Dict[str, Any]]:
    """
    Build the one-element patch document ConnectWise expects.

    >>> build_patch_body(PatchOperation.REPLACE, "name", "X")
    [{'op': 'replace', 'path': 'name', 'value': 'X'}]
    """
    return [{
        "op": PatchOperation.coerce(operation).value,
        "path": field,
        "value": value,
    }]
