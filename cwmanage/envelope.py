import base64
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from cwmanage.config import ClientConfig

Query = Union[Mapping[str, str], Sequence[Tuple[str, str]], None]


def build_url(config: ClientConfig, path: str) -> str:
    """Full API URL for path, e.g. /system/info."""
    return f"https://{config.api_url}/{config.codebase}/apis/{config.api_version}{path}"


def build_auth_header(config: ClientConfig) -> str:
    credentials = f"{config.company_id}+{config.public_key}:{config.private_key}"
    encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


def build_headers(config: ClientConfig) -> Dict[str, str]:
    """Headers sent with every request"""
    return {
        "Authorization": build_auth_header(config),
        "Content-Type": "application/json",
        "clientid": config.client_id,
        "pagination-type": "forward-only",
    }


def normalize_query(query: Query) -> List[Tuple[str, str]]:
    """
    Turn a caller query into ordered (key, value) pairs.

    Accepts None, a mapping, or a sequence of pairs. A ("", "") pair is the
    "no filter" placeholder and is dropped.

    Examples:
        [("", "")]                                  -> []
        [("fields", "id")]                          -> [("fields", "id")]
        {"conditions": "name LIKE '%foo%'"}         -> [("conditions", "name LIKE '%foo%'")]
    """
    if not query:
        return []

    pairs = query.items() if isinstance(query, Mapping) else query
    return [(key, value) for key, value in pairs if key or value]
