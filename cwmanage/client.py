import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Union

import requests
from requests.exceptions import RequestException

from cwmanage.config import ClientConfig
from cwmanage.custom_fields import CUSTOM_FIELDS, custom_field_override, require_custom_field
from cwmanage.envelope import Query, build_headers, build_url, normalize_query
from cwmanage.exceptions import ApplicationError, HTTPStatusError, ParseError, TransportError
from cwmanage.pagination import FIRST_PAGE_ID, PAGE_ID_PARAM, next_page_id
from cwmanage.patch import PatchOperation, build_patch_body

logger = logging.getLogger(__name__)


class Client:
    """
    ConnectWise Manage API client.

    Most endpoints return a list of records; use get_all for those, it follows
    pagination and returns every record. A few endpoints (/system/info for
    example) return a single object; use get_single for those.

    Each call opens its own requests.Session unless one is passed in. A client
    built without an injected session can be shared between threads; with an
    injected session every call goes through that one session. The
    configuration is read-only.

    Query examples:
        No query                    [("", "")] or None
        Only the id field           [("fields", "id")]
        Fields plus conditions      [("fields", "id"), ("conditions", "name LIKE '%foo%'")]
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._session = session

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Client":
        return cls(ClientConfig.from_env(dotenv_path))

    def __repr__(self):
        return (
            f"Client(company_id={self.config.company_id!r}, api_url={self.config.api_url!r}, "
            f"codebase={self.config.codebase!r}, api_version={self.config.api_version!r})"
        )

    @contextmanager
    def _open_session(self) -> Iterator[requests.Session]:
        if self._session is not None:
            yield self._session
            return

        session = requests.Session()
        try:
            yield session
        finally:
            session.close()

    def _request(self, session: requests.Session, method: str, path: str, **kwargs) -> requests.Response:
        """Send one request with the envelope headers and check the status code."""
        url = build_url(self.config, path)
        try:
            logger.info(f"Making {method} request to {url}")
            response = session.request(
                method,
                url,
                headers=build_headers(self.config),
                timeout=self.config.timeout,
                **kwargs
            )
        except RequestException as e:
            logger.error(f"Request error: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            try:
                error_data = response.json()
            except ValueError:
                error_data = response.text

            message = f"HTTP {response.status_code} from {method} {url}"
            if isinstance(error_data, dict) and error_data.get("message"):
                message = f"{message}: {error_data['message']}"

            logger.error(message)
            raise HTTPStatusError(message, http_status=response.status_code, raw_error=error_data)

        return response

    def _parse_json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON in response from {response.url}: {e}")
            raise ParseError(
                f"Response body is not valid JSON: {e}",
                http_status=response.status_code,
                raw_error=response.text
            ) from e

    def _raise_for_application_error(self, result: Any, http_status: int, check_errors: bool = True) -> None:
        """
        ConnectWise can answer 200 and still report a failure in the body.

        Args:
            result: Parsed response body
            http_status: Status code of the response
            check_errors: Also treat a non-empty ``errors`` list as a failure
        """
        if not isinstance(result, dict):
            return

        message = result.get("message")
        errors = result.get("errors") if check_errors else None

        if isinstance(errors, list) and errors:
            if not isinstance(message, str):
                message = "; ".join(
                    str(error.get("message", error)) if isinstance(error, dict) else str(error)
                    for error in errors
                )
            logger.error(f"API reported errors: {message}")
            raise ApplicationError(message, errors=errors, http_status=http_status, raw_error=result)

        if isinstance(message, str):
            logger.error(f"API reported an error: {message}")
            raise ApplicationError(message, http_status=http_status, raw_error=result)

    def get_single(self, path: str, query: Query = None) -> Any:
        """
        GET an endpoint that returns a single object rather than a list.

        Args:
            path: API path, e.g. /system/info
            query: Optional query pairs

        Returns:
            The parsed JSON body
        """
        with self._open_session() as session:
            response = self._request(session, "GET", path, params=normalize_query(query))
            return self._parse_json(response)

    def iter_pages(self, path: str, query: Query = None) -> Iterator[List[Any]]:
        """
        Yield every page of a list endpoint, in order.

        Walking starts at page id 1 and follows the ``link`` header until it is
        missing, empty, or carries no pageId. A failing page stops the walk.
        """
        params = normalize_query(query)
        page_id = FIRST_PAGE_ID
        page_number = 0

        with self._open_session() as session:
            while page_id is not None:
                response = self._request(session, "GET", path, params=[(PAGE_ID_PARAM, page_id)] + params)
                page = self._parse_json(response)
                if not isinstance(page, list):
                    raise ParseError(
                        f"Expected a JSON array from {path}, got {type(page).__name__}",
                        http_status=response.status_code,
                        raw_error=page
                    )

                page_id = next_page_id(response.headers)
                page_number += 1
                logger.debug(f"Fetched page {page_number} of {path} ({len(page)} records), next page id: {page_id}")
                yield page

    def get_all(self, path: str, query: Query = None) -> List[Any]:
        """
        GET every record of a list endpoint, following pagination.

        Set conditions in the query: /service/tickets without one returns
        every ticket in the system.

        Args:
            path: API path, e.g. /system/members
            query: Optional query pairs

        Returns:
            All records from all pages, in the order the API returned them
        """
        records = []
        for page in self.iter_pages(path, query):
            records.extend(page)

        logger.info(f"Retrieved {len(records)} records from {path}")
        return records

    def post(self, path: str, body: Any) -> Any:
        """
        POST a new record.

        Args:
            path: API path, e.g. /service/tickets
            body: Serialized JSON (str or bytes) or a JSON-serializable object

        Returns:
            The parsed JSON response

        Raises:
            ApplicationError: if the response carries ``errors`` or a ``message``
        """
        if isinstance(body, (str, bytes)):
            payload = {"data": body}
        else:
            payload = {"json": body}

        with self._open_session() as session:
            response = self._request(session, "POST", path, **payload)
            result = self._parse_json(response)

        self._raise_for_application_error(result, response.status_code)
        return result

    def patch(self, path: str, operation: Union[PatchOperation, str], field: str, value: Any) -> Any:
        """PATCH one field of a record, e.g. patch("/company/companies/250", "replace", "name", "X")."""
        body = build_patch_body(operation, field, value)

        with self._open_session() as session:
            response = self._request(session, "PATCH", path, json=body)
            result = self._parse_json(response)

        self._raise_for_application_error(result, response.status_code, check_errors=False)
        return result

    def _get_custom_field(self, path: str, caption: str) -> Dict[str, Any]:
        record = self.get_single(path, [("fields", CUSTOM_FIELDS)])
        return require_custom_field(record, caption, path=path)

    def get_custom_field(self, path: str, caption: str) -> Any:
        """
        Value of the custom field labelled caption on the record at path.

        Raises:
            CustomFieldNotFoundError: if the record has no such custom field
        """
        return self._get_custom_field(path, caption).get("value")

    def get_custom_field_id(self, path: str, caption: str) -> int:
        """
        Numeric id of the custom field labelled caption.

        Raises CustomFieldNotFoundError when the caption is absent; an id of 0
        is returned as-is.
        """
        custom_field = self._get_custom_field(path, caption)
        field_id = custom_field.get("id")
        if field_id is None:
            raise ParseError(f"Custom field '{caption}' on {path} has no id", raw_error=custom_field)
        return field_id

    def patch_custom_field(self, path: str, caption: str, value: Any) -> Any:
        field_id = self.get_custom_field_id(path, caption)
        logger.info(f"Setting custom field '{caption}' (id {field_id}) on {path}")
        return self.patch(path, PatchOperation.REPLACE, CUSTOM_FIELDS, custom_field_override(field_id, value))
