"""
Response Handler for the Carvoyant API Client

Turns a ``requests.Response`` into an ``APIResponse``. Status codes are not
interpreted: error responses reach the caller exactly like successful ones.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import JSONDecodeError


@dataclass(frozen=True)
class Action:
    """A server-declared follow-up request (e.g. the 'next' page)"""
    name: str
    uri: str


def parse_actions(body: Any) -> List[Action]:
    """Return the hypermedia actions listed in a response body"""
    if not isinstance(body, Mapping):
        return []

    actions = []
    for item in body.get('actions') or []:
        if isinstance(item, Action):
            actions.append(item)
        elif isinstance(item, Mapping):
            actions.append(Action(name=item.get('name'), uri=item.get('uri') or ''))
    return actions


@dataclass
class APIResponse:
    """Status, parsed body and originating request of an API call"""
    status: int
    body: Any
    request_method: str
    request_path: str
    headers: Dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def actions(self) -> List[Action]:
        """Hypermedia actions embedded in the body"""
        return parse_actions(self.body)


class ResponseHandler:
    """Builds ``APIResponse`` objects from raw HTTP responses"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def handle_response(
        self,
        response: requests.Response,
        request_method: str,
        request_path: str
    ) -> APIResponse:
        """
        Wrap a raw response

        Args:
            response: The requests response
            request_method: HTTP method of the request that produced it
            request_path: Path (and query string) of that request

        Returns:
            APIResponse with the JSON body parsed when there is one
        """
        body = self._parse_body(response)

        if not 200 <= response.status_code < 300:
            self.logger.warning(f"{request_method} {request_path} returned HTTP {response.status_code}")

        return APIResponse(
            status=response.status_code,
            body=body,
            request_method=request_method,
            request_path=request_path,
            headers=dict(response.headers or {}),
            text=response.text
        )

    def _parse_body(self, response: requests.Response) -> Any:
        if not response.content:
            return None

        try:
            return response.json()
        except (JSONDecodeError, ValueError):
            self.logger.debug("Response body is not JSON, leaving body empty")
            return None
