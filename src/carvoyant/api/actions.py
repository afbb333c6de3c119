"""
Hypermedia action resolution for the Carvoyant API Client

Paginated responses embed a list of named actions (``next``, ``previous``)
whose URIs describe the follow-up request. This module turns such an action
back into request parameters and a request path.

See http://confluence.carvoyant.com/display/PUBDEV/JSON+Success+Response+Format
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote_plus, urlsplit

from ..core.errors import ActionNotFoundError
from .request_builder import OMIT, decode_parameter
from .response_handler import Action, parse_actions


NEXT_ACTION = 'next'
PREVIOUS_ACTION = 'previous'


def _response_body(response: Any) -> Any:
    if response is None:
        raise TypeError('response must be defined.')

    if isinstance(response, Mapping):
        return response.get('body')
    if hasattr(response, 'body'):
        return response.body

    raise TypeError('response must be an Object.')


def find_action(response: Any, action_name: str) -> Action:
    """
    Return the first action named ``action_name``

    Raises:
        TypeError: If the response or action name is missing or mistyped
        ActionNotFoundError: If no action has that name
    """
    if action_name is None:
        raise TypeError('action_name must be defined.')
    elif not isinstance(action_name, str):
        raise TypeError('action_name must be a String.')

    body = _response_body(response)

    for action in parse_actions(body):
        if action.name == action_name:
            return action

    raise ActionNotFoundError(action_name)


def split_query(uri: str) -> List[Tuple[str, Optional[str]]]:
    """
    Split an action URI's query string into decoded (key, value) pairs

    The value is None for pairs that are not exactly ``key=value``.
    """
    query = uri.split('?')[1] if '?' in uri else ''
    query = query.split('#')[0]

    pairs = []
    for param in query.split('&'):
        parts = param.split('=')
        key = unquote_plus(parts[0])
        if not key:
            continue
        value = unquote_plus(parts[1]) if len(parts) == 2 else None
        pairs.append((key, value))

    return pairs


def action_parameters(response: Any, action_name: str) -> Dict[str, Any]:
    """
    Return the request parameters needed to follow up on an action

    Special parameters are converted back to their typed form; every other
    parameter is kept as the decoded string.

    Args:
        response: An APIResponse, or any object/mapping carrying ``body``
        action_name: The action to retrieve the details for

    Returns:
        Parameter mapping suitable for RequestBuilder.build_and_send
    """
    action = find_action(response, action_name)

    parameters: Dict[str, Any] = {}
    for key, raw in split_query(action.uri):
        value = decode_parameter(key, raw)
        if value is not OMIT:
            parameters[key] = value

    return parameters


def action_request_path(request_path: str, api_url: str) -> str:
    """
    Derive the API path to replay from the path of an earlier request

    Drops the query string and the API base path (``/v1/api`` or ``/api``).
    """
    path = request_path.split('?')[0]

    base_path = urlsplit(api_url).path.rstrip('/')
    if base_path and (path == base_path or path.startswith(base_path + '/')):
        path = path[len(base_path):]
    elif '/api/' in path or path.endswith('/api'):
        path = path.split('/api', 1)[1]

    return path or '/'
