"""
Account Endpoints for the Carvoyant API Client

See http://confluence.carvoyant.com/display/PUBDEV/Account
"""

from typing import Any, Dict, Optional

from ..response_handler import APIResponse
from .base_endpoint import BaseEndpoint, ResponseCallback


class AccountEndpoints(BaseEndpoint):
    """Account management. Creating and deleting accounts needs a partner application key."""

    def _get_base_path(self) -> str:
        return '/account'

    def list_accounts(self, callback: Optional[ResponseCallback] = None) -> APIResponse:
        """Return all visible accounts"""
        return self._request(self.base_path + '/', 'get', callback=callback)

    def get_account(self, account_id: str, callback: Optional[ResponseCallback] = None) -> APIResponse:
        """Return the details of one account"""
        self._validate_required_params(account_id=account_id)
        return self._request(self._build_endpoint(account_id), 'get', callback=callback)

    def create_account(
        self,
        account_data: Dict[str, Any],
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Create an account from its data attributes"""
        self._validate_required_params(account_data=account_data)
        return self._request(
            self.base_path + '/', 'post', self._body(account_data, 'account_data'), callback
        )

    def update_account(
        self,
        account_data: Dict[str, Any],
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Update an account; ``account_data['id']`` selects the account"""
        self._validate_required_params(account_data=account_data)
        body = self._body(account_data, 'account_data')
        self._validate_required_params(**{'account_data.id': body.get('id')})

        return self._request(self._build_endpoint(body['id']), 'post', body, callback)

    def delete_account(self, account_id: str, callback: Optional[ResponseCallback] = None) -> APIResponse:
        """Delete an account"""
        self._validate_required_params(account_id=account_id)
        return self._request(self._build_endpoint(account_id), 'delete', callback=callback)
