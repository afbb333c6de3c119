"""
Vehicle Endpoints for the Carvoyant API Client

Handles vehicle CRUD operations plus the per-vehicle data, data set and
constraint collections.

See http://confluence.carvoyant.com/display/PUBDEV/Vehicle
"""

import warnings
from typing import Any, Dict, Optional

from ..response_handler import APIResponse
from .base_endpoint import BaseEndpoint, ResponseCallback


class VehicleEndpoints(BaseEndpoint):
    """
    Vehicle API endpoints.

    Provides methods for:
    - Vehicle CRUD operations
    - Data points (``mostRecentOnly``, ``key``, search and sort parameters)
    - Data sets
    - Constraints (``activeOnly``, ``type``)
    """

    def _get_base_path(self) -> str:
        """Return the base API path for vehicle endpoints"""
        return '/vehicle'

    def list_vehicles(self, callback: Optional[ResponseCallback] = None) -> APIResponse:
        """Return all visible vehicles"""
        return self._request(self.base_path, 'get', callback=callback)

    def get_vehicle(self, vehicle_id: str, callback: Optional[ResponseCallback] = None) -> APIResponse:
        """Return the details of one vehicle"""
        self._validate_required_params(vehicle_id=vehicle_id)
        return self._request(self._build_endpoint(vehicle_id), 'get', callback=callback)

    def create_vehicle(
        self,
        vehicle_data: Dict[str, Any],
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Create a new vehicle from its data attributes"""
        self._validate_required_params(vehicle_data=vehicle_data)
        return self._request(
            self.base_path + '/', 'post', self._body(vehicle_data, 'vehicle_data'), callback
        )

    def update_vehicle(
        self,
        vehicle_data: Dict[str, Any],
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """
        Update a vehicle

        Args:
            vehicle_data: Vehicle attributes; ``vehicleId`` selects the vehicle
            callback: Optional function invoked with the response
        """
        self._validate_required_params(vehicle_data=vehicle_data)
        body = self._body(vehicle_data, 'vehicle_data')
        self._validate_required_params(**{'vehicle_data.vehicleId': body.get('vehicleId')})

        return self._request(self._build_endpoint(body['vehicleId']), 'post', body, callback)

    def delete_vehicle(self, vehicle_id: str, callback: Optional[ResponseCallback] = None) -> APIResponse:
        """Delete a vehicle"""
        self._validate_required_params(vehicle_id=vehicle_id)
        return self._request(self._build_endpoint(vehicle_id), 'delete', callback=callback)

    def get_vehicle_data(
        self,
        vehicle_id: str,
        query_params: Optional[Dict[str, Any]] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """
        Return data points collected for a vehicle

        Args:
            vehicle_id: The vehicle id
            query_params: Search, sort and pagination parameters. ``mostRecentOnly``
                is only sent when true.
            callback: Optional function invoked with the response

        See http://confluence.carvoyant.com/display/PUBDEV/Data
        """
        self._validate_required_params(vehicle_id=vehicle_id)
        return self._request(self._build_endpoint(vehicle_id, 'data'), 'get', query_params, callback)

    def get_vehicle_data_set(
        self,
        vehicle_id: str,
        query_params: Optional[Dict[str, Any]] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Return data sets for a vehicle (see http://confluence.carvoyant.com/display/PUBDEV/DataSet)"""
        self._validate_required_params(vehicle_id=vehicle_id)
        return self._request(self._build_endpoint(vehicle_id, 'dataSet'), 'get', query_params, callback)

    def list_constraints(
        self,
        vehicle_id: str,
        query_params: Optional[Dict[str, Any]] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """
        Return constraints for a vehicle

        The constraint ``type`` filter is not validated so that new upstream
        types keep working.

        See http://confluence.carvoyant.com/display/PUBDEV/Constraint
        """
        self._validate_required_params(vehicle_id=vehicle_id)
        return self._request(self._build_endpoint(vehicle_id, 'constraint'), 'get', query_params, callback)

    def get_constraint(
        self,
        vehicle_id: str,
        constraint_id: str,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Return one constraint. Deprecated: use list_constraints."""
        warnings.warn(
            "get_constraint is deprecated, use list_constraints",
            DeprecationWarning,
            stacklevel=2
        )
        self._validate_required_params(vehicle_id=vehicle_id, constraint_id=constraint_id)
        return self._request(
            self._build_endpoint(vehicle_id, 'constraint', constraint_id), 'get', callback=callback
        )
