"""
Trip Endpoints for the Carvoyant API Client

See http://confluence.carvoyant.com/display/PUBDEV/Trip
"""

from typing import Any, Dict, Optional

from ..response_handler import APIResponse
from .base_endpoint import BaseEndpoint, ResponseCallback


class TripEndpoints(BaseEndpoint):
    """Trips recorded for a vehicle"""

    def _get_base_path(self) -> str:
        return '/vehicle'

    def list_trips(
        self,
        vehicle_id: str,
        query_params: Optional[Dict[str, Any]] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """
        Return the trips of a vehicle

        Args:
            vehicle_id: The vehicle id
            query_params: ``includeData``, ``startTime``/``endTime`` (datetimes or
                wire timestamps) and the search, sort and pagination parameters
            callback: Optional function invoked with the response

        Returns:
            The first page of trips; follow it with Client.next_page
        """
        self._validate_required_params(vehicle_id=vehicle_id)
        return self._request(self._build_endpoint(vehicle_id, 'trip'), 'get', query_params, callback)

    def get_trip(
        self,
        vehicle_id: str,
        trip_id: str,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Return the details of one trip"""
        self._validate_required_params(vehicle_id=vehicle_id, trip_id=trip_id)
        return self._request(self._build_endpoint(vehicle_id, 'trip', trip_id), 'get', callback=callback)
