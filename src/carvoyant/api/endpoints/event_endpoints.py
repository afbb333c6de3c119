"""
Event Endpoints for the Carvoyant API Client

Event subscriptions and the notifications they produce. Event types are
passed through without validation so that new upstream types keep working.

See http://confluence.carvoyant.com/display/PUBDEV/EventSubscription
and http://confluence.carvoyant.com/display/PUBDEV/EventNotification
"""

from typing import Any, Dict, Optional

from ..response_handler import APIResponse
from .base_endpoint import BaseEndpoint, ResponseCallback


# Event type names as returned in ``_type`` -> as used in API paths
EVENT_TYPES = {
    'GEOFENCE': 'geoFence',
    'LOWBATTERY': 'lowBattery',
    'NUMERICDATAKEY': 'numericDataKey',
    'TIMEOFDAY': 'timeOfDay',
    'TROUBLECODE': 'troubleCode',
}


def externalize_event_type(event_type: str) -> str:
    """Return the path form of an internal event type (``LOWBATTERY`` -> ``lowBattery``).

    Unknown types are returned unchanged.
    """
    return EVENT_TYPES.get(event_type, event_type)


class EventEndpoints(BaseEndpoint):
    """Event subscription and notification endpoints of a vehicle"""

    SUBSCRIPTION = 'eventSubscription'
    NOTIFICATION = 'eventNotification'

    def _get_base_path(self) -> str:
        return '/vehicle'

    def list_subscriptions(
        self,
        vehicle_id: str,
        event_type: Optional[str] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Return the event subscriptions of a vehicle, optionally of one type"""
        self._validate_required_params(vehicle_id=vehicle_id)
        return self._request(
            self._build_endpoint(vehicle_id, self.SUBSCRIPTION, event_type), 'get', callback=callback
        )

    def get_subscription(
        self,
        vehicle_id: str,
        subscription_id: str,
        event_type: Optional[str] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Return one event subscription"""
        self._validate_required_params(vehicle_id=vehicle_id, subscription_id=subscription_id)
        return self._request(
            self._build_endpoint(vehicle_id, self.SUBSCRIPTION, event_type, subscription_id),
            'get',
            callback=callback
        )

    def create_subscription(
        self,
        vehicle_id: str,
        event_type: str,
        subscription: Dict[str, Any],
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """
        Create an event subscription

        Args:
            vehicle_id: The vehicle id
            event_type: The event type in its external form (e.g. 'lowBattery')
            subscription: The subscription attributes
            callback: Optional function invoked with the response
        """
        self._validate_required_params(
            vehicle_id=vehicle_id, event_type=event_type, subscription=subscription
        )
        return self._request(
            self._build_endpoint(vehicle_id, self.SUBSCRIPTION, event_type),
            'post',
            self._body(subscription, 'subscription'),
            callback
        )

    def update_subscription(
        self,
        vehicle_id: str,
        subscription: Dict[str, Any],
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """
        Update an event subscription

        The path is derived from the subscription's own ``_type`` and ``id``
        as returned by the API.
        """
        self._validate_required_params(vehicle_id=vehicle_id, subscription=subscription)
        body = self._body(subscription, 'subscription')
        self._validate_required_params(**{
            'subscription._type': body.get('_type'),
            'subscription.id': body.get('id')
        })

        return self._request(
            self._build_endpoint(
                vehicle_id, self.SUBSCRIPTION, externalize_event_type(body['_type']), body['id']
            ),
            'post',
            body,
            callback
        )

    def delete_subscription(
        self,
        vehicle_id: str,
        subscription_id: str,
        event_type: Optional[str] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Delete an event subscription"""
        self._validate_required_params(vehicle_id=vehicle_id, subscription_id=subscription_id)
        return self._request(
            self._build_endpoint(vehicle_id, self.SUBSCRIPTION, event_type, subscription_id),
            'delete',
            callback=callback
        )

    def list_notifications(
        self,
        vehicle_id: str,
        event_type: Optional[str] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Return the event notifications of a vehicle, optionally of one type"""
        self._validate_required_params(vehicle_id=vehicle_id)
        return self._request(
            self._build_endpoint(vehicle_id, self.NOTIFICATION, event_type), 'get', callback=callback
        )

    def get_notification(
        self,
        vehicle_id: str,
        notification_id: str,
        event_type: Optional[str] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """Return one event notification"""
        self._validate_required_params(vehicle_id=vehicle_id, notification_id=notification_id)
        return self._request(
            self._build_endpoint(vehicle_id, self.NOTIFICATION, event_type, notification_id),
            'get',
            callback=callback
        )
