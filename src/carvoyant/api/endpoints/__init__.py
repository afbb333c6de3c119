"""
API Endpoints Package for the Carvoyant API Client

Contains one endpoint class per resource group.
"""

from .base_endpoint import BaseEndpoint
from .account_endpoints import AccountEndpoints
from .vehicle_endpoints import VehicleEndpoints
from .trip_endpoints import TripEndpoints
from .event_endpoints import EventEndpoints

__all__ = [
    'BaseEndpoint',
    'AccountEndpoints',
    'VehicleEndpoints',
    'TripEndpoints',
    'EventEndpoints'
]
