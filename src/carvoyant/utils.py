"""Utilities for working with Carvoyant API values."""

from .api.actions import action_parameters, split_query
from .api.endpoints.event_endpoints import EVENT_TYPES, externalize_event_type
from .api.timestamps import date_to_timestamp, is_timestamp, timestamp_to_date


__all__ = [
    'EVENT_TYPES',
    'action_parameters',
    'date_to_timestamp',
    'externalize_event_type',
    'is_timestamp',
    'split_query',
    'timestamp_to_date',
]
