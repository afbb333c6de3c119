"""
Unit tests for hypermedia action resolution.
"""

import pytest

from carvoyant.api.actions import action_parameters, action_request_path, find_action, split_query
from carvoyant.api.response_handler import Action, APIResponse
from carvoyant.core.errors import ActionNotFoundError, ParameterValidationError

from tests.fixtures.sample_data import BASIC_API_URL, BEARER_API_URL, SAMPLE_TRIPS_PAGE


@pytest.fixture
def trips_response():
    return APIResponse(
        status=200,
        body=SAMPLE_TRIPS_PAGE,
        request_method='GET',
        request_path='/v1/api/vehicle/1234/trip/?searchLimit=2'
    )


class TestFindAction:
    """Test suite for action lookup"""

    def test_finds_named_action(self, trips_response):
        action = find_action(trips_response, 'next')

        assert isinstance(action, Action)
        assert action.name == 'next'
        assert 'searchOffset=4' in action.uri

    def test_matches_response_actions(self, trips_response):
        assert find_action(trips_response, 'previous') == trips_response.actions[0]
        assert find_action(trips_response, 'next') == trips_response.actions[1]

    def test_accepts_plain_mapping(self):
        response = {'body': {'actions': [{'name': 'next', 'uri': 'https://x/api/trip?searchOffset=2'}]}}
        assert find_action(response, 'next').uri == 'https://x/api/trip?searchOffset=2'

    def test_first_match_wins(self):
        response = {'body': {'actions': [
            {'name': 'next', 'uri': 'https://x/api/trip?searchOffset=2'},
            {'name': 'next', 'uri': 'https://x/api/trip?searchOffset=9'}
        ]}}
        assert find_action(response, 'next').uri.endswith('searchOffset=2')

    def test_missing_action(self, trips_response):
        with pytest.raises(ActionNotFoundError, match="No action found for name: last") as exc_info:
            find_action(trips_response, 'last')

        assert exc_info.value.action_name == 'last'

    @pytest.mark.parametrize("body", [None, {}, {'actions': None}, {'actions': []}, "not json"])
    def test_body_without_actions(self, body):
        response = APIResponse(status=200, body=body, request_method='GET', request_path='/')
        with pytest.raises(ActionNotFoundError):
            find_action(response, 'next')

    def test_missing_response(self):
        with pytest.raises(TypeError, match="response must be defined."):
            find_action(None, 'next')

    def test_response_without_body(self):
        with pytest.raises(TypeError, match="response must be an Object."):
            find_action(42, 'next')

    def test_missing_action_name(self, trips_response):
        with pytest.raises(TypeError, match="action_name must be defined."):
            find_action(trips_response, None)

    def test_non_string_action_name(self, trips_response):
        with pytest.raises(TypeError, match="action_name must be a String."):
            find_action(trips_response, 1)


class TestSplitQuery:
    """Test suite for query string splitting"""

    def test_decodes_pairs(self):
        uri = "https://api.carvoyant.com/v1/api/vehicle/1/data?key=GEN_VOLTAGE&startTime=2013-06-27+09%3A00%3A00%2B0000"
        assert split_query(uri) == [
            ('key', 'GEN_VOLTAGE'),
            ('startTime', '2013-06-27 09:00:00+0000')
        ]

    def test_drops_fragment(self):
        assert split_query("https://x/api/trip?searchOffset=2#top") == [('searchOffset', '2')]

    def test_malformed_pairs_have_no_value(self):
        assert split_query("https://x/api/trip?flag&a=b=c&&=orphan") == [('flag', None), ('a', None)]

    def test_no_query(self):
        assert split_query("https://x/api/trip") == []


class TestActionParameters:
    """Test suite for turning actions back into request parameters"""

    def test_next_action(self, trips_response):
        assert action_parameters(trips_response, 'next') == {
            'includeData': True,
            'sortOrder': 'desc',
            'startTime': '20130627T090000+0000',
            'searchOffset': 4,
            'searchLimit': 2
        }

    def test_previous_action(self, trips_response):
        assert action_parameters(trips_response, 'previous') == {
            'includeData': False,
            'sortOrder': 'desc',
            'searchOffset': 0,
            'searchLimit': 2
        }

    def test_unknown_keys_are_kept_as_strings(self):
        response = {'body': {'actions': [
            {'name': 'next', 'uri': 'https://x/api/vehicle/1/data?key=GEN_RPM&customFilter=a+b&searchOffset=10'}
        ]}}
        assert action_parameters(response, 'next') == {
            'key': 'GEN_RPM',
            'customFilter': 'a b',
            'searchOffset': 10
        }

    @pytest.mark.parametrize("query, name", [
        ('startTime=20130231T000000%2B0000', 'startTime'),
        ('endTime=20130227T000000%2B9999', 'endTime'),
    ])
    def test_impossible_timestamp(self, query, name):
        """Test that an unreal wire timestamp fails as a parameter error"""
        response = {'body': {'actions': [{'name': 'next', 'uri': f'https://x/api/trip?{query}'}]}}

        with pytest.raises(ParameterValidationError, match=f"{name} must be a timestamp."):
            action_parameters(response, 'next')

    def test_valueless_pairs(self):
        """Test that booleans read as false and other keys are skipped"""
        response = {'body': {'actions': [
            {'name': 'next', 'uri': 'https://x/api/vehicle/1/data?mostRecentOnly&searchLimit&key'}
        ]}}
        assert action_parameters(response, 'next') == {'mostRecentOnly': False}


class TestActionRequestPath:
    """Test suite for deriving the replay path"""

    def test_strips_versioned_base_path(self):
        path = action_request_path('/v1/api/vehicle/1234/trip/?searchLimit=2', BEARER_API_URL)
        assert path == '/vehicle/1234/trip/'

    def test_strips_legacy_base_path(self):
        assert action_request_path('/api/vehicle/1234/data', BASIC_API_URL) == '/vehicle/1234/data'

    def test_falls_back_to_api_segment(self):
        path = action_request_path('/v1/api/vehicle/1/trip?searchOffset=2', 'https://proxy.example.com')
        assert path == '/vehicle/1/trip'

    def test_root(self):
        assert action_request_path('/v1/api', BEARER_API_URL) == '/'
