# aerosurvey/terrain/tests/test_elevation_client.py

import unittest
from unittest.mock import MagicMock

import requests

from aerosurvey.terrain import ElevationClient, ElevationServiceConfig, TerrainError


def _response(elevations):
    response = MagicMock()
    response.json.return_value = {'elevation': elevations}
    response.raise_for_status.return_value = None
    return response


class TestElevationClient(unittest.TestCase):

    def setUp(self):
        self.session = MagicMock()
        self.client = ElevationClient(ElevationServiceConfig(batch_size=2), session=self.session)
        self.positions = [(47.0 + i * 0.001, 8.0) for i in range(5)]

    def test_requests_are_batched_in_order(self):
        self.session.get.side_effect = [_response([1, 2]), _response([3, 4]), _response([5])]

        result = self.client.get_elevations(self.positions)

        self.assertEqual(self.session.get.call_count, 3)
        self.assertEqual(result.elevations, [1.0, 2.0, 3.0, 4.0, 5.0])
        self.assertEqual(result.failed_count, 0)

        first_params = self.session.get.call_args_list[0].kwargs['params']
        self.assertEqual(first_params['latitude'], "47.000000,47.001000")
        self.assertEqual(first_params['longitude'], "8.000000,8.000000")

    def test_failed_batch_leaves_gap_and_continues(self):
        self.session.get.side_effect = [
            _response([1, 2]),
            requests.exceptions.ConnectionError("offline"),
            _response([5]),
        ]

        result = self.client.get_elevations(self.positions)

        self.assertEqual(result.elevations, [1.0, 2.0, None, None, 5.0])
        self.assertEqual(result.failed_count, 2)

    def test_http_error_counts_as_failure(self):
        bad = MagicMock()
        bad.raise_for_status.side_effect = requests.exceptions.HTTPError("503")
        self.session.get.side_effect = [bad, _response([3, 4]), _response([5])]

        result = self.client.get_elevations(self.positions)
        self.assertEqual(result.elevations[:2], [None, None])
        self.assertEqual(result.failed_count, 2)

    def test_malformed_response_rejected(self):
        self.session.get.side_effect = [_response([1]), _response({'oops': 1}), _response([5])]

        result = self.client.get_elevations(self.positions)
        self.assertEqual(result.elevations, [None, None, None, None, 5.0])
        self.assertEqual(result.failed_count, 4)

    def test_null_elevations_stay_unknown(self):
        self.session.get.side_effect = [_response([None, 2.5])]
        result = self.client.get_elevations(self.positions[:2])
        self.assertEqual(result.elevations, [None, 2.5])
        self.assertEqual(result.failed_count, 1)

    def test_empty_input_makes_no_request(self):
        result = self.client.get_elevations([])
        self.session.get.assert_not_called()
        self.assertEqual(result.elevations, [])

    def test_invalid_batch_size(self):
        with self.assertRaises(TerrainError):
            ElevationServiceConfig(batch_size=0)


if __name__ == '__main__':
    unittest.main()
