from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    SHOWTIME_ADD,
    SHOWTIME_DELETE,
    SHOWTIME_GET,
    SHOWTIME_LIST,
    SHOWTIME_SEATS,
    SHOWTIME_UPDATE,
)
from test.shared.utils import (
    assert_response_status,
    create_movie,
    create_showtime,
    reserve_seats,
)
from test.util_constant import FUTURE_START_TIME, SMALL_CAPACITY


pytestmark = pytest.mark.integration


@pytest.fixture
def movie(client: TestClient, admin_headers):
    return create_movie(client, admin_headers)


class TestCreateShowtime:
    def test_admin_creates_showtime(self, client: TestClient, admin_headers, movie):
        showtime = create_showtime(
            client, admin_headers, movie_id=movie['id'], capacity=SMALL_CAPACITY
        )

        assert showtime['movie_id'] == movie['id']
        assert showtime['capacity'] == SMALL_CAPACITY
        assert showtime['reserved'] == 0
        assert showtime['available'] == SMALL_CAPACITY

    def test_unknown_movie(self, client: TestClient, admin_headers):
        response = client.post(
            SHOWTIME_ADD,
            json={'movie_id': 999_999, 'start_time': FUTURE_START_TIME, 'capacity': 4},
            headers=admin_headers,
        )
        assert_response_status(response, 404)

    def test_negative_capacity(self, client: TestClient, admin_headers, movie):
        response = client.post(
            SHOWTIME_ADD,
            json={'movie_id': movie['id'], 'start_time': FUTURE_START_TIME, 'capacity': -1},
            headers=admin_headers,
        )
        assert_response_status(response, 400)

    def test_regular_user_is_forbidden(self, client: TestClient, user_headers, movie):
        response = client.post(
            SHOWTIME_ADD,
            json={'movie_id': movie['id'], 'start_time': FUTURE_START_TIME, 'capacity': 4},
            headers=user_headers,
        )
        assert_response_status(response, 403)


class TestReadShowtimes:
    def test_list_by_movie(self, client: TestClient, admin_headers, user_headers, movie):
        other = create_movie(client, admin_headers, title='Other Movie')
        create_showtime(client, admin_headers, movie_id=movie['id'])
        create_showtime(client, admin_headers, movie_id=other['id'])

        response = client.get(SHOWTIME_LIST, params={'movie_id': movie['id']}, headers=user_headers)

        assert_response_status(response, 200)
        assert [showtime['movie_id'] for showtime in response.json()] == [movie['id']]

    def test_seats_of_fresh_showtime(self, client: TestClient, admin_headers, user_headers, movie):
        showtime = create_showtime(
            client, admin_headers, movie_id=movie['id'], capacity=SMALL_CAPACITY
        )

        response = client.get(
            SHOWTIME_SEATS.format(showtime_id=showtime['id']), headers=user_headers
        )

        assert_response_status(response, 200)
        assert response.json() == ['A1', 'A2', 'A3', 'A4']

    def test_seats_of_unknown_showtime(self, client: TestClient, user_headers):
        response = client.get(SHOWTIME_SEATS.format(showtime_id=999_999), headers=user_headers)
        assert_response_status(response, 404)

    def test_seats_require_login(self, client: TestClient):
        assert_response_status(client.get(SHOWTIME_SEATS.format(showtime_id=1)), 401)


class TestUpdateAndDeleteShowtime:
    def test_update_capacity(self, client: TestClient, admin_headers, movie):
        showtime = create_showtime(client, admin_headers, movie_id=movie['id'], capacity=4)

        response = client.put(
            SHOWTIME_UPDATE.format(showtime_id=showtime['id']),
            json={'movie_id': movie['id'], 'start_time': FUTURE_START_TIME, 'capacity': 10},
            headers=admin_headers,
        )

        assert_response_status(response, 200)
        assert response.json()['capacity'] == 10

    def test_capacity_cannot_drop_booked_seats(
        self, client: TestClient, admin_headers, test_user, user_headers, movie
    ):
        showtime = create_showtime(client, admin_headers, movie_id=movie['id'], capacity=4)
        booked = reserve_seats(
            client, user_headers, user_id=test_user['id'], showtime_id=showtime['id'], seats=['A4']
        )
        assert_response_status(booked, 200)

        response = client.put(
            SHOWTIME_UPDATE.format(showtime_id=showtime['id']),
            json={'movie_id': movie['id'], 'start_time': FUTURE_START_TIME, 'capacity': 2},
            headers=admin_headers,
        )

        assert_response_status(response, 400)

    def test_delete_showtime(self, client: TestClient, admin_headers, movie):
        showtime = create_showtime(client, admin_headers, movie_id=movie['id'])

        response = client.delete(
            SHOWTIME_DELETE.format(showtime_id=showtime['id']), headers=admin_headers
        )

        assert_response_status(response, 200)
        assert_response_status(
            client.get(SHOWTIME_GET.format(showtime_id=showtime['id']), headers=admin_headers),
            404,
        )
