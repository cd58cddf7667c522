from typing import Any, Dict, List, Optional

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import (
    AUTH_LOGIN,
    AUTH_SIGNUP,
    MOVIE_ADD,
    RESERVE_ADD,
    SHOWTIME_ADD,
)
from test.util_constant import (
    DEFAULT_CAPACITY,
    FUTURE_START_TIME,
    TEST_MOVIE_GENRE,
    TEST_MOVIE_TITLE,
)


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def signup_user(client: TestClient, username: str, password: str) -> Dict[str, Any]:
    response = client.post(AUTH_SIGNUP, json={'username': username, 'password': password})
    assert_response_status(response, 201, f'Failed to sign up {username}: {response.text}')
    return response.json()


def login_user(client: TestClient, username: str, password: str) -> Dict[str, Any]:
    response = client.post(AUTH_LOGIN, json={'username': username, 'password': password})
    assert_response_status(response, 200, f'Login failed: {response.text}')
    return response.json()


def create_movie(
    client: TestClient,
    headers: Dict[str, str],
    *,
    title: str = TEST_MOVIE_TITLE,
    genre: str = TEST_MOVIE_GENRE,
) -> Dict[str, Any]:
    response = client.post(
        MOVIE_ADD,
        json={'title': title, 'description': f'{title} description', 'genre': genre},
        headers=headers,
    )
    assert_response_status(response, 201)
    return response.json()


def create_showtime(
    client: TestClient,
    headers: Dict[str, str],
    *,
    movie_id: int,
    capacity: int = DEFAULT_CAPACITY,
    start_time: str = FUTURE_START_TIME,
) -> Dict[str, Any]:
    response = client.post(
        SHOWTIME_ADD,
        json={'movie_id': movie_id, 'start_time': start_time, 'capacity': capacity},
        headers=headers,
    )
    assert_response_status(response, 201)
    return response.json()


def reserve_seats(
    client: TestClient,
    headers: Dict[str, str],
    *,
    user_id: int,
    showtime_id: int,
    seats: List[str],
    movie_id: Optional[int] = None,
):
    payload: Dict[str, Any] = {'user_id': user_id, 'showtime_id': showtime_id, 'seats': seats}
    if movie_id is not None:
        payload['movie_id'] = movie_id
    return client.post(RESERVE_ADD, json=payload, headers=headers)
