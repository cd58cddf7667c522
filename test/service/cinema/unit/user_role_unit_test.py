import pytest

from src.service.cinema.domain.enum.user_role import UserRole


pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    'role, required, expected',
    [
        (UserRole.USER, UserRole.USER, True),
        (UserRole.USER, UserRole.ADMIN, False),
        (UserRole.ADMIN, UserRole.ADMIN, True),
        (UserRole.ADMIN, UserRole.USER, True),
    ],
)
def test_is_authorized(role, required, expected):
    assert role.is_authorized(required) is expected


def test_role_values_are_wire_strings():
    assert UserRole('user') is UserRole.USER
    assert UserRole('admin') is UserRole.ADMIN

    with pytest.raises(ValueError):
        UserRole('seller')
