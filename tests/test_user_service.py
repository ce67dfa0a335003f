import dataclasses

import pytest

from user_catalog.core.services import UserService
from user_catalog.infrastructure.repositories import UserRepository
from user_catalog.models.user import User

EXPECTED = [
    User(1, "John Doe", "john.doe@example.com"),
    User(2, "Jane Smith", "jane.smith@example.com"),
    User(3, "Bob Johnson", "bob.johnson@example.com"),
    User(4, "Alice Williams", "alice.williams@example.com"),
    User(5, "Charlie Brown", "charlie.brown@example.com"),
]


def test_get_users_returns_fixed_catalog_in_order():
    service = UserService()

    assert service.get_users() == EXPECTED


def test_get_users_returns_distinct_lists_with_same_content():
    service = UserService()

    first = service.get_users()
    second = service.get_users()

    assert first == second
    assert first is not second
    first.clear()
    assert service.get_users() == EXPECTED


def test_get_user_by_id_finds_bob_johnson():
    user = UserService().get_user_by_id(3)

    assert user is not None
    assert (user.name, user.email) == ("Bob Johnson", "bob.johnson@example.com")


@pytest.mark.parametrize("user_id", [0, -1, 6, 42, 10**9])
def test_get_user_by_id_unknown_returns_none(user_id):
    assert UserService().get_user_by_id(user_id) is None


def test_service_accepts_injected_repository():
    class FakeSource:
        def fetch_users(self):
            return ({"id": 9, "name": "Zed", "email": "zed@example.com"},)

    service = UserService(UserRepository(FakeSource()))

    assert service.get_users() == [User(9, "Zed", "zed@example.com")]
    assert service.get_user_by_id(9) == User(9, "Zed", "zed@example.com")


def test_user_is_frozen_and_compares_by_value():
    user = User(1, "John Doe", "john.doe@example.com")

    with pytest.raises(dataclasses.FrozenInstanceError):
        user.name = "Otro"  # type: ignore[misc]

    assert user == User(1, "John Doe", "john.doe@example.com")
    assert hash(user) == hash(User(1, "John Doe", "john.doe@example.com"))
    assert user != User(1, "John Doe", "other@example.com")


def test_user_keeps_values_as_given():
    user = User(7, "  spaced  ", "MiXeD@Example.COM")

    assert user.name == "  spaced  "
    assert user.email == "MiXeD@Example.COM"
