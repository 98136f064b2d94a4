import pytest

from library_catalog.user_registry import UserRegistry


def test_add_and_get():
    reg = UserRegistry()
    alice = reg.add("Alice", "USER")
    bob = reg.add("Bob", "ADMIN")
    assert (alice.id, bob.id) == (1, 2)
    assert reg.get_by_id(2) == bob
    assert reg.get_by_id(3) is None


def test_no_uniqueness_or_role_check():
    reg = UserRegistry()
    first = reg.add("Alice", "USER")
    second = reg.add("Alice", "librarian?")
    assert first.id != second.id
    assert second.role == "librarian?"
    assert len(reg.list_all()) == 2


def test_user_is_immutable():
    user = UserRegistry().add("Alice", "USER")
    with pytest.raises(AttributeError):
        user.role = "ADMIN"


def test_user_str_and_dict():
    user = UserRegistry().add("Bob", "ADMIN")
    assert str(user) == "ID:1 | Bob (ADMIN)"
    assert user.to_dict() == {"id": 1, "username": "Bob", "role": "ADMIN"}
