from typing import Dict, List, Optional

from library_catalog.user import User


class UserRegistry:
    """In-memory store of users keyed by sequential id."""

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1

    def add(self, username: str, role: str) -> User:
        user = User(id=self._next_id, username=username, role=role)
        self._users[user.id] = user
        self._next_id += 1
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def list_all(self) -> List[User]:
        return list(self._users.values())

    def __len__(self) -> int:
        return len(self._users)
