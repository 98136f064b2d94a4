from __future__ import annotations


class User:
    """A library member. Role is free text (ADMIN/USER by convention) and is not enforced."""

    def __init__(self, id: int, username: str, role: str) -> None:
        self._id = id
        self._username = username
        self._role = role

    # Users never change after creation
    @property
    def id(self) -> int:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def role(self) -> str:
        return self._role

    def __str__(self) -> str:
        return f"ID:{self.id} | {self.username} ({self.role})"

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"User(id={self.id!r}, username={self.username!r}, role={self.role!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return (self.id, self.username, self.role) == (other.id, other.username, other.role)

    def __hash__(self) -> int:
        return hash((self.id, self.username, self.role))

    def to_dict(self) -> dict:
        return {"id": self.id, "username": self.username, "role": self.role}
