# nebula_userprops/core/users.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from typing import Dict, Iterable, Iterator, List, Optional

from ..models.user import UserRecord


class UserDirectory:
    """Read-only lookup over the records produced by one load."""

    def __init__(self, users: Iterable[UserRecord]):
        self._users: Dict[str, UserRecord] = {u.username: u for u in users}

    @classmethod
    def from_loader(cls, loader) -> "UserDirectory":
        return cls(loader.load())

    def get(self, username: str) -> Optional[UserRecord]:
        return self._users.get(username)

    def usernames(self) -> List[str]:
        return list(self._users)

    def with_role(self, role: str) -> List[UserRecord]:
        return [u for u in self._users.values() if role in u.roles]

    def enabled_users(self) -> List[UserRecord]:
        return [u for u in self._users.values() if u.enabled]

    def __contains__(self, username) -> bool:
        return username in self._users

    def __iter__(self) -> Iterator[UserRecord]:
        return iter(self._users.values())

    def __len__(self) -> int:
        return len(self._users)
