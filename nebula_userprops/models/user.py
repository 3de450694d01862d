# nebula_userprops/models/user.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from pydantic import BaseModel
from typing import Tuple


class UserAttribute(BaseModel):
    """Password, status flag and roles parsed from one property value."""
    password: str
    enabled: bool = True
    roles: Tuple[str, ...] = ()

    class Config:
        frozen = True


class UserRecord(BaseModel):
    username: str
    password: str
    enabled: bool = True
    roles: Tuple[str, ...] = ()

    class Config:
        frozen = True

    @property
    def disabled(self) -> bool:
        return not self.enabled
