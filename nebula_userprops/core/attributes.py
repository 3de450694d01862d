# nebula_userprops/core/attributes.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from ..models.user import UserAttribute

ENABLED_TOKEN = "enabled"
DISABLED_TOKEN = "disabled"


def parse_value(raw: str) -> UserAttribute:
    """
    Convert ``password[,enabled|disabled][,role]*`` into a UserAttribute.
    Raises ValueError when no password can be read or a role is blank.
    """
    if raw is None or not raw.strip():
        raise ValueError("value is empty")

    fields = [field.strip() for field in raw.split(",")]
    password = fields[0]
    if not password:
        raise ValueError("password is empty")

    enabled = True
    roles = []
    for field in fields[1:]:
        if field == DISABLED_TOKEN:
            enabled = False
        elif field == ENABLED_TOKEN:
            continue
        elif not field:
            raise ValueError("role name is empty")
        else:
            roles.append(field)

    return UserAttribute(password=password, enabled=enabled, roles=tuple(roles))
