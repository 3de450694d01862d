from nebula_userprops.core.loader import from_resource
from nebula_userprops.core.resources import BytesResource
from nebula_userprops.core.users import UserDirectory

from .conftest import USERS_PROPERTIES


def _directory():
    return UserDirectory.from_loader(from_resource(BytesResource(USERS_PROPERTIES)))


def test_lookup():
    directory = _directory()
    assert len(directory) == 3
    assert "admin" in directory
    assert "nobody" not in directory
    assert directory.get("admin").roles == ("ROLE_USER", "ROLE_ADMIN")
    assert directory.get("nobody") is None


def test_role_and_status_filters():
    directory = _directory()
    assert [u.username for u in directory.with_role("ROLE_ADMIN")] == ["admin"]
    assert {u.username for u in directory.with_role("ROLE_USER")} == {"user", "admin", "disabled_user"}
    assert {u.username for u in directory.enabled_users()} == {"user", "admin"}


def test_iteration():
    directory = _directory()
    assert directory.usernames() == ["user", "admin", "disabled_user"]
    assert [u.username for u in directory] == directory.usernames()
