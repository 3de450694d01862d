import io

import pytest

USERS_PROPERTIES = (
    "user=password,ROLE_USER\n"
    "admin=secret,ROLE_USER,ROLE_ADMIN\n"
    "disabled_user=does_not_matter,disabled,ROLE_USER\n"
)


class TrackingResource:
    """Resource that remembers every stream it handed out."""

    def __init__(self, data):
        self.data = data.encode("utf-8") if isinstance(data, str) else data
        self.description = "tracking resource"
        self.streams = []

    def open(self):
        stream = io.BytesIO(self.data)
        self.streams.append(stream)
        return stream


class RecordingResolver:
    def __init__(self, resource=None):
        self.resource = resource
        self.locations = []

    def resolve(self, location):
        self.locations.append(location)
        return self.resource


@pytest.fixture
def users_file(tmp_path):
    path = tmp_path / "users.properties"
    path.write_text(USERS_PROPERTIES, encoding="utf-8")
    return path
