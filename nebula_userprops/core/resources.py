# nebula_userprops/core/resources.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
import importlib.resources
import io
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Union
from urllib.parse import unquote, urlparse

import requests

from .errors import ResourceUnavailableError

CLASSPATH_PREFIX = "classpath:"
FILE_PREFIX = "file:"
HTTP_SCHEMES = ("http://", "https://")

logger = logging.getLogger("nebula_userprops.resources")


class Resource(Protocol):
    """Anything that can hand out a fresh binary stream of its content."""

    description: str

    def open(self) -> BinaryIO:
        ...


class ResourceResolver(Protocol):
    def resolve(self, location: str) -> Resource:
        ...


class FileResource:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.description = f"file [{self.path}]"

    def open(self) -> BinaryIO:
        try:
            return open(self.path, "rb")
        except OSError as e:
            raise ResourceUnavailableError(str(self.path), e.strerror or str(e)) from e


class PackageResource:
    """Data file shipped inside an importable package."""

    def __init__(self, package: str, name: str):
        self.package = package
        self.name = name
        self.description = f"package resource [{package}:{name}]"

    def open(self) -> BinaryIO:
        location = f"{self.package}:{self.name}"
        try:
            return importlib.resources.files(self.package).joinpath(self.name).open("rb")
        except ModuleNotFoundError as e:
            raise ResourceUnavailableError(location, f"package {self.package} not found") from e
        except (OSError, TypeError) as e:
            raise ResourceUnavailableError(location, str(e)) from e


class UrlResource:
    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout
        self.description = f"URL [{url}]"

    def open(self) -> BinaryIO:
        try:
            r = requests.get(self.url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise ResourceUnavailableError(self.url, str(e)) from e
        return io.BytesIO(r.content)


class BytesResource:
    """In-memory content. Text input is stored UTF-8 encoded; pass bytes for any other encoding."""

    def __init__(self, data: Union[bytes, str], description: str = "in-memory resource"):
        self.data = data.encode("utf-8") if isinstance(data, str) else data
        self.description = description

    def open(self) -> BinaryIO:
        return io.BytesIO(self.data)


class DefaultResourceResolver:
    """
    Resolves locations by prefix:
      classpath:package/dir/users.properties  -> PackageResource
      classpath:users.properties              -> FileResource on sys.path
      file:/etc/app/users.properties          -> FileResource
      http(s)://host/users.properties         -> UrlResource
    Anything else is treated as a filesystem path, relative to base_dir when set.
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None, timeout: float = 10.0):
        self.base_dir = Path(base_dir) if base_dir else None
        self.timeout = timeout

    def resolve(self, location: str) -> Resource:
        if not location or not location.strip():
            raise ResourceUnavailableError(str(location), "location is empty")
        location = location.strip()

        if location.startswith(CLASSPATH_PREFIX):
            resource = self._package_resource(location)
        elif location.startswith(FILE_PREFIX):
            resource = FileResource(self._file_url_path(location))
        elif location.lower().startswith(HTTP_SCHEMES):
            resource = UrlResource(location, timeout=self.timeout)
        else:
            resource = FileResource(self._local_path(location))
        logger.debug("Resolved %s to %s", location, resource.description)
        return resource

    def _package_resource(self, location: str) -> Resource:
        path = location[len(CLASSPATH_PREFIX):].strip("/")
        package, _, name = path.rpartition("/")
        if not name:
            raise ResourceUnavailableError(location, "expected classpath:[<package path>/]<file name>")
        if not package:
            return self._path_root_resource(location, name)
        return PackageResource(package.replace("/", "."), name)

    @staticmethod
    def _path_root_resource(location: str, name: str) -> FileResource:
        """Find a top-level file in the first sys.path entry that has it."""
        for entry in sys.path:
            candidate = Path(entry or ".") / name
            if candidate.is_file():
                return FileResource(candidate)
        raise ResourceUnavailableError(location, f"{name} not found on sys.path")

    def _file_url_path(self, location: str) -> Path:
        parsed = urlparse(location)
        if parsed.netloc not in ("", "localhost"):
            raise ResourceUnavailableError(location, f"remote host {parsed.netloc} is not supported")
        return self._local_path(unquote(parsed.path))

    def _local_path(self, raw: str) -> Path:
        path = Path(raw).expanduser()
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path
