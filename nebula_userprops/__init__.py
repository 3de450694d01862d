# nebula_userprops/__init__.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
"""Load user records from ``username=password[,enabled|disabled][,role]*`` properties files."""

from .core.attributes import parse_value
from .core.errors import (
    ConfigurationError,
    MalformedEntryError,
    MissingSourceError,
    PropertiesSyntaxError,
    ResourceUnavailableError,
)
from .core.loader import (
    PropertiesUserLoader,
    from_resource,
    from_resource_location,
    loader_from_settings,
)
from .core.properties import load_properties, parse_properties
from .core.resources import (
    BytesResource,
    DefaultResourceResolver,
    FileResource,
    PackageResource,
    Resource,
    ResourceResolver,
    UrlResource,
)
from .core.users import UserDirectory
from .models.user import UserAttribute, UserRecord

__all__ = [
    "BytesResource",
    "ConfigurationError",
    "DefaultResourceResolver",
    "FileResource",
    "MalformedEntryError",
    "MissingSourceError",
    "PackageResource",
    "PropertiesSyntaxError",
    "PropertiesUserLoader",
    "Resource",
    "ResourceResolver",
    "ResourceUnavailableError",
    "UrlResource",
    "UserAttribute",
    "UserDirectory",
    "UserRecord",
    "from_resource",
    "from_resource_location",
    "load_properties",
    "loader_from_settings",
    "parse_properties",
    "parse_value",
]
