# nebula_userprops/core/errors.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
from typing import Optional


class ConfigurationError(Exception):
    """Base class for every failure raised while loading users."""


class MissingSourceError(ConfigurationError):
    def __init__(self, message: str = "resource cannot be None if resource_location is None"):
        super().__init__(message)


class ResourceUnavailableError(ConfigurationError):
    def __init__(self, location: str, reason: str = ""):
        self.location = location
        self.reason = reason
        message = f"Resource '{location}' could not be opened"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PropertiesSyntaxError(ConfigurationError):
    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class MalformedEntryError(ConfigurationError):
    def __init__(self, username: str, value: str):
        self.username = username
        self.value = value
        super().__init__(
            f"The entry with username '{username}' and value '{value}' "
            "could not be converted to a UserRecord."
        )
