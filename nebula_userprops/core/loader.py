# nebula_userprops/core/loader.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
import logging
from typing import List, Optional

from ..models.user import UserRecord
from .attributes import parse_value
from .errors import MalformedEntryError, MissingSourceError, ResourceUnavailableError
from .properties import load_properties
from .resources import DefaultResourceResolver, Resource, ResourceResolver

logger = logging.getLogger("nebula_userprops.loader")


class PropertiesUserLoader:
    """
    Loads users from a properties file in the format

        username=password[,enabled|disabled][,role]*

    for example:

        user=password,ROLE_USER
        admin=secret,ROLE_USER,ROLE_ADMIN
        disabled_user=does_not_matter,disabled,ROLE_USER

    Either a resource or a resource location may be configured; a resource
    set directly wins over a location. Reconfiguring the source while another
    thread is inside load() is not supported.

    Content is decoded as UTF-8 by default. Classic properties files written
    in ISO-8859-1 need encoding="latin-1".
    """

    def __init__(self, resource_resolver: Optional[ResourceResolver] = None, encoding: str = "utf-8"):
        self._resource_resolver = resource_resolver or DefaultResourceResolver()
        self.resource_location: Optional[str] = None
        self.resource: Optional[Resource] = None
        self.encoding = encoding

    @classmethod
    def from_resource_location(cls, resource_location: str, **kwargs) -> "PropertiesUserLoader":
        """Create a loader for a location such as "classpath:app/users.properties"."""
        loader = cls(**kwargs)
        loader.set_resource_location(resource_location)
        return loader

    @classmethod
    def from_resource(cls, resource: Resource, **kwargs) -> "PropertiesUserLoader":
        loader = cls(**kwargs)
        loader.set_resource(resource)
        return loader

    @property
    def resource_resolver(self) -> ResourceResolver:
        return self._resource_resolver

    def set_resource_resolver(self, resource_resolver: ResourceResolver):
        if resource_resolver is None:
            raise ValueError("resource_resolver cannot be None")
        self._resource_resolver = resource_resolver

    def set_resource_location(self, resource_location: str):
        self.resource_location = resource_location

    def set_resource(self, resource: Resource):
        self.resource = resource

    def load(self) -> List[UserRecord]:
        resource = self._properties_resource()
        try:
            stream = resource.open()
        except OSError as e:
            raise ResourceUnavailableError(resource.description, str(e)) from e

        with stream:
            try:
                properties = load_properties(stream, encoding=self.encoding)
            except OSError as e:
                raise ResourceUnavailableError(resource.description, str(e)) from e

        users = [self._to_user(name, value) for name, value in properties.items()]
        logger.debug("Loaded %d users from %s", len(users), resource.description)
        return users

    def _properties_resource(self) -> Resource:
        result = self.resource
        if result is None and self.resource_location is not None:
            result = self._resource_resolver.resolve(self.resource_location)
        if result is None:
            raise MissingSourceError()
        return result

    @staticmethod
    def _to_user(username: str, value: str) -> UserRecord:
        if not username:
            raise MalformedEntryError(username, value)
        try:
            attr = parse_value(value)
        except ValueError as e:
            raise MalformedEntryError(username, value) from e
        return UserRecord(
            username=username,
            password=attr.password,
            enabled=attr.enabled,
            roles=attr.roles,
        )


def from_resource_location(resource_location: str, **kwargs) -> PropertiesUserLoader:
    return PropertiesUserLoader.from_resource_location(resource_location, **kwargs)


def from_resource(resource: Resource, **kwargs) -> PropertiesUserLoader:
    return PropertiesUserLoader.from_resource(resource, **kwargs)


def loader_from_settings(settings=None) -> PropertiesUserLoader:
    """Build a loader from Settings (defaults to the module-level settings)."""
    if settings is None:
        from ..utils.config import settings
    resolver = DefaultResourceResolver(base_dir=settings.BASE_DIR, timeout=settings.HTTP_TIMEOUT)
    loader = PropertiesUserLoader(resolver, encoding=settings.ENCODING)
    if settings.LOCATION:
        loader.set_resource_location(settings.LOCATION)
    return loader
