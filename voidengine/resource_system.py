"""Typed front end to the resource cache."""

from voidengine.resource_cache import ResourceCache, resource_type_of
from voidengine.vertex import ResourceType


class ResourceSystem:
    """Creates, shares and destroys resources, checking their declared kinds."""

    def __init__(self, resource_allocator=None):
        self._cache = ResourceCache(resource_allocator)
        self._next_guid = 0

    @property
    def cache(self):
        """The underlying :class:`ResourceCache`."""
        return self._cache

    def generate_guid(self):
        """Return a fresh GUID, counting up from zero."""
        guid = self._next_guid
        self._next_guid += 1
        return guid

    def create(self, cls, guid, *args, **kwargs):
        """Create a resource of *cls* under *guid* holding one reference."""
        self._registered(cls)
        return self._cache.create(cls, guid, 1, *args, **kwargs)

    def acquire(self, cls, guid):
        """Take a reference to *guid*, which must be a resource of *cls*'s kind."""
        expected = self._registered(cls)
        actual = self._cache.peek(guid).type
        if actual is not expected:
            raise TypeError(
                f"resource {guid} is {actual.name}, not {expected.name}"
            )
        return self._cache.acquire(guid).resource

    def release(self, cls, guid):
        """Drop a reference to *guid*, destroying it when none remain."""
        self._registered(cls)
        self._cache.release(guid)

    def destroy(self, cls, guid):
        """Remove *guid* even if others still refer to it."""
        self._registered(cls)
        self._cache.destroy(guid)

    def inspect_ref(self, guid):
        """Return the reference count of *guid*."""
        return self._cache.inspect_ref(guid)

    def shut_down(self):
        """Destroy every resource."""
        self._cache.destroy_all()

    @staticmethod
    def _registered(cls):
        rtype = resource_type_of(cls)
        if rtype is ResourceType.UNKNOWN:
            raise TypeError(f"{cls.__name__} is not a registered resource type")
        return rtype