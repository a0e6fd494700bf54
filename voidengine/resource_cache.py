"""Reference-counted table of live resources keyed by GUID."""

from dataclasses import dataclass, replace

from voidengine.flat_hash_map import DEFAULT_BUCKET, FlatHashMap
from voidengine.vertex import ResourceType


class ResourceError(LookupError):
    """Raised when a resource is missing, duplicated or cannot be handled."""


def resource_type_of(cls):
    """Return the :class:`ResourceType` a resource class declares.

    A class declares its kind with a ``resource_type`` class attribute;
    anything else counts as :attr:`ResourceType.UNKNOWN`.
    """
    rtype = getattr(cls, "resource_type", ResourceType.UNKNOWN)
    return rtype if isinstance(rtype, ResourceType) else ResourceType.UNKNOWN


@dataclass
class ResourceRef:
    """A cached resource together with its kind and reference count."""

    resource: object
    type: ResourceType
    ref: int


class ResourceCache:
    """Stores resources and destroys them once nothing refers to them.

    A resource is built as ``cls(guid, *args, **kwargs)``.  When it is
    destroyed its ``close()`` method is called, if it has one.  When a pool
    allocator is given, each resource takes one chunk of it for as long as it
    lives, so the pool bounds how many resources can exist at once.
    """

    def __init__(self, resource_allocator=None, bucket_count=DEFAULT_BUCKET):
        self._table = FlatHashMap(bucket_count)
        self._allocator = resource_allocator
        self._addresses = {}

    def __len__(self):
        return len(self._table)

    def __contains__(self, guid):
        return guid in self._table

    def create(self, cls, guid, ref, *args, **kwargs):
        """Build a resource of *cls* under *guid* with reference count *ref*."""
        if guid in self._table:
            raise ResourceError(f"resource {guid} already exists")
        addr = self._allocator.alloc(0) if self._allocator is not None else None
        try:
            resource = cls(guid, *args, **kwargs)
        except BaseException:
            if addr is not None:
                self._allocator.free(addr)
            raise
        self._table.insert(guid, ResourceRef(resource, resource_type_of(cls), ref))
        if addr is not None:
            self._addresses[guid] = addr
        return resource

    def peek(self, guid):
        """Return a copy of the entry for *guid* without touching its count."""
        return replace(self._entry(guid))

    def acquire(self, guid):
        """Add a reference to *guid* and return a copy of its entry."""
        entry = self._entry(guid)
        entry.ref += 1
        return replace(entry)

    def release(self, guid):
        """Drop a reference to *guid*, destroying it when none remain."""
        entry = self._entry(guid)
        entry.ref -= 1
        if entry.ref == 0:
            self._dispose(guid, entry)

    def destroy(self, guid):
        """Destroy *guid* whatever its reference count."""
        self._dispose(guid, self._entry(guid))

    def destroy_all(self):
        """Destroy every resource in the cache."""
        for guid, entry in list(self._table.items()):
            if guid in self._table:
                self._dispose(guid, entry)
        if self._allocator is not None:
            self._allocator.clear()

    def destroy_unused(self):
        """Destroy every resource whose reference count is zero."""
        for guid, entry in list(self._table.items()):
            if guid not in self._table or entry.ref != 0:
                continue
            if entry.type is ResourceType.UNKNOWN:
                raise ResourceError(f"cannot destroy resource {guid} of unknown type")
            self._dispose(guid, entry)

    def inspect_ref(self, guid):
        """Return the reference count of *guid*."""
        return self._entry(guid).ref

    def _entry(self, guid):
        entry = self._table.get(guid)
        if entry is None:
            raise ResourceError(f"resource {guid} does not exist")
        return entry

    def _dispose(self, guid, entry):
        self._table.remove(guid)
        addr = self._addresses.pop(guid, None)
        if addr is not None:
            self._allocator.free(addr)
        close = getattr(entry.resource, "close", None)
        if callable(close):
            close()