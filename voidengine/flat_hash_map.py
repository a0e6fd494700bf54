"""Open-addressing hash map using Robin Hood linear probing."""

from dataclasses import dataclass

DEFAULT_BUCKET = 16
_MAX_LOAD_FACTOR = 0.8
_MASK64 = (1 << 64) - 1


@dataclass
class _Bucket:
    psl: int
    key: object
    value: object


def _hash_mix(x):
    x &= _MASK64
    x ^= x >> 33
    x = (x * 0xFF51AFD7ED558CCD) & _MASK64
    x ^= x >> 33
    x = (x * 0xC4CEB9FE1A85EC53) & _MASK64
    x ^= x >> 33
    return x


def _hash(key):
    return _hash_mix(hash(key))


class FlatHashMap:
    """Hash map storing entries inline in a power-of-two bucket table.

    Each entry remembers its probe sequence length (its distance from the
    bucket its hash points to).  On insertion an entry that has travelled
    further takes the place of one that has travelled less.  The table
    doubles before an insertion once it is 80% full.
    """

    def __init__(self, bucket_count=DEFAULT_BUCKET):
        if bucket_count <= 0 or bucket_count & (bucket_count - 1):
            raise ValueError(f"bucket count must be a power of two, got {bucket_count}")
        self._buckets = [None] * bucket_count
        self._count = 0

    @property
    def bucket_count(self):
        """Number of slots in the table."""
        return len(self._buckets)

    def insert(self, key, value):
        """Add *key* with *value*; raise KeyError if *key* is already present."""
        if key in self:
            raise KeyError(f"key already exists: {key!r}")
        if self._count >= self.bucket_count * _MAX_LOAD_FACTOR:
            self._resize(self.bucket_count << 1)
        self._place(self._buckets, key, value)
        self._count += 1

    def get(self, key):
        """Return the value for *key*, or None when it is absent."""
        index = self._find(key)
        if index is None:
            return None
        return self._buckets[index].value

    def remove(self, key):
        """Delete *key*, shifting the entries probed after it back one slot."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        mask = self.bucket_count - 1
        while True:
            next_index = (index + 1) & mask
            following = self._buckets[next_index]
            if following is None or following.psl == 0:
                break
            following.psl -= 1
            self._buckets[index] = following
            index = next_index
        self._buckets[index] = None
        self._count -= 1

    def values(self):
        """Yield the values in table order."""
        for _, value in self.items():
            yield value

    def items(self):
        """Yield ``(key, value)`` pairs in table order."""
        for bucket in self._buckets:
            if bucket is not None:
                yield bucket.key, bucket.value

    def __contains__(self, key):
        return self._find(key) is not None

    def __getitem__(self, key):
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        return self._buckets[index].value

    def __setitem__(self, key, value):
        index = self._find(key)
        if index is None:
            self.insert(key, value)
        else:
            self._buckets[index].value = value

    def __delitem__(self, key):
        self.remove(key)

    def __len__(self):
        return self._count

    def __iter__(self):
        for key, _ in self.items():
            yield key

    def __repr__(self):
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"FlatHashMap({{{body}}})"

    def _find(self, key):
        mask = self.bucket_count - 1
        index = _hash(key) & mask
        for psl in range(self.bucket_count):
            bucket = self._buckets[index]
            if bucket is None or psl > bucket.psl:
                return None
            if bucket.key == key:
                return index
            index = (index + 1) & mask
        return None

    @staticmethod
    def _place(buckets, key, value):
        mask = len(buckets) - 1
        index = _hash(key) & mask
        carried = _Bucket(0, key, value)
        while True:
            bucket = buckets[index]
            if bucket is None:
                buckets[index] = carried
                return
            if carried.psl > bucket.psl:
                buckets[index], carried = carried, bucket
            carried.psl += 1
            index = (index + 1) & mask

    def _resize(self, new_bucket_count):
        new_buckets = [None] * new_bucket_count
        for key, value in self.items():
            self._place(new_buckets, key, value)
        self._buckets = new_buckets