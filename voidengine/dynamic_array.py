"""Growable array with an explicit capacity that grows by half when full."""

DEFAULT_CAPACITY = 16
_GROWTH_FACTOR = 1.5


class DynamicArray:
    """Ordered sequence with a reserved capacity.

    Adding an element to a full array grows the capacity to one and a half
    times its size.
    """

    def __init__(self, capacity=DEFAULT_CAPACITY, values=()):
        if capacity <= 0:
            raise ValueError("capacity must be greater than 0")
        self._capacity = capacity
        self._items = []
        for value in values:
            self.push_back(value)

    @property
    def capacity(self):
        """Number of elements the array can hold before it grows."""
        return self._capacity

    def push_back(self, value):
        """Append *value* at the end."""
        self._reserve_one()
        self._items.append(value)

    def insert(self, index, value):
        """Place *value* before the element at *index*; ``len(self)`` appends."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert position {index} is out of range")
        self._reserve_one()
        self._items.insert(index, value)

    def remove(self, index):
        """Remove and return the element at *index*; out of range is ignored."""
        if not 0 <= index < len(self._items):
            return None
        return self._items.pop(index)

    def find(self, value):
        """Return the index of the first element equal to *value*, or None."""
        return next(
            (index for index, item in enumerate(self._items) if item == value),
            None,
        )

    def pop_back(self):
        """Remove and return the last element; None when the array is empty."""
        if self.is_empty():
            return None
        return self._items.pop()

    def is_empty(self):
        return not self._items

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[self._checked(index)]

    def __setitem__(self, index, value):
        self._items[self._checked(index)] = value

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"DynamicArray(capacity={self._capacity}, values={self._items!r})"

    def _checked(self, index):
        count = len(self._items)
        if not -count <= index < count:
            raise IndexError(f"index {index} is out of bounds")
        return index % count

    def _reserve_one(self):
        if len(self._items) >= self._capacity:
            self._capacity = max(int(self._capacity * _GROWTH_FACTOR), self._capacity + 1)