"""Side table linking decoded values to their formatting."""

import logging
import threading
import weakref
from typing import Any, Dict, Optional, Tuple
from .types import FormattingDescriptor, UntrackableValueError


class JSONObject(dict):
    """A dict that can be weakly referenced. Behaves like a plain dict."""

    __slots__ = ("__weakref__",)


class JSONArray(list):
    """A list that can be weakly referenced. Behaves like a plain list."""

    __slots__ = ("__weakref__",)


def is_trackable(value: Any) -> bool:
    """Return True if formatting can be associated with value."""
    if not isinstance(value, (dict, list)):
        return False
    try:
        weakref.ref(value)
    except TypeError:
        return False
    return True


def make_trackable(value: Any) -> Any:
    """
    Return value, or a weakly referenceable copy of it for plain containers.

    Plain dict and list instances cannot be weakly referenced, so they are
    rebuilt as JSONObject or JSONArray. Other types are returned unchanged.
    """
    if type(value) is dict:
        return JSONObject(value)
    if type(value) is list:
        return JSONArray(value)
    return value


class AssociationTable:
    """
    Maps the identity of decoded values to their FormattingDescriptor.

    Entries hold a weak reference to the value: the table never keeps a value
    alive and an entry is dropped as soon as its value is collected. Nothing
    is stored on the value itself.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize an empty association table.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._entries: Dict[int, Tuple[weakref.ref, FormattingDescriptor]] = {}
        # Re-entrant: a weakref callback may fire while the lock is held
        self._lock = threading.RLock()

    def associate(self, value: Any, descriptor: FormattingDescriptor) -> None:
        """
        Record descriptor for value, replacing any previous record.

        Args:
            value: A weakly referenceable dict or list
            descriptor: Formatting to associate

        Raises:
            UntrackableValueError: If value cannot be tracked
        """
        if not is_trackable(value):
            raise UntrackableValueError(value)

        key = id(value)
        ref = weakref.ref(value, self._make_reaper(key))
        with self._lock:
            self._entries[key] = (ref, descriptor)
        self.logger.debug(f"Tracking {type(value).__name__} at {key:#x}")

    def lookup(self, value: Any) -> Optional[FormattingDescriptor]:
        """Return the descriptor recorded for value, or None."""
        with self._lock:
            entry = self._entries.get(id(value))
        if entry is None:
            return None
        ref, descriptor = entry
        if ref() is not value:
            return None
        return descriptor

    def is_tracked(self, value: Any) -> bool:
        """Return True if a descriptor is recorded for value."""
        return self.lookup(value) is not None

    def _make_reaper(self, key: int):
        def reap(ref: weakref.ref) -> None:
            with self._lock:
                entry = self._entries.get(key)
                # The id may already belong to a newer value
                if entry is not None and entry[0] is ref:
                    del self._entries[key]
        return reap

    def __contains__(self, value: Any) -> bool:
        return self.is_tracked(value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
