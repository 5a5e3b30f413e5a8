"""In-memory ``Location`` for tests.

Programmatic navigation (``navigate``) only records history, like the
browser history API. ``set_hash`` simulates the user editing the address
bar and notifies subscribers, like a ``hashchange`` event.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    url: str
    state: Any = None
    replace: bool = False


class MemoryLocation:
    """Location with a pathname, a hash, a title and a history log."""

    def __init__(self, pathname: str = "/", hash: str = "") -> None:
        self.pathname = pathname
        self.hash = hash
        self.title = ""
        self.history: list[HistoryEntry] = []
        self._subscribers: list[Callable[[], None]] = []

    def navigate(self, url: str, *, replace: bool = False, state: Any = None) -> None:
        if url.startswith("#"):
            self.hash = url
        else:
            path, sep, fragment = url.partition("#")
            self.pathname = path or "/"
            self.hash = sep + fragment
        entry = HistoryEntry(url=url, state=state, replace=replace)
        if replace and self.history:
            self.history[-1] = entry
        else:
            self.history.append(entry)

    def set_hash(self, value: str) -> None:
        """Change the hash from outside the app and notify subscribers."""
        self.hash = value
        for callback in list(self._subscribers):
            callback()

    def set_title(self, title: str) -> None:
        self.title = title

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscribers(self) -> int:
        return len(self._subscribers)
