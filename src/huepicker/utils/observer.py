"""Generic observer registry.

ObserverManager keeps a list of observers and calls one named callback on
each of them. A failing observer is logged and skipped so it cannot stop the
others, or the edit that triggered the notification, from completing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Observer list with idempotent registration and isolated callbacks.

    Type Parameters:
        T: The observer protocol type (e.g., ColorObserver)

    Example:
        ```python
        class Picker:
            def __init__(self):
                self._observers = ObserverManager[ColorObserver](observer_type_name="color")

            def _emit(self, color):
                self._observers.notify("on_color_changed", color)
        ```

    Registration is guarded by a lock; the lock is released before any
    callback runs so observers may register or unregister from inside a
    notification.
    """

    def __init__(self, lock: Lock | None = None, observer_type_name: str = "observer"):
        """
        Args:
            lock: Optional lock to share with the owner. A new one is created if None.
            observer_type_name: Label used in log messages (e.g., "color")
        """
        self._observers: list[T] = []
        self._lock = lock or Lock()
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """Register an observer. Registering twice has no effect."""
        with self._lock:
            if observer in self._observers:
                logger.debug(f"{self._observer_type_name} observer already registered: {observer}")
                return
            self._observers.append(observer)
        logger.info(f"Registered {self._observer_type_name} observer: {observer}")

    def unregister(self, observer: T) -> None:
        """Unregister an observer; unknown observers are logged and ignored."""
        with self._lock:
            if observer not in self._observers:
                logger.warning(
                    f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
                )
                return
            self._observers.remove(observer)
        logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Call `callback_name(*args, **kwargs)` on every observer.

        Args:
            callback_name: Method to call (e.g., 'on_color_changed')
        """
        with self._lock:
            observers = list(self._observers)
        self._dispatch(observers, callback_name, args, kwargs)

    def notify_with_filter(
        self, callback_name: str, filter_fn: Callable[[T], bool], *args: Any, **kwargs: Any
    ) -> None:
        """
        Call `callback_name` only on observers accepted by `filter_fn`.

        Used for optional callbacks, e.g. only observers that also
        implement `on_hsv_color_changed` receive the canonical HSV value.
        """
        with self._lock:
            observers = [obs for obs in self._observers if filter_fn(obs)]
        self._dispatch(observers, callback_name, args, kwargs)

    def _dispatch(
        self, observers: Iterable[T], callback_name: str, args: tuple, kwargs: dict
    ) -> None:
        for observer in observers:
            try:
                callback = getattr(observer, callback_name)
            except AttributeError:
                logger.error(
                    f"{self._observer_type_name} observer {observer} has no method '{callback_name}'"
                )
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} "
                    f"via {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered observers."""
        with self._lock:
            count = len(self._observers)
            self._observers.clear()
        if count > 0:
            logger.info(f"Cleared {count} {self._observer_type_name} observer(s)")

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def __bool__(self) -> bool:
        return len(self) > 0
