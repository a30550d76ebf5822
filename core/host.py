"""Capabilities the controller needs from its host environment.

The controller never touches widgets, timers or the system clipboard
directly.  The Qt window supplies concrete implementations (see
``app/host.py``); tests supply in-memory fakes.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class TaskHandle(ABC):
    """Cancel handle for a callback scheduled with :class:`Scheduler`."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running.  Safe to call repeatedly."""

    @property
    @abstractmethod
    def pending(self) -> bool:
        """True until the callback has run or been cancelled."""


class Scheduler(ABC):
    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TaskHandle:
        """Run *callback* once after *delay_ms* on the UI event loop."""


class FocusQuery(ABC):
    """Read and move keyboard focus.

    Elements are opaque to the controller; it only compares them by
    identity and hands them back to :meth:`focus`.
    """

    @abstractmethod
    def active_element(self) -> Any | None:
        ...

    @abstractmethod
    def overlay_focusables(self) -> list[Any]:
        """Focusable elements inside the shortcuts overlay, in tab order.

        Empty when the overlay is not mounted.
        """

    @abstractmethod
    def lookup(self, name: str) -> Any | None:
        """Resolve a named control (``"text_input"``, ``"overlay_close"``...)."""

    @abstractmethod
    def focus(self, element: Any) -> bool:
        """Focus *element*; return False if it no longer exists."""


class SelectionQuery(ABC):
    @abstractmethod
    def has_selection(self) -> bool:
        """True when the user has text selected anywhere in the window."""


class Clipboard(ABC):
    @abstractmethod
    def write_text(self, text: str, on_done: Callable[[bool], None]) -> None:
        """Start writing *text*; call ``on_done(success)`` when finished."""
