"""Frontend adapter contracts for application orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
from typing import Protocol


class FrontendWindow(Protocol):
    """Minimal UI window contract expected by the entry point."""

    def show_windowed(self) -> None:
        """Show the calculator in a normal window."""

    def sync_ui(self) -> None:
        """Synchronize rendered UI with latest controller state."""


@dataclass(frozen=True, slots=True)
class FrontendBundle:
    """Resolved frontend runtime artifacts."""

    window: FrontendWindow
    run_event_loop: Callable[[], int]
