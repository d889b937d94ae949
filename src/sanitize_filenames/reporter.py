"""Report sinks

The renamer and walker hand every decision to a reporter instead of printing,
so callers choose where report lines go.
"""

from typing import Protocol

from rich.console import Console
from rich.markup import escape

from sanitize_filenames.models import RenameEvent, RenameEventKind, RunSummary

# Rich style per event kind
EVENT_STYLES = {
    RenameEventKind.UNCHANGED: "dim",
    RenameEventKind.MISSING: "yellow",
    RenameEventKind.COLLISION: "yellow",
    RenameEventKind.RENAMED: "green",
    RenameEventKind.WOULD_RENAME: "cyan",
    RenameEventKind.FAILED: "red",
}


class Reporter(Protocol):
    """Receives one event per rename decision"""

    def report(self, event: RenameEvent) -> None: ...


class ConsoleReporter:
    """Writes each event as one line to a rich console"""

    def __init__(self, console: Console | None = None):
        """
        Args:
            console: target console, stdout by default
        """
        self.console = console or Console(highlight=False)

    def report(self, event: RenameEvent) -> None:
        style = EVENT_STYLES[event.kind]
        self.console.print(f"[{style}]{escape(event.message)}[/{style}]", soft_wrap=True)


class EventCollector:
    """Keeps events in memory, optionally forwarding them to another reporter"""

    def __init__(self, forward: Reporter | None = None):
        self.events: list[RenameEvent] = []
        self.forward = forward

    def report(self, event: RenameEvent) -> None:
        self.events.append(event)
        if self.forward is not None:
            self.forward.report(event)

    def of_kind(self, kind: RenameEventKind) -> list[RenameEvent]:
        return [event for event in self.events if event.kind is kind]

    def summary(self) -> RunSummary:
        return RunSummary.from_events(self.events)
