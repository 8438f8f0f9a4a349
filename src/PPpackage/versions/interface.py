from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import IO

from frozendict import frozendict

from .installer import Event, dump_versions_module
from .schemes import EventName


@dataclass(frozen=True, kw_only=True)
class Interface:
    activate: Callable[[IO[str]], None]
    subscribed_events: Mapping[EventName, Callable[[Event], None]]

    def dispatch(self, event: Event) -> None:
        self.subscribed_events[event.name](event)


def activate(output: IO[str]) -> None:
    # all features are provided through event listeners
    pass


interface = Interface(
    activate=activate,
    subscribed_events=frozendict(
        {
            EventName.POST_INSTALL_CMD: dump_versions_module,
            EventName.POST_UPDATE_CMD: dump_versions_module,
        }
    ),
)
