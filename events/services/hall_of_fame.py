"""Hall of fame - final standings of past competitions."""

from collections.abc import Iterable
from dataclasses import dataclass

from events.content import HALL_OF_FAME
from events.domain import EventWinners, Winner

PODIUM_SIZE = 3


@dataclass(frozen=True)
class HallOfFameSection:
    """One competition split into its podium and the remaining places."""

    event_title: str
    held_on: str
    podium: tuple[Winner, ...]
    others: tuple[Winner, ...]


def build_section(entry: EventWinners) -> HallOfFameSection:
    ranked = sorted(entry.winners, key=lambda winner: winner.rank)
    return HallOfFameSection(
        event_title=entry.event_title,
        held_on=entry.held_on.isoformat(),
        podium=tuple(ranked[:PODIUM_SIZE]),
        others=tuple(ranked[PODIUM_SIZE:]),
    )


def hall_of_fame(entries: Iterable[EventWinners] = HALL_OF_FAME) -> list[HallOfFameSection]:
    """Return the hall of fame, most recent competition first."""
    ordered = sorted(entries, key=lambda entry: entry.held_on, reverse=True)
    return [build_section(entry) for entry in ordered]
