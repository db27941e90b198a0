"""Static hall of fame content, maintained by hand after each competition."""

from datetime import date

from events.domain import EventWinners, Winner


def _avatar(seed: str) -> str:
    return f"https://api.dicebear.com/7.x/adventurer/svg?seed={seed}"


HALL_OF_FAME: tuple[EventWinners, ...] = (
    EventWinners(
        event_title="Quantum Break CTF 2024",
        held_on=date(2024, 8, 15),
        winners=(
            Winner("Cipher", rank=1, score=9850, team_name="The Phantoms", avatar_url=_avatar("cipher")),
            Winner("Glitch", rank=2, score=9120, avatar_url=_avatar("glitch")),
            Winner("Nyx", rank=3, score=8750, team_name="Data Daemons", avatar_url=_avatar("nyx")),
        ),
    ),
    EventWinners(
        event_title="Project Sentinel Finals",
        held_on=date(2024, 5, 20),
        winners=(
            Winner("Vector", rank=1, score=8500, avatar_url=_avatar("vector")),
            Winner("Proxy", rank=2, score=8100, team_name="Root Cause", avatar_url=_avatar("proxy")),
        ),
    ),
)
