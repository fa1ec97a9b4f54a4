"""Festival calendar with private state."""

from panchayat.models import Festival

FESTIVAL_TYPES = ("religious", "national", "cultural")


class FestivalManager:
    """Keeps a list of festivals that is only reachable through its methods.

    Example:
        >>> manager = FestivalManager()
        >>> manager.add_festival("Diwali", "2025-10-20", "religious")
        1
        >>> manager.add_festival("Republic Day", "2025-01-26", "national")
        2
        >>> [f.name for f in manager.get_upcoming("2025-01-01", 1)]
        ['Republic Day']
    """

    __slots__ = ("_festivals",)

    def __init__(self):
        self._festivals: list[Festival] = []

    def add_festival(self, name: str, date: str, type: str) -> int:
        """Add a festival and return the new count, or -1 if it was refused.

        Refused when the name is empty or already taken, the date isn't a
        string, or the type isn't one of FESTIVAL_TYPES.
        """
        if not name or not isinstance(date, str) or type not in FESTIVAL_TYPES:
            return -1
        if any(f.name == name for f in self._festivals):
            return -1
        self._festivals.append(Festival(name=name, date=date, type=type))
        return len(self._festivals)

    def remove_festival(self, name: str) -> bool:
        remaining = [f for f in self._festivals if f.name != name]
        if len(remaining) == len(self._festivals):
            return False
        self._festivals = remaining
        return True

    def get_all(self) -> list[Festival]:
        return list(self._festivals)

    def get_by_type(self, type: str) -> list[Festival]:
        return [f for f in self._festivals if f.type == type]

    def get_upcoming(self, current_date: str, n: int = 3) -> list[Festival]:
        """Return the next ``n`` festivals on or after ``current_date``, soonest first."""
        upcoming = [f for f in self._festivals if f.date >= current_date]
        return sorted(upcoming, key=lambda f: f.date)[:n]

    def get_count(self) -> int:
        return len(self._festivals)


def create_festival_manager() -> FestivalManager:
    return FestivalManager()
