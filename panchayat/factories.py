"""Factory functions for dialogue, ticket prices and film ratings."""

from collections.abc import Callable, Mapping
from numbers import Real

from panchayat.numeric import round_half_up

DIALOGUE_TEMPLATES = {
    "action": "{hero} says: 'Tujhe toh main dekh lunga, {villain}!'",
    "romance": "{hero} whispers: '{villain}, tum mere liye sab kuch ho'",
    "comedy": "{hero} laughs: '{villain} bhai, kya kar rahe ho yaar!'",
    "drama": "{hero} cries: '{villain}, tune mera sab kuch cheen liya!'",
}

SEAT_MULTIPLIERS = {"silver": 1, "gold": 1.5, "platinum": 2}
WEEKEND_SURCHARGE = 1.3


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def create_dialogue_writer(genre: str) -> Callable[[str, str], str] | None:
    """Return a dialogue writer for ``genre``, or None for an unknown genre.

    Example:
        >>> create_dialogue_writer("action")("Shah Rukh", "Raees")
        "Shah Rukh says: 'Tujhe toh main dekh lunga, Raees!'"
    """
    template = DIALOGUE_TEMPLATES.get(genre)
    if template is None:
        return None

    def write(hero: str | None, villain: str | None) -> str:
        if not hero or not villain:
            return "..."
        return template.format(hero=hero, villain=villain)

    return write


def create_ticket_pricer(base_price: float) -> Callable[..., int | None] | None:
    """Return a ticket pricer for ``base_price``.

    The pricer takes a seat type and an optional weekend flag, and returns
    the price rounded to a whole number, or None for an unknown seat type.
    Returns None instead of a pricer when ``base_price`` isn't a positive
    number.
    """
    if not _is_number(base_price) or base_price <= 0:
        return None

    def price(seat_type: str, is_weekend: bool = False) -> int | None:
        multiplier = SEAT_MULTIPLIERS.get(seat_type)
        if multiplier is None:
            return None
        total = base_price * multiplier
        if is_weekend:
            total *= WEEKEND_SURCHARGE
        return int(round_half_up(total))

    return price


def create_rating_calculator(weights: Mapping[str, float]) -> Callable[[Mapping[str, float]], float] | None:
    """Return a weighted-average calculator, or None if ``weights`` isn't a mapping.

    Every weight key must have a score; the result is rounded to one decimal.
    """
    if not isinstance(weights, Mapping):
        return None

    def calculate(scores: Mapping[str, float]) -> float:
        total = sum(weight * scores[key] for key, weight in weights.items())
        return round_half_up(total, 1)

    return calculate
