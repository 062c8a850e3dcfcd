"""Prize scoring for a Wheel of Fortune style letter-guessing game."""

from typing import Iterable, Sequence

_LETTER_PRIZE = 100
_FIRST_CHANCE_PRIZE = 1000
_SECOND_CHANCE_PRIZE = 2000


def get_price(quiz_lines: Sequence[str], guesses: Iterable[str]) -> int:
    """Return the total prize won by guessing ``guesses`` in order.

    Each revealed letter pays 100 times the current streak of successful
    guesses. Revealing a line's first letter while that line is still
    untouched pays 1000 and opens a second chance on it; hitting that line
    again with the very next guess pays 2000.
    """
    flipped: set[tuple[int, int]] = set()
    first_chance = set(range(len(quiz_lines)))
    second_chance: set[int] = set()
    streak = 0
    total = 0

    for guess in guesses:
        points = [
            (line_no, pos)
            for line_no, line in enumerate(quiz_lines)
            for pos, letter in enumerate(line)
            if letter == guess and (line_no, pos) not in flipped
        ]
        if not points:
            streak = 0
            second_chance.clear()
            continue

        streak += 1
        touched_lines = {line_no for line_no, _ in points}
        first_lines = [
            line_no for line_no, pos in points if pos == 0 and line_no in first_chance
        ]
        second_hits = len(touched_lines & second_chance)

        total += _LETTER_PRIZE * streak * len(points)
        total += _FIRST_CHANCE_PRIZE * len(first_lines)
        total += _SECOND_CHANCE_PRIZE * second_hits

        first_chance -= touched_lines
        second_chance = set(first_lines)
        flipped.update(points)

    return total