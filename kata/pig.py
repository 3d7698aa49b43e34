"""Simulation of the dice game Pig with fixed "hold at k" strategies."""

from __future__ import annotations

import random
import re
import sys
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

TOTAL_GAMES = 10
WINNING_SCORE = 100
DICE_FACE_COUNT = 6
PASS_VALUE = 1
MAX_HOLD = 100

USAGE = "usage: pig <number|range> <number|range>"

Roller = Callable[[], int]
Pairing = tuple["Player", "Player"]

_INTEGER = re.compile(r"[+-]?[0-9]+")


class PigError(Exception):
    """Raised for invalid command-line arguments."""


@dataclass
class Player:
    """A player who keeps rolling until the turn score reaches hold_capacity."""

    id: str
    hold_capacity: int = 0
    total_score: int = 0
    wins: int = 0

    def reset_total_score(self) -> None:
        self.total_score = 0

    def play_turn(self, roll: Roller) -> None:
        """Play one turn; a roll of PASS_VALUE forfeits the turn's score."""
        turn_score = 0
        while turn_score < self.hold_capacity:
            dice_value = roll()
            if dice_value == PASS_VALUE:
                return
            turn_score += dice_value
        self.total_score += turn_score


@dataclass(frozen=True)
class Range:
    """An inclusive range of hold capacities."""

    start: int
    end: int

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))


@dataclass(frozen=True)
class ParsedArg:
    """A command-line argument: either a single value or a range."""

    is_range: bool
    value: int = 0
    hold_range: Range = Range(0, 0)


def roll_dice() -> int:
    return random.randint(1, DICE_FACE_COUNT)


def switch_player(current_player: Player, p1: Player, p2: Player) -> Player:
    return p2 if current_player.id == p1.id else p1


def play(player_one: Player, player_two: Player, roll: Roller = roll_dice) -> None:
    """Play TOTAL_GAMES games, player one always starting, and record wins."""
    for _ in range(TOTAL_GAMES):
        current = player_one
        while current.total_score < WINNING_SCORE:
            current.play_turn(roll)
            current = switch_player(current, player_one, player_two)
        current.wins += 1
        player_one.reset_total_score()
        player_two.reset_total_score()


def play_fixed_vs_fixed(
    p1_hold_capacity: int, p2_hold_capacity: int, roll: Roller = roll_dice
) -> Pairing:
    player_one = Player(id="1", hold_capacity=p1_hold_capacity)
    player_two = Player(id="2", hold_capacity=p2_hold_capacity)
    play(player_one, player_two, roll)
    return player_one, player_two


def play_fixed_vs_variable(
    p1_hold_capacity: int, p2_hold_range: Range, roll: Roller = roll_dice
) -> list[Pairing]:
    """Play a fixed strategy against every other capacity in the range."""
    return [
        play_fixed_vs_fixed(p1_hold_capacity, p2_hold_capacity, roll)
        for p2_hold_capacity in p2_hold_range
        if p2_hold_capacity != p1_hold_capacity
    ]


def play_variable_vs_variable(
    p1_hold_range: Range, p2_hold_range: Range, roll: Roller = roll_dice
) -> list[Pairing]:
    return [
        pairing
        for p1_hold_capacity in p1_hold_range
        for pairing in play_fixed_vs_variable(p1_hold_capacity, p2_hold_range, roll)
    ]


def _percent(wins: int, total: int) -> str:
    if total == 0:
        return "NaN"
    return f"{wins * 100 / total:.1f}"


def format_result(p1: Player, p2: Player) -> str:
    return (
        f"Holding at {p1.hold_capacity} wins: {p1.wins}/{TOTAL_GAMES} "
        f"({_percent(p1.wins, TOTAL_GAMES)}%) vs "
        f"Holding at {p2.hold_capacity} wins: {p2.wins}/{TOTAL_GAMES} "
        f"({_percent(p2.wins, TOTAL_GAMES)}%)"
    )


def format_variable_strategy_results(
    results: Sequence[Pairing], p1_hold_range: Range
) -> list[str]:
    """Summarise wins and losses for each player-one capacity in the range."""
    by_p1: dict[int, list[Pairing]] = defaultdict(list)
    for pairing in results:
        by_p1[pairing[0].hold_capacity].append(pairing)

    formatted = []
    for p1_hold_capacity in p1_hold_range:
        pairings = by_p1.get(p1_hold_capacity)
        if not pairings:
            continue
        p1_wins = sum(first.wins for first, _ in pairings)
        p2_wins = sum(second.wins for _, second in pairings)
        total = p1_wins + p2_wins
        formatted.append(
            f"Result: Wins, losses staying at k = {p1_hold_capacity}: "
            f"{p1_wins}/{total} ({_percent(p1_wins, total)}%), "
            f"{p2_wins}/{total} ({_percent(p2_wins, total)}%)\n"
        )
    return formatted


def _to_int(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def _in_bounds(value: int) -> bool:
    return 0 < value <= MAX_HOLD


def parse_arg(arg: str) -> ParsedArg:
    """Parse "k" or "a-b" into a ParsedArg; raise PigError when invalid."""
    if "-" in arg:
        parts = arg.split("-")
        if len(parts) != 2:
            raise PigError(f"invalid range format: {arg}")
        start, end = (_to_int(part) for part in parts)
        if start is None or end is None:
            raise PigError(f"invalid range numbers in: {arg}")
        if not (_in_bounds(start) and _in_bounds(end)):
            raise PigError(f"invalid range numbers in: {arg}")
        return ParsedArg(is_range=True, hold_range=Range(start, end))

    value = _to_int(arg)
    if value is None:
        raise PigError(f"invalid number: {arg}")
    if not _in_bounds(value):
        raise PigError(f"invalid range numbers in: {arg}")
    return ParsedArg(is_range=False, value=value)


def _try_parse(arg: str) -> tuple[ParsedArg | None, str]:
    try:
        return parse_arg(arg), "<nil>"
    except PigError as err:
        return None, str(err)


def play_strategies(args: Sequence[str], roll: Roller = roll_dice) -> list[str]:
    """Run the simulation the arguments ask for and return the output lines."""
    if len(args) != 2:
        raise PigError(USAGE)

    arg1, err1 = _try_parse(args[0])
    arg2, err2 = _try_parse(args[1])
    if arg1 is None or arg2 is None:
        raise PigError(f"error: {err1}, {err2}")

    if not arg1.is_range and not arg2.is_range:
        return [format_result(*play_fixed_vs_fixed(arg1.value, arg2.value, roll))]
    if not arg1.is_range and arg2.is_range:
        return [
            format_result(first, second)
            for first, second in play_fixed_vs_variable(
                arg1.value, arg2.hold_range, roll
            )
        ]
    if arg1.is_range and arg2.is_range:
        results = play_variable_vs_variable(arg1.hold_range, arg2.hold_range, roll)
        summary = format_variable_strategy_results(results, arg1.hold_range)
        return ["[" + " ".join(summary) + "]"]
    return []


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        for line in play_strategies(args):
            print(line)
    except PigError as err:
        print(err)
    return 0


if __name__ == "__main__":
    sys.exit(main())