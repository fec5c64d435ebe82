"""Basic strategy tables for blackjack."""

from enum import Enum
from typing import Mapping

from bjsim.cards import ACE
from bjsim.strategy.actions import Action
from bjsim.strategy.rules import RoundConfig

UPCARDS: tuple[int, ...] = tuple(range(2, 12))


class TableEntry(Enum):
    """Strategy table cells as (preferred action, fallback if not allowed)."""

    HIT = (Action.HIT, None)
    STAND = (Action.STAND, None)
    SPLIT = (Action.SPLIT, None)
    DOUBLE_OR_HIT = (Action.DOUBLE, Action.HIT)
    DOUBLE_OR_STAND = (Action.DOUBLE, Action.STAND)
    SURRENDER_OR_HIT = (Action.SURRENDER, Action.HIT)
    SURRENDER_OR_SPLIT = (Action.SURRENDER, Action.SPLIT)

    def __str__(self) -> str:
        return self.name.replace("_", "/")


# Chart codes. "Ph" splits only when doubling after a split is allowed.
_CODES: Mapping[str, TableEntry] = {
    "H": TableEntry.HIT,
    "S": TableEntry.STAND,
    "P": TableEntry.SPLIT,
    "D": TableEntry.DOUBLE_OR_HIT,
    "Ds": TableEntry.DOUBLE_OR_STAND,
}

# S17 charts without surrender. Rows are totals (pair rank for pairs, 11 = Aces),
# columns the dealer upcard 2-9, T, A.
_HARD_CHART = """
 9   H  D  D  D  D  H  H  H  H  H
10   D  D  D  D  D  D  D  D  H  H
11   D  D  D  D  D  D  D  D  D  H
12   H  H  S  S  S  H  H  H  H  H
13   S  S  S  S  S  H  H  H  H  H
14   S  S  S  S  S  H  H  H  H  H
15   S  S  S  S  S  H  H  H  H  H
16   S  S  S  S  S  H  H  H  H  H
"""

_SOFT_CHART = """
12   H  H  H  H  H  H  H  H  H  H
13   H  H  H  D  D  H  H  H  H  H
14   H  H  H  D  D  H  H  H  H  H
15   H  H  D  D  D  H  H  H  H  H
16   H  H  D  D  D  H  H  H  H  H
17   H  D  D  D  D  H  H  H  H  H
18  Ds Ds Ds Ds Ds  S  S  H  H  H
19   S  S  S  S  S  S  S  S  S  S
20   S  S  S  S  S  S  S  S  S  S
21   S  S  S  S  S  S  S  S  S  S
"""

_PAIR_CHART = """
 2  Ph Ph  P  P  P  P  H  H  H  H
 3  Ph Ph  P  P  P  P  H  H  H  H
 4   H  H  H Ph Ph  H  H  H  H  H
 5   D  D  D  D  D  D  D  D  H  H
 6  Ph  P  P  P  P  H  H  H  H  H
 7   P  P  P  P  P  P  H  H  H  H
 8   P  P  P  P  P  P  P  P  P  P
 9   P  P  P  P  P  S  P  P  S  S
10   S  S  S  S  S  S  S  S  S  S
11   P  P  P  P  P  P  P  P  P  P
"""


def upcard_value(rank: int) -> int:
    """Return the table column for a dealer upcard rank (Ace = 11)."""
    return 11 if rank == ACE else rank


def _read_chart(
    chart: str, double_after_split: bool = True
) -> dict[tuple[int, int], TableEntry]:
    table: dict[tuple[int, int], TableEntry] = {}
    for line in chart.strip().splitlines():
        row, *codes = line.split()
        for upcard, code in zip(UPCARDS, codes, strict=True):
            if code == "Ph":
                code = "P" if double_after_split else "H"
            table[(int(row), upcard)] = _CODES[code]
    return table


class BasicStrategy:
    """
    Basic strategy lookup tables.

    Dictionaries keyed by (player total or pair rank, dealer upcard 2-11),
    read from the S17 charts and adjusted for the rule set (H17, DAS,
    surrender).
    """

    def __init__(self, rules: RoundConfig | None = None) -> None:
        """
        Initialize basic strategy for given rules.

        Args:
            rules: Rule set to generate strategy for. Uses default if None.
        """
        self.rules = rules or RoundConfig()
        self._hard_table = self._build_hard_table()
        self._soft_table = self._build_soft_table()
        self._pair_table = self._build_pair_table()

    def get_action(
        self,
        player_total: int,
        dealer_upcard: int,
        is_soft: bool = False,
        is_pair: bool = False,
        pair_rank: int | None = None,
        can_double: bool = True,
        can_surrender: bool = True,
        can_split: bool = True,
    ) -> Action:
        """
        Get the basic strategy action.

        Args:
            player_total: Player's hand total
            dealer_upcard: Dealer's upcard value (2-11, Ace=11)
            is_soft: Whether the hand is soft
            is_pair: Whether the hand is a pair
            pair_rank: The rank value of the pair (2-11, Ace=11)
            can_double: Whether doubling is allowed
            can_surrender: Whether surrender is allowed
            can_split: Whether splitting is allowed

        Returns:
            The recommended action
        """
        entry = None
        if is_pair and can_split and pair_rank is not None:
            entry = self._pair_table.get((pair_rank, dealer_upcard))
        if entry is None and is_soft:
            entry = self._soft_table.get((player_total, dealer_upcard))
        if entry is None:
            entry = self._hard_table.get((player_total, dealer_upcard))

        if entry is None:
            return Action.STAND if player_total >= 17 else Action.HIT
        return self._resolve_entry(entry, can_double, can_surrender)

    def _resolve_entry(
        self,
        entry: TableEntry,
        can_double: bool,
        can_surrender: bool,
    ) -> Action:
        """Fall back when the preferred action is not allowed."""
        preferred, fallback = entry.value
        if preferred == Action.DOUBLE and not can_double:
            return fallback
        if preferred == Action.SURRENDER and not can_surrender:
            return fallback
        return preferred

    def _build_hard_table(self) -> Mapping[tuple[int, int], TableEntry]:
        """Build hard totals strategy table."""
        table = _read_chart(_HARD_CHART)
        for upcard in UPCARDS:
            for total in range(4, 9):
                table[(total, upcard)] = TableEntry.HIT
            for total in range(17, 22):
                table[(total, upcard)] = TableEntry.STAND

        h17 = self.rules.dealer_hits_soft_17
        if h17:
            table[(11, 11)] = TableEntry.DOUBLE_OR_HIT

        if self.rules.surrender != "none":
            cells = [(15, 10), (16, 9), (16, 10), (16, 11)]
            if h17:
                cells.append((15, 11))
            for cell in cells:
                table[cell] = TableEntry.SURRENDER_OR_HIT

        return table

    def _build_soft_table(self) -> Mapping[tuple[int, int], TableEntry]:
        """Build soft totals strategy table."""
        table = _read_chart(_SOFT_CHART)
        if self.rules.dealer_hits_soft_17:
            table[(19, 6)] = TableEntry.DOUBLE_OR_STAND
        return table

    def _build_pair_table(self) -> Mapping[tuple[int, int], TableEntry]:
        """Build pair splitting strategy table."""
        table = _read_chart(_PAIR_CHART, self.rules.double_after_split)
        if self.rules.surrender != "none" and self.rules.dealer_hits_soft_17:
            table[(8, 11)] = TableEntry.SURRENDER_OR_SPLIT
        return table

    @property
    def hard_table(self) -> Mapping[tuple[int, int], TableEntry]:
        """Return the hard totals strategy table."""
        return self._hard_table

    @property
    def soft_table(self) -> Mapping[tuple[int, int], TableEntry]:
        """Return the soft totals strategy table."""
        return self._soft_table

    @property
    def pair_table(self) -> Mapping[tuple[int, int], TableEntry]:
        """Return the pair splitting strategy table."""
        return self._pair_table
