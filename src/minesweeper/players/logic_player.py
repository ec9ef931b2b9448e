"""
Logic-based player for Minesweeper.

Uses constraint propagation over the opened numbers to find cells that
are certainly safe or certainly mined, flags the mines and opens the
safe cells. Falls back to the lowest estimated mine probability when
nothing is certain.
"""
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

import numpy as np

from .base_player import BasePlayer

Position = Tuple[int, int]


# ============================================================================
# Constraint Types
# ============================================================================

@dataclass(frozen=True)
class Constraint:
    """
    A constraint representing: sum of cells in 'cells' == mine_count.

    For example, if an opened "2" has 3 hidden neighbors and 0 flagged,
    the constraint is: cells={A, B, C}, mine_count=2
    """

    cells: FrozenSet[Position]
    mine_count: int


# ============================================================================
# Logic Player
# ============================================================================

class LogicPlayer(BasePlayer):
    """
    Player that deduces mines from opened numbers.

    Strategy:
        1. Build constraints from all opened numbered cells
        2. Propagate single-constraint and subset rules to a fixpoint
        3. Apply the global mine count to the cells no number touches
        4. Open a certainly safe cell, else flag a certain mine
        5. Otherwise open the hidden cell least likely to be a mine

    Flags are only ever placed on deduced mines, so the flag budget is
    never spent on a safe cell.
    """

    def __init__(
        self,
        board_size: int = 10,
        num_mines: int = 10,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the logic player.

        Args:
            board_size: Number of rows and columns on the board.
            num_mines: Mines on the board.
            seed: Random seed for first-move and tie choices.
        """
        super().__init__(board_size, num_mines)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select the best action using constraint propagation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Best action index based on analysis.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions)[0]
        if len(valid_indices) == 0:
            return 0
        valid = set(int(index) for index in valid_indices)

        if not np.any(observation >= 0):
            return self._select_first_move(valid)

        safe_cells, mine_cells = self._solve_constraints(observation)

        for row, col in sorted(safe_cells):
            action = self.open_action(row, col)
            if action in valid:
                return action

        for row, col in sorted(mine_cells):
            action = self.flag_action(row, col)
            if action in valid:
                return action

        return self._select_by_probability(observation, valid, mine_cells)

    def _select_first_move(self, valid: Set[int]) -> int:
        """Select random corner for first move (corners cascade more often)."""
        last = self.board_size - 1
        corners = [
            self.open_action(0, 0),
            self.open_action(0, last),
            self.open_action(last, 0),
            self.open_action(last, last),
        ]
        for corner in self.rng.permutation(corners):
            if int(corner) in valid:
                return int(corner)
        opens = sorted(action for action in valid if action < self.total_cells)
        return int(self.rng.choice(opens or sorted(valid)))

    def _build_constraints(self, observation: np.ndarray) -> List[Constraint]:
        """
        Build constraints from opened numbered cells.

        Each opened number N with hidden neighbors creates a constraint:
        "exactly (N - flagged_count) of these hidden cells are mines"
        """
        constraints = []

        for row in range(self.board_size):
            for col in range(self.board_size):
                value = int(observation[row, col])
                if value < 1:
                    continue

                hidden, flagged = self._classify_neighbors(observation, row, col)
                remaining = value - len(flagged)

                if not hidden or remaining < 0 or remaining > len(hidden):
                    continue

                constraints.append(Constraint(frozenset(hidden), remaining))

        return constraints

    def _solve_constraints(
        self, observation: np.ndarray
    ) -> Tuple[Set[Position], Set[Position]]:
        """
        Propagate constraints to find definite safe/mine cells.

        Returns:
            Tuple of (safe_cells, mine_cells) sets.
        """
        safe_cells: Set[Position] = set()
        mine_cells: Set[Position] = set()

        constraints = self._build_constraints(observation)
        constraints.append(self._global_constraint(observation))

        changed = True
        iterations = 0
        max_iterations = 100

        while changed and iterations < max_iterations:
            changed = False
            iterations += 1

            reduced = []
            for constraint in constraints:
                remaining_cells = constraint.cells - safe_cells - mine_cells
                remaining_mines = (
                    constraint.mine_count - len(constraint.cells & mine_cells)
                )

                if not remaining_cells:
                    continue

                if remaining_mines == 0:
                    safe_cells.update(remaining_cells)
                    changed = True
                    continue

                if remaining_mines == len(remaining_cells):
                    mine_cells.update(remaining_cells)
                    changed = True
                    continue

                reduced.append(Constraint(frozenset(remaining_cells), remaining_mines))

            subset_safe, subset_mines, constraints = self._subset_reduction(reduced)
            if subset_safe - safe_cells or subset_mines - mine_cells:
                safe_cells.update(subset_safe)
                mine_cells.update(subset_mines)
                changed = True

        return safe_cells, mine_cells

    def _global_constraint(self, observation: np.ndarray) -> Constraint:
        """All hidden cells together hold the mines not yet flagged."""
        hidden = frozenset(
            (int(row), int(col)) for row, col in zip(*np.where(observation == -1))
        )
        flagged = int(np.sum(observation == -2))
        return Constraint(hidden, self.num_mines - flagged)

    def _subset_reduction(
        self, constraints: List[Constraint]
    ) -> Tuple[Set[Position], Set[Position], List[Constraint]]:
        """
        Apply subset reduction to find additional deductions.

        If constraint A's cells are a subset of constraint B's cells, the
        difference (B - A) holds (B.mines - A.mines) mines.

        Example:
            A: {X, Y} has 1 mine
            B: {X, Y, Z} has 1 mine
            -> Z must be safe
        """
        safe_cells: Set[Position] = set()
        mine_cells: Set[Position] = set()
        derived: List[Constraint] = []

        for first in constraints:
            for second in constraints:
                if not first.cells < second.cells:
                    continue

                diff_cells = second.cells - first.cells
                diff_mines = second.mine_count - first.mine_count

                if diff_mines == 0:
                    safe_cells.update(diff_cells)
                elif diff_mines == len(diff_cells):
                    mine_cells.update(diff_cells)
                elif 0 < diff_mines < len(diff_cells):
                    derived.append(Constraint(frozenset(diff_cells), diff_mines))

        # Deduplicate, keeping order
        unique = list(dict.fromkeys(constraints + derived))
        return safe_cells, mine_cells, unique

    def _classify_neighbors(
        self, observation: np.ndarray, row: int, col: int
    ) -> Tuple[Set[Position], Set[Position]]:
        """Split the neighbors of (row, col) into hidden and flagged sets."""
        hidden: Set[Position] = set()
        flagged: Set[Position] = set()

        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                if 0 <= nr < self.board_size and 0 <= nc < self.board_size:
                    value = observation[nr, nc]
                    if value == -1:
                        hidden.add((nr, nc))
                    elif value == -2:
                        flagged.add((nr, nc))

        return hidden, flagged

    def _select_by_probability(
        self,
        observation: np.ndarray,
        valid: Set[int],
        known_mines: Set[Position],
    ) -> int:
        """Open the hidden cell with the lowest estimated mine probability."""
        probabilities = self._estimate_mine_probabilities(observation, known_mines)

        candidates = sorted(
            action for action in valid
            if action < self.total_cells
            and self.action_to_position(action) not in known_mines
        )
        if not candidates:
            return min(valid)

        best = min(
            probabilities.get(self.action_to_position(action), 0.5)
            for action in candidates
        )
        best_actions = [
            action for action in candidates
            if probabilities.get(self.action_to_position(action), 0.5) == best
        ]
        return int(self.rng.choice(best_actions))

    def _estimate_mine_probabilities(
        self,
        observation: np.ndarray,
        known_mines: Set[Position],
    ) -> Dict[Position, float]:
        """
        Estimate mine probability for each hidden cell next to a number.

        Returns:
            Dict mapping (row, col) to probability of being a mine.
        """
        probabilities: Dict[Position, List[float]] = defaultdict(list)

        for constraint in self._build_constraints(observation):
            unknown = constraint.cells - known_mines
            remaining = constraint.mine_count - len(constraint.cells & known_mines)

            if not unknown or remaining < 0:
                continue

            prob = remaining / len(unknown)
            for cell in unknown:
                probabilities[cell].append(prob)

        # Take maximum (most conservative estimate)
        return {cell: max(probs) for cell, probs in probabilities.items()}
