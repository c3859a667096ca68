# Distant Start
# Copyright (C) 2025  Distant Start developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Optional, Sequence

from distantstart.constants import (
    MIN_HUMAN_PARTICIPANTS,
    OUTCOME_ALL_HUMAN,
    OUTCOME_ALREADY_OPTIMAL,
    OUTCOME_BALANCED,
    OUTCOME_TOO_FEW_HUMANS,
    OUTCOME_TOO_MANY_HUMANS,
    OUTCOME_TOO_MANY_PARTICIPANTS,
    SEPARATOR_LINE,
)
from distantstart.models.config import BalancerConfig
from distantstart.models.participant import (
    Participant,
    classify_participants,
    positions_by_id,
)
from distantstart.models.result import BalanceResult
from distantstart.models.swap import apply_swaps
from distantstart.spread.optimizer import find_most_distant_subset
from distantstart.spread.reconciliation import plan_swaps, reconcile
from distantstart.type_hints import DistanceOracle
from distantstart.utils import setup_logger

logger = setup_logger(__name__)


class StartBalancer:
    """Moves human participants onto the most spread-out starting positions.

    This class is responsible for:
    - Classifying the snapshot into human and AI participants
    - Turning unsupported games into descriptive no-ops
    - Running the spread optimizer and reconciling its result
    - Executing the planned swaps and reporting every decision
    """

    def __init__(
        self,
        distance: DistanceOracle,
        config: Optional[BalancerConfig] = None,
    ):
        """Initialize the balancer.

        Args:
            distance: Distance oracle over position ids
            config: Balancer settings, defaults to ``BalancerConfig()``
        """
        self.distance = distance
        self.config = config if config is not None else BalancerConfig()

    def check_supported(
        self, participants: Sequence[Participant], humans: Sequence[Participant]
    ) -> Optional[BalanceResult]:
        """Return a no-op result when the game cannot be balanced.

        Returns:
            BalanceResult for an unsupported game, or None when the
            optimizer should run
        """
        n = len(participants)
        human_count = len(humans)
        ai_count = n - human_count

        if n > self.config.max_participants:
            message = (
                f"{n} participants detected. At most "
                f"{self.config.max_participants} are supported. Doing nothing!"
            )
            logger.warning(message)
            return self._no_op(OUTCOME_TOO_MANY_PARTICIPANTS, message, participants, humans)

        if n > 0 and human_count == n:
            message = (
                "All participants in this game are human. Starting positions are "
                "rebalanced by swapping human and AI positions, so with no AI "
                "participants there is nothing to do."
            )
            logger.info(message)
            return self._no_op(OUTCOME_ALL_HUMAN, message, participants, humans)

        if human_count < MIN_HUMAN_PARTICIPANTS:
            message = (
                f"{human_count} human participant(s) detected. At least "
                f"{MIN_HUMAN_PARTICIPANTS} are needed to spread them apart. Doing nothing!"
            )
            logger.info(message)
            return self._no_op(OUTCOME_TOO_FEW_HUMANS, message, participants, humans)

        if self.config.max_humans is not None and human_count > self.config.max_humans:
            message = (
                f"{human_count} human participants detected. Only up to "
                f"{self.config.max_humans} are supported. Doing nothing!"
            )
            logger.warning(message)
            return self._no_op(OUTCOME_TOO_MANY_HUMANS, message, participants, humans)

        logger.debug(
            "Balancing %d participants: %d human, %d AI", n, human_count, ai_count
        )
        return None

    @staticmethod
    def _no_op(
        outcome: str,
        message: str,
        participants: Sequence[Participant],
        humans: Sequence[Participant],
    ) -> BalanceResult:
        positions = positions_by_id(participants)
        return BalanceResult(
            outcome=outcome,
            human_count=len(humans),
            ai_count=len(participants) - len(humans),
            initial_positions=positions,
            final_positions=dict(positions),
            message=message,
        )

    def balance(self, participants: Sequence[Participant]) -> BalanceResult:
        """Rebalance starting positions for one game setup.

        Swaps are applied in place on the given participants unless the
        configuration asks for a dry run.

        Args:
            participants: Snapshot in the host's enumeration order

        Returns:
            BalanceResult with the outcome and every intermediate value

        Raises:
            ReconciliationException: If the swap plan cannot be built
        """
        all_participants, humans, ais = classify_participants(participants)
        logger.info(
            "Found %d participants: %d human, %d AI",
            len(all_participants),
            len(humans),
            len(ais),
        )

        no_op = self.check_supported(all_participants, humans)
        if no_op is not None:
            return no_op

        initial_positions = positions_by_id(all_participants)
        self.log_positions(
            "Initial starting positions, before any changes:", humans, ais
        )

        logger.info(SEPARATOR_LINE)
        logger.info("Finding the most distant starting positions...")
        winning = find_most_distant_subset(
            all_participants,
            len(humans),
            self.distance,
            max_participants=self.config.max_participants,
        )
        logger.info(
            "Most distant starting positions: %s",
            ", ".join(str(p.position_id) for p in winning),
        )

        logger.info(SEPARATOR_LINE)
        logger.info(
            "Checking if any of the most distant positions are already held by humans..."
        )
        remaining_targets, remaining_humans = reconcile(winning, humans)
        already_placed = [h for h in humans if h not in remaining_humans]

        instructions = plan_swaps(remaining_targets, remaining_humans)

        logger.info(SEPARATOR_LINE)
        logger.info("Number of human participants to be repositioned: %d", len(instructions))

        applied = False
        if instructions and not self.config.dry_run:
            apply_swaps(instructions)
            applied = True
        elif instructions:
            for instruction in instructions:
                logger.info(
                    "Dry run: would move %s from %s to %s",
                    instruction.human.name,
                    instruction.human.position_id,
                    instruction.other.position_id,
                )

        self.log_positions("Final starting positions:", humans, ais)

        if instructions:
            outcome = OUTCOME_BALANCED
            message = f"Repositioned {len(instructions)} human participant(s)."
            if self.config.dry_run:
                message = f"Planned {len(instructions)} swap(s) (dry run)."
        else:
            outcome = OUTCOME_ALREADY_OPTIMAL
            message = "Human participants already occupy the most distant positions."

        return BalanceResult(
            outcome=outcome,
            human_count=len(humans),
            ai_count=len(ais),
            winning_combination=winning,
            already_placed=already_placed,
            instructions=instructions,
            initial_positions=initial_positions,
            final_positions=positions_by_id(all_participants),
            applied=applied,
            message=message,
        )

    @staticmethod
    def log_positions(
        message: str, humans: Sequence[Participant], ais: Sequence[Participant]
    ) -> None:
        """Log the position held by every participant, humans first."""
        logger.info(SEPARATOR_LINE)
        logger.info(message)
        for label, group in (("Human participant", humans), ("AI participant", ais)):
            for i, participant in enumerate(group, start=1):
                logger.info(
                    "%s %d starting position: %s", label, i, participant.position_id
                )


def balance_starting_positions(
    participants: Sequence[Participant],
    distance: DistanceOracle,
    config: Optional[BalancerConfig] = None,
) -> BalanceResult:
    """Convenience wrapper around ``StartBalancer(distance, config).balance``."""
    return StartBalancer(distance, config).balance(participants)

