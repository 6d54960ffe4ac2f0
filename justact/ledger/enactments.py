"""
Append-only log of enacted actions.

An enactment is validated against the agreement registry (its basis) and the
statement store (its justification) before anything is appended. Validation
order is fixed:

1. basis must exist
2. justification must be non-empty
3. every justification index must exist; the smallest offending index is
   the one reported
4. the next sequence number must be renderable in the configured label style

Only when all checks pass is the action appended and the counter advanced.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .agreements import AgreementRegistry
from .errors import BasisUnknown, EmptyJustification, JustificationUnknown
from .labels import labeler
from .records import EnactedAction
from .statements import StatementStore

logger = logging.getLogger(__name__)


class EnactmentEngine:
    """Validates and records enacted actions."""

    def __init__(
        self,
        statements: StatementStore,
        agreements: AgreementRegistry,
        *,
        label_style: str = "alpha",
    ) -> None:
        self._statements = statements
        self._agreements = agreements
        self._label = labeler(label_style)
        self.label_style = label_style
        self._actions: list[EnactedAction] = []
        self._next_sequence = 0

    def enact(
        self,
        actor: str,
        basis_index: int,
        justification_indices: Iterable[int],
    ) -> tuple[str, str]:
        """Record `actor` acting on agreement `basis_index`.

        Returns:
            The new action id, `(actor, label)`.

        Raises:
            BasisUnknown: no agreement at `basis_index`.
            EmptyJustification: no statements were cited.
            JustificationUnknown: a cited statement was never declared
                (smallest such index).
            SequenceOverflow: the label style cannot render the next sequence.
        """
        basis = self._agreements.get(basis_index)
        if basis is None:
            logger.info("rejected enact by %s: unknown basis %d", actor, basis_index)
            raise BasisUnknown(basis_index)

        wanted = sorted(set(justification_indices))
        if not wanted:
            logger.info("rejected enact by %s: empty justification", actor)
            raise EmptyJustification()

        for index in wanted:
            if index not in self._statements:
                logger.info("rejected enact by %s: unknown justification %d", actor, index)
                raise JustificationUnknown(index)

        sequence = self._next_sequence
        label = self._label(sequence)

        action = EnactedAction(
            actor=actor,
            sequence=sequence,
            label=label,
            basis=basis,
            justification=frozenset(self._statements[i] for i in wanted),
        )
        self._actions.append(action)
        self._next_sequence += 1
        logger.debug("enacted %s/%s on agreement %d citing %s", actor, label, basis_index, wanted)
        return action.id

    @property
    def next_sequence(self) -> int:
        return self._next_sequence

    def get(self, index: int) -> EnactedAction | None:
        if 0 <= index < len(self._actions):
            return self._actions[index]
        return None

    def __getitem__(self, index: int) -> EnactedAction:
        return self._actions[index]

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[EnactedAction]:
        return iter(self._actions)
