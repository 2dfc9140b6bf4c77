"""Domain service: order status transition policies.

The intended happy path is::

    pending -> confirmed -> processing -> completed

with ``cancelled`` reachable from any non-terminal state.  The default
policy does not enforce it: any enumerated status may be written from any
prior status.  ``StrictTransitionPolicy`` enforces the table instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.order import OrderStatus

HAPPY_PATH: tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PROCESSING,
    OrderStatus.COMPLETED,
)

ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


class TransitionPolicy(ABC):

    @abstractmethod
    def check(self, current: OrderStatus, target: OrderStatus) -> None:
        """Raise ValidationError if ``current -> target`` is not allowed."""


class PermissiveTransitionPolicy(TransitionPolicy):
    """Accepts every enumerated target from every state, terminal ones included."""

    def check(self, current: OrderStatus, target: OrderStatus) -> None:
        return None


class StrictTransitionPolicy(TransitionPolicy):

    def __init__(
        self,
        transitions: dict[OrderStatus, frozenset[OrderStatus]] | None = None,
    ) -> None:
        self._transitions = transitions if transitions is not None else ALLOWED_TRANSITIONS

    def check(self, current: OrderStatus, target: OrderStatus) -> None:
        if target not in self._transitions.get(current, frozenset()):
            raise ValidationError(
                f"Cannot move order from {current.value} to {target.value}"
            )


def policy_named(name: str) -> TransitionPolicy:
    """Resolve the policy selected in configuration."""
    policies: dict[str, type[TransitionPolicy]] = {
        "permissive": PermissiveTransitionPolicy,
        "strict": StrictTransitionPolicy,
    }
    try:
        return policies[name.lower()]()
    except KeyError as exc:
        raise ValidationError(
            f"Unknown status policy {name!r}, expected 'permissive' or 'strict'"
        ) from exc
