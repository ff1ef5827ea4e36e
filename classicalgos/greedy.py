"""Greedy algorithms: activity selection, fractional knapsack, job sequencing, coin change."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from classicalgos.dynamic import ChangeImpossibleError

__all__ = [
    "Activity",
    "Item",
    "Job",
    "select_activities",
    "fractional_knapsack",
    "sequence_jobs",
    "greedy_change",
]


@dataclass(frozen=True)
class Activity:
    """An activity occupying the interval from ``start`` to ``finish``."""

    start: int
    finish: int


@dataclass(frozen=True)
class Item:
    """An item that may be taken whole or in part."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        return self.value / self.weight


@dataclass(frozen=True)
class Job:
    """A unit-time job with a deadline and a profit."""

    id: str
    deadline: int
    profit: int


def select_activities(activities: Iterable[Activity]) -> list[Activity]:
    """Return a maximum set of mutually compatible activities, ordered by finish time."""
    ordered = sorted(activities, key=lambda activity: activity.finish)
    if not ordered:
        return []

    selected = [ordered[0]]
    last_finish = ordered[0].finish
    for activity in ordered[1:]:
        if activity.start >= last_finish:
            selected.append(activity)
            last_finish = activity.finish
    return selected


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Return the best value obtainable when items may be split."""
    items = list(items)
    if any(item.weight <= 0 for item in items):
        raise ValueError("item weights must be positive")

    remaining = capacity
    total = 0.0
    for item in sorted(items, key=lambda item: item.ratio, reverse=True):
        if item.weight <= remaining:
            remaining -= item.weight
            total += item.value
        else:
            total += item.value * (remaining / item.weight)
            break
    return total


def sequence_jobs(jobs: Sequence[Job]) -> list[str]:
    """Return the ids of the scheduled jobs in slot order, maximising profit."""
    slots: list[str | None] = [None] * len(jobs)
    for job in sorted(jobs, key=lambda job: job.profit, reverse=True):
        latest = min(job.deadline, len(slots))
        for slot in reversed(range(latest)):
            if slots[slot] is None:
                slots[slot] = job.id
                break
    return [job_id for job_id in slots if job_id is not None]


def greedy_change(coins: Sequence[int], amount: int) -> list[tuple[int, int]]:
    """Make change by taking as many of each coin as fit, in the order given.

    Returns ``(denomination, count)`` pairs for every coin used. Raises
    ChangeImpossibleError when an amount is left over.
    """
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin denominations must be positive")

    remaining = amount
    used: list[tuple[int, int]] = []
    for coin in coins:
        if coin <= remaining:
            count, remaining = divmod(remaining, coin)
            used.append((coin, count))

    if remaining > 0:
        raise ChangeImpossibleError(amount)
    return used