"""A minimal sequential system scheduler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

SystemFn = Callable[[Any], None]


@dataclass(frozen=True)
class Owner:
    """Component marking the entity that owns another entity."""

    entity: Any


@dataclass
class SchedulerBuilder:
    """Collects systems in the order they are to run."""

    steps: list[SystemFn] = field(default_factory=list)

    def with_system(self, system: SystemFn) -> "SchedulerBuilder":
        """Return a new builder with ``system`` appended."""
        return SchedulerBuilder([*self.steps, system])

    def add_system(self, system: SystemFn) -> "SchedulerBuilder":
        """Append ``system`` to this builder and return it."""
        self.steps.append(system)
        return self

    def with_thread_local(self, system: SystemFn) -> "SchedulerBuilder":
        """Return a new builder with a thread-local ``system`` appended."""
        return SchedulerBuilder([*self.steps, system])

    def add_thread_local(self, system: SystemFn) -> "SchedulerBuilder":
        """Append a thread-local ``system`` to this builder and return it."""
        self.steps.append(system)
        return self

    def build(self) -> "Scheduler":
        """Create a scheduler running the collected systems."""
        return Scheduler(list(self.steps))


class Scheduler:
    """Runs its systems, in order, against a world."""

    def __init__(self, steps: list[SystemFn] | None = None):
        self.steps: list[SystemFn] = list(steps or [])

    @staticmethod
    def builder() -> SchedulerBuilder:
        """Return an empty builder."""
        return SchedulerBuilder()

    def execute(self, world: Any) -> None:
        """Run every system once on ``world``."""
        for system in self.steps:
            system(world)