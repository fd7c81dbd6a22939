"""Run rules: derive star, warp and run-boundary events between ticks.

A rule sees the previous tick's State and the freshly refreshed current
State, and may update ``current.run`` (stars, star_map, warp_map, status).
The memory layout that would reveal star pickups and warp outcomes is not
mapped yet, so the default rule does nothing and runs are started and
ended by whoever drives the tracker.
"""

from .game_state import State


class RunRule:
    """Base rule. Subclasses override ``apply``."""

    def apply(self, previous: State, current: State, now: int) -> None:
        raise NotImplementedError


class NoOpRunRule(RunRule):

    def apply(self, previous: State, current: State, now: int) -> None:
        return None


class RuleChain(RunRule):
    """Applies several rules in order."""

    def __init__(self, rules: list[RunRule]):
        self.rules = list(rules)

    def apply(self, previous: State, current: State, now: int) -> None:
        for rule in self.rules:
            rule.apply(previous, current, now)
