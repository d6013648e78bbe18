"""A nuclide with its level scheme and transitions."""

from __future__ import annotations

import copy
import logging
import math
from collections.abc import Iterable
from typing import Any

from .energy import Energy
from .halflife import HalfLife
from .level import Level
from .nuclide_id import NuclideId
from .transition import Transition
from .util import join

_log = logging.getLogger(__name__)


def _energy_order(item: tuple[Energy, Any]) -> tuple[bool, float]:
    value = float(item[0])
    if math.isnan(value):
        return (True, 0.0)
    return (False, value)


class Nuclide:
    """Levels and transitions of one nuclide, keyed by energy."""

    def __init__(self, nid: NuclideId | None = None) -> None:
        self.nid = NuclideId() if nid is None else nid
        self.halflives: list[HalfLife] = []
        self.text: list[dict[str, Any]] = []
        self._levels: dict[Energy, Level] = {}
        self._transitions: dict[Energy, Transition] = {}

    def __repr__(self) -> str:
        return (
            f"Nuclide({self.nid.symbolic_name()!r}, levels={len(self._levels)}, "
            f"transitions={len(self._transitions)})"
        )

    @property
    def levels(self) -> dict[Energy, Level]:
        """The levels in ascending order of energy."""
        return dict(sorted(self._levels.items(), key=_energy_order))

    @property
    def transitions(self) -> dict[Energy, Transition]:
        """The transitions in ascending order of energy."""
        return dict(sorted(self._transitions.items(), key=_energy_order))

    def empty(self) -> bool:
        return not self.nid.valid() or not self._levels

    def add_text(self, heading: str, pars: Any) -> None:
        """Attach a block of commentary under ``heading``."""
        self.text.append({"heading": heading, "pars": pars})

    def add_half_life(self, halflife: HalfLife) -> None:
        self.halflives.append(halflife)

    def half_life_as_text(self) -> str:
        """The defined, non-stable half-lives as display text."""
        texts = [h.to_string() for h in self.halflives if h.valid() and not h.stable()]
        return join(texts, ", ")

    def add_level(self, level: Level) -> None:
        """Add or replace the level at its energy; undefined energies are ignored."""
        if level.energy.valid():
            self._levels[level.energy] = level

    def nearest_transition(self, goal: float) -> Transition:
        """The transition closest in energy to ``goal``.

        Without a finite goal the highest finite transition is returned; an
        empty transition when there is none.
        """
        ordered = self.transitions
        best = Energy()
        for energy in ordered:
            if energy.value.has_finite_value():
                best = energy
        if math.isfinite(goal):
            for energy in ordered:
                if energy.value.has_finite_value() and abs(goal - float(energy)) < abs(
                    goal - float(best)
                ):
                    best = energy
        return self._transitions.get(best, Transition())

    def coincidences(self, transitions: Energy | Iterable[Energy]) -> set[Energy]:
        """Transitions in cascade with one transition, or with all of several."""
        if isinstance(transitions, Energy):
            return self.upstream(transitions) | self.downstream(transitions)
        result: set[Energy] | None = None
        for energy in transitions:
            found = self.coincidences(energy)
            result = found if result is None else result & found
        return set() if result is None else result

    def upstream(self, transition: Energy) -> set[Energy]:
        """Every transition that feeds, directly or not, the start of ``transition``."""
        return self._cascade(transition, upward=True)

    def downstream(self, transition: Energy) -> set[Energy]:
        """Every transition that follows, directly or not, the end of ``transition``."""
        return self._cascade(transition, upward=False)

    def _cascade(self, transition: Energy, upward: bool) -> set[Energy]:
        result: set[Energy] = set()
        pending = [transition]
        while pending:
            current = self._transitions.get(pending.pop())
            if current is None:
                continue
            level = self._levels.get(current.from_energy if upward else current.to_energy)
            if level is None:
                continue
            linked = (
                level.populating_transitions if upward else level.depopulating_transitions
            )
            for energy in linked:
                if energy not in result:
                    result.add(energy)
                    pending.append(energy)
        return result

    def _nearest_level(
        self, goal: Energy, max_dif: float = math.nan, zero_thresh: float = 0.25
    ) -> Energy:
        ordered = self.levels
        lowest = 0.0
        for energy in ordered:
            if energy.value.has_finite_value() and energy.value.value:
                lowest = energy.value.value
                break
        if lowest:
            zero_thresh *= lowest

        target = float(goal)
        max_dif *= target
        best = Energy()
        for energy in ordered:
            distance = abs(target - float(energy))
            if (
                math.isfinite(max_dif)
                and (target > zero_thresh or energy.value.value != 0)
                and distance > max_dif
            ):
                continue
            if not best.valid() or distance < abs(target - float(best)):
                best = energy
        return best

    def add_transition_to(
        self, transition: Transition, max_dif: float = math.nan, zero_thresh: float = 0.25
    ) -> None:
        """Add a transition known by its final level, finding its initial level.

        With a finite ``max_dif`` the initial level may be matched within that
        relative tolerance.
        """
        if transition.to_energy not in self._levels:
            _log.debug("no final level for transition %s", transition.to_string())
            return
        origin = transition.to_energy + transition.energy
        if math.isfinite(max_dif) and origin not in self._levels:
            origin = self._nearest_level(origin, max_dif, zero_thresh)
        if origin.valid() and origin in self._levels:
            added = copy.copy(transition)
            added.from_energy = origin
            self._add_transition(added)

    def add_transition_from(
        self, transition: Transition, max_dif: float = math.nan, zero_thresh: float = 0.25
    ) -> None:
        """Add a transition known by its initial level, finding its final level.

        With a finite ``max_dif`` the final level may be matched within that
        relative tolerance.
        """
        if transition.from_energy not in self._levels:
            _log.debug("no initial level for transition %s", transition.to_string())
            return
        target = transition.from_energy - transition.energy
        if math.isfinite(max_dif) and target not in self._levels:
            target = self._nearest_level(target, max_dif, zero_thresh)
        if target.valid() and target in self._levels:
            added = copy.copy(transition)
            added.to_energy = target
            self._add_transition(added)

    def _add_transition(self, transition: Transition) -> None:
        self._transitions[transition.energy] = transition
        self._levels.setdefault(transition.from_energy, Level()).add_depopulating_transition(
            transition.energy
        )
        self._levels.setdefault(transition.to_energy, Level()).add_populating_transition(
            transition.energy
        )

    def remove_transition(self, transition: Transition) -> None:
        self._transitions.pop(transition.energy, None)

    def cull_levels(self) -> None:
        """Drop every level that no transition starts or ends at."""
        for energy in list(self._levels):
            if not self.has_transitions(energy):
                del self._levels[energy]

    def has_transitions(self, level: Energy) -> bool:
        return any(
            level == t.from_energy or level == t.to_energy
            for t in self._transitions.values()
        )

    def to_string(self) -> str:
        """A multi-line listing of half-lives, levels and transitions."""
        text = self.nid.symbolic_name() + " "
        text += "".join(h.to_string() for h in self.halflives)
        text += "\n"
        levels = self.levels
        if levels:
            text += f"Levels ({len(levels)})\n"
            text += "".join(level.to_string() + "\n" for level in levels.values())
        transitions = self.transitions
        if transitions:
            text += f"Transitions ({len(transitions)})\n"
            text += "".join("  " + t.to_string() + "\n" for t in transitions.values())
        return text