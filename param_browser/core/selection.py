from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from param_browser.core.parameter_index import ParameterIndexEntry


@dataclass
class SelectionState:
    """
    Represents the current user selection.

    Fields:

    - plot_key: the active plot tab
    - values: parameter name -> selected value, in slider order

    Serialised into a dcc.Store between callbacks; JSON floats round-trip
    exactly so the values still compare equal to the parameter index.
    """
    plot_key: Optional[str]
    values: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"plot_key": self.plot_key, "values": dict(self.values)}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> SelectionState:
        data = data or {}
        return cls(
            plot_key=data.get("plot_key"),
            values=dict(data.get("values") or {}),
        )

    def with_value(self, parameter: str, value: float) -> SelectionState:
        values = dict(self.values)
        values[parameter] = value
        return SelectionState(plot_key=self.plot_key, values=values)


@dataclass(frozen=True)
class DefaultSelection:
    """
    Initial selection for a plot.

    `unavailable` lists parameters whose index is empty: there is no value to
    select, so they are left out of `values` and the UI shows them as disabled.
    """
    values: Dict[str, float]
    unavailable: List[str]


def default_selection(
    index: Mapping[str, ParameterIndexEntry],
    parameter_names: Iterable[str],
    preferred: Optional[Mapping[str, Any]] = None,
) -> DefaultSelection:
    """
    Pick a starting value for each parameter.

    A configured preferred value is used when it is one of the indexed values,
    otherwise the smallest indexed value is used.
    """
    preferred = preferred or {}
    values: Dict[str, float] = {}
    unavailable: List[str] = []

    for name in parameter_names:
        entry = index.get(name)
        if entry is None or entry.is_empty:
            unavailable.append(name)
            continue

        wanted = preferred.get(name)
        pos = entry.position(wanted) if isinstance(wanted, (int, float)) and not isinstance(wanted, bool) else None
        values[name] = entry.values[pos] if pos is not None else entry.values[0]

    return DefaultSelection(values=values, unavailable=unavailable)
