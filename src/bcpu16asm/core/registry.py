"""Insertion-ordered registry of parameter declarations."""

from __future__ import annotations

from collections.abc import Iterator

from bcpu16asm.core.params import Param


class ParamRegistry:
    """Ordered collection of :class:`Param` declarations.

    Registration performs no uniqueness check.  Lookup scans in
    registration order and returns the first declaration whose short or
    long name matches, so an earlier declaration masks any later one
    that reuses one of its names.
    """

    def __init__(self) -> None:
        self._params: list[Param] = []

    def register(self, param: Param) -> None:
        self._params.append(param)

    def find(self, name: str) -> Param | None:
        """Return the first parameter named *name*, or ``None``."""
        for param in self._params:
            if param.same_name(name):
                return param
        return None

    def mandatory_unset(self) -> list[Param]:
        """Mandatory parameters that have not been set, in registration order."""
        return [p for p in self._params if p.mandatory and not p.is_set]

    def __iter__(self) -> Iterator[Param]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)
