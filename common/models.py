from __future__ import annotations

import sys
from typing import TextIO


class Stream:
    """Named carrier of a scalar mass flow.

    Streams are shared by reference: the same object can be one device's
    output and another device's input. Only the device holding a stream as
    an output writes to it.
    """

    def __init__(self, ordinal: int, mass_flow: float = 0.0):
        self._name = f"s{ordinal}"
        self._mass_flow = mass_flow

    def set_name(self, name: str) -> None:
        self._name = name

    def get_name(self) -> str:
        return self._name

    def set_mass_flow(self, value: float) -> None:
        # no validation: negative flows are accepted and propagated
        self._mass_flow = value

    def get_mass_flow(self) -> float:
        return self._mass_flow

    name = property(get_name, set_name)
    mass_flow = property(get_mass_flow, set_mass_flow)

    def print(self, file: TextIO | None = None) -> None:
        out = file if file is not None else sys.stdout
        out.write(f"Stream {self._name} flow = {self._mass_flow:g}\n")

    def __repr__(self) -> str:
        return f"Stream(name={self._name!r}, mass_flow={self._mass_flow!r})"


class StreamCounter:
    """Ordinal source for default stream names.

    Owned by whoever builds a network (loader, tests); reset it at the start
    of each independent scenario.
    """

    def __init__(self, start: int = 0):
        self._start = start
        self._value = start

    @property
    def value(self) -> int:
        return self._value

    def next_stream(self, mass_flow: float = 0.0) -> Stream:
        self._value += 1
        return Stream(self._value, mass_flow)

    def reset(self) -> None:
        self._value = self._start
