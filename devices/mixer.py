# devices/mixer.py
from __future__ import annotations

from common.errors import DeviceKind, PreconditionViolated
from common.logging_utils import get_logger, trace_calls
from devices.device import Device

log = get_logger(__name__)

MIXER_OUTPUTS = 1


class Mixer(Device):
    """Merges all connected inputs into a single output stream."""

    kind = DeviceKind.MIXER
    guard = DeviceKind.MIXER

    def __init__(self, inputs_count: int, name: str | None = None):
        super().__init__(inputs_count, MIXER_OUTPUTS, name=name)

    @trace_calls(values=True)
    def update_outputs(self) -> float:
        total = self.in_flow()

        if not self._outputs:
            log.warning("no outputs connected", extra={"device": self.name, "op": "update_outputs"})
            raise PreconditionViolated("Should set outputs before update")

        # even split, general in the number of outputs
        out_mass = total / len(self._outputs)
        for s in self._outputs:
            s.set_mass_flow(out_mass)

        log.trace(f"total={total:.6g} -> {len(self._outputs)} output(s) at {out_mass:.6g}",
                  extra={"device": self.name, "op": "update_outputs"})
        return total
