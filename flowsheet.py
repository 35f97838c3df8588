# flowsheet.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, TextIO
import logging

from common.models import Stream
from devices.device import Device

log = logging.getLogger("flowsheet")


@dataclass(frozen=True)
class DeviceBalance:
    device: str
    kind: str
    inputs: List[str]
    outputs: List[str]
    in_flow: float
    out_flow: float

    @property
    def residual(self) -> float:
        return self.out_flow - self.in_flow


class Flowsheet:
    """Flat, ordered list of devices wired over shared streams.

    Devices are recomputed in list order, so an upstream device must come
    before the devices that read its outputs.
    """

    def __init__(self, streams: Dict[str, Stream], devices: List[Device]):
        self.streams = streams
        self.devices = devices

    def stream(self, name: str) -> Stream:
        try:
            return self.streams[name]
        except KeyError:
            raise KeyError(f"unknown stream '{name}'") from None

    def run(self) -> List[Device]:
        done: List[Device] = []
        for dev in self.devices:
            log.info("device-start", extra={"device": dev.name, "op": "start"})
            dev.update_outputs()
            done.append(dev)
            log.info("device-end", extra={"device": dev.name, "op": "end"})
        return done

    def mass_balance(self) -> List[DeviceBalance]:
        rows: List[DeviceBalance] = []
        for dev in self.devices:
            rows.append(DeviceBalance(
                device=dev.name,
                kind=dev.kind.value,
                inputs=[s.get_name() for s in dev.get_inputs()],
                outputs=[s.get_name() for s in dev.get_outputs()],
                in_flow=dev.in_flow(),
                out_flow=dev.out_flow(),
            ))
        return rows

    def print_streams(self, file: TextIO | None = None) -> None:
        for s in self.streams.values():
            s.print(file)
