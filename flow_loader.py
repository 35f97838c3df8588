from __future__ import annotations
from typing import Dict, Any, List
import logging
import yaml
from common.models import Stream, StreamCounter
from devices.device import Device
from devices.mixer import Mixer
from devices.reactor import Reactor
from flowsheet import Flowsheet

log = logging.getLogger(__name__)

DEVICE_KINDS = ("mixer", "reactor")

def _get(d: Dict[str, Any] | None, key: str, default=None):
    return d.get(key, default) if isinstance(d, dict) else default

def _flow(name: str, node: Any) -> float:
    raw = _get(node, "mass_flow", 0.0)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"{name}: mass_flow must be a number, got {raw!r}")
    if raw < 0:
        raise ValueError(f"{name}: mass_flow must be non-negative, got {raw!r}")
    return float(raw)

def load_streams(doc: Dict[str, Any] | None, counter: StreamCounter) -> Dict[str, Stream]:
    streams: Dict[str, Stream] = {}
    for name, node in (doc or {}).items():
        s = counter.next_stream(_flow(str(name), node))
        s.set_name(str(name))
        streams[str(name)] = s
    return streams

def build_device(node: Dict[str, Any], index: int = 0) -> Device:
    label = _get(node, "name") or f"D{index + 1}"
    if "kind" not in (node or {}):
        raise KeyError(f"{label}: 'kind' is required")

    kind = str(node["kind"]).lower()
    if kind == "mixer":
        if "inputs_count" not in node:
            raise KeyError(f"{label}: 'inputs_count' is required for a mixer")
        return Mixer(int(node["inputs_count"]), name=label)
    if kind == "reactor":
        return Reactor(bool(_get(node, "double", False)), name=label)
    raise ValueError(f"{label}: unknown device kind {kind!r}, expected one of {DEVICE_KINDS}")

def _resolve(streams: Dict[str, Stream], counter: StreamCounter, name: str) -> Stream:
    if name not in streams:
        # referenced but not declared: create with zero flow
        s = counter.next_stream()
        s.set_name(name)
        streams[name] = s
        log.debug(f"created undeclared stream {name}")
    return streams[name]

def flowsheet_from_dict(doc: Dict[str, Any], counter: StreamCounter | None = None) -> Flowsheet:
    counter = counter or StreamCounter()
    streams = load_streams(_get(doc, "streams"), counter)

    devices: List[Device] = []
    for i, node in enumerate(_get(doc, "devices") or []):
        dev = build_device(node, i)
        for name in _get(node, "inputs") or []:
            dev.add_input(_resolve(streams, counter, str(name)))
        for name in _get(node, "outputs") or []:
            dev.add_output(_resolve(streams, counter, str(name)))
        devices.append(dev)

    log.info(f"loaded {len(streams)} streams, {len(devices)} devices")
    return Flowsheet(streams, devices)

def load_flowsheet(path: str, counter: StreamCounter | None = None) -> Flowsheet:
    with open(path, "r", encoding="utf-8") as fh:
        doc = yaml.safe_load(fh)
    if not isinstance(doc, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return flowsheet_from_dict(doc, counter)
