import pytest
from devices.device import Device
from devices.mixer import Mixer
from devices.reactor import Reactor

def test_device_is_abstract():
    with pytest.raises(TypeError):
        Device(1, 1)

@pytest.mark.parametrize("make", [lambda: Mixer(3), lambda: Reactor(True)])
def test_outputs_keep_connection_order_and_identity(counter, make):
    dev = make()
    outs = [counter.next_stream() for _ in range(dev.output_amount)]
    for s in outs:
        dev.add_output(s)
    got = dev.get_outputs()
    assert [s.get_name() for s in got] == [s.get_name() for s in outs]
    assert all(a is b for a, b in zip(got, outs))

def test_inputs_keep_connection_order_and_identity(counter):
    m = Mixer(3)
    ins = [counter.next_stream(float(i)) for i in range(3)]
    for s in ins:
        m.add_input(s)
    got = m.get_inputs()
    assert [s.get_name() for s in got] == ["s1", "s2", "s3"]
    assert all(a is b for a, b in zip(got, ins))

def test_returned_lists_are_snapshots(counter):
    m = Mixer(2)
    m.add_input(counter.next_stream(1.0))
    snap = m.get_inputs()
    snap.append(counter.next_stream(100.0))
    snap.clear()
    assert len(m.get_inputs()) == 1
    m.add_output(counter.next_stream())
    m.update_outputs()
    assert m.get_outputs()[0].get_mass_flow() == 1.0

def test_shared_stream_links_devices(counter):
    m = Mixer(2)
    rx = Reactor(True)
    mid = counter.next_stream()
    m.add_input(counter.next_stream(4.0))
    m.add_input(counter.next_stream(6.0))
    m.add_output(mid)
    rx.add_input(mid)
    o1, o2 = counter.next_stream(), counter.next_stream()
    rx.add_output(o1)
    rx.add_output(o2)
    m.update_outputs()
    rx.update_outputs()
    assert mid.get_mass_flow() == 10.0
    assert o1.get_mass_flow() == o2.get_mass_flow() == 5.0

def test_name_and_repr():
    m = Mixer(2, name="M1")
    assert m.name == "M1"
    assert Reactor(False).name == "Reactor"
    assert repr(m) == "Mixer(name='M1', inputs=[], outputs=[])"
