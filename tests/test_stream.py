import io
from common.models import Stream, StreamCounter

def test_auto_name_from_ordinal():
    assert Stream(1).get_name() == "s1"
    assert Stream(42).name == "s42"

def test_mass_flow_set_get():
    s = Stream(2)
    s.set_mass_flow(12.5)
    assert s.get_mass_flow() == 12.5
    s.mass_flow = 3.0
    assert s.get_mass_flow() == 3.0

def test_fresh_stream_flow_defaults_to_zero():
    assert Stream(1).get_mass_flow() == 0.0

def test_negative_flow_is_accepted():
    s = Stream(1)
    s.set_mass_flow(-4.0)
    assert s.get_mass_flow() == -4.0

def test_set_name_overrides_default():
    s = Stream(3)
    s.set_name("feed")
    assert s.get_name() == "feed"

def test_print_format(capsys):
    s = Stream(1)
    s.set_mass_flow(10.0)
    s.print()
    out, _ = capsys.readouterr()
    assert out == "Stream s1 flow = 10\n"

def test_print_to_given_file():
    s = Stream(7, 2.5)
    buf = io.StringIO()
    s.print(buf)
    assert buf.getvalue() == "Stream s7 flow = 2.5\n"

def test_counter_numbers_streams_and_resets(counter):
    a = counter.next_stream(1.0)
    b = counter.next_stream()
    assert (a.get_name(), b.get_name()) == ("s1", "s2")
    assert a.get_mass_flow() == 1.0
    assert counter.value == 2
    counter.reset()
    assert counter.next_stream().get_name() == "s1"

def test_counters_are_independent():
    c1, c2 = StreamCounter(), StreamCounter(start=10)
    c1.next_stream()
    assert c2.next_stream().get_name() == "s11"
