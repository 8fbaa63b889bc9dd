import pytest

from mqttkit.messages import Publish, Subscribe
from mqttkit.persistence import MemoryPersistence, NoopPersistence


@pytest.fixture
def store():
    s = MemoryPersistence()
    s.open()
    return s


def test_put_then_get_returns_same_packet(store):
    packet = Publish(topic="test/1", qos=1, payload=b"test payload")
    store.put(7, packet)
    assert store.get(7) is packet


def test_get_missing_returns_none(store):
    assert store.get(42) is None


def test_put_replaces_existing(store):
    first = Publish(topic="a")
    second = Publish(topic="b")
    store.put(1, first)
    store.put(1, second)
    assert store.get(1) is second
    assert store.all() == [second]


def test_all_returns_every_packet(store):
    packets = {1: Publish(topic="a"), 2: Subscribe(), 3: Publish(topic="c")}
    for mid, packet in packets.items():
        store.put(mid, packet)
    result = store.all()
    assert len(result) == len(packets)
    for packet in packets.values():
        assert any(item is packet for item in result)


def test_delete_removes_packet(store):
    store.put(1, Publish(topic="a"))
    store.put(2, Publish(topic="b"))
    store.delete(1)
    assert store.get(1) is None
    assert [p.topic for p in store.all()] == ["b"]


def test_delete_missing_is_harmless(store):
    store.put(1, Publish(topic="a"))
    store.delete(99)
    assert len(store.all()) == 1


def test_reset_empties_but_stays_open(store):
    store.put(1, Publish(topic="a"))
    store.reset()
    assert store.all() == []
    store.put(2, Publish(topic="b"))
    assert store.get(2).topic == "b"


def test_close_discards_packets(store):
    store.put(1, Publish(topic="a"))
    store.close()
    assert store.get(1) is None
    assert store.all() == []


def test_put_before_open_raises():
    with pytest.raises(RuntimeError):
        MemoryPersistence().put(1, Publish())


def test_open_keeps_existing_packets(store):
    packet = Publish(topic="a")
    store.put(1, packet)
    store.open()
    assert store.get(1) is packet


def test_reopen_after_close(store):
    store.put(1, Publish(topic="a"))
    store.close()
    store.open()
    assert store.all() == []


def test_noop_persistence_stores_nothing():
    noop = NoopPersistence()
    noop.open()
    noop.put(1, Publish(topic="a"))
    assert noop.get(1) is None
    assert noop.all() == []
    noop.delete(1)
    noop.reset()
    noop.close()
    assert noop.get(1) is None