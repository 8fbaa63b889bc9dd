from mqttkit.properties import UserProperties, UserProperty, bool_to_byte


def test_add_appends_in_order_and_chains():
    props = UserProperties()
    result = props.add("chatname", "alice").add("room", "lobby")
    assert result is props
    assert list(props) == [UserProperty("chatname", "alice"), UserProperty("room", "lobby")]


def test_get_returns_first_match():
    props = UserProperties().add("k", "first").add("k", "second")
    assert props.get("k") == "first"


def test_get_missing_key_returns_empty_string():
    props = UserProperties().add("k", "v")
    assert props.get("missing") == ""


def test_get_all_returns_every_match():
    props = UserProperties().add("k", "a").add("x", "b").add("k", "c")
    assert props.get_all("k") == ["a", "c"]


def test_get_all_missing_key_is_empty():
    props = UserProperties().add("k", "a")
    assert props.get_all("nope") == []


def test_construct_from_pairs():
    props = UserProperties([("a", "1"), ("b", "2")])
    assert props.get("b") == "2"
    assert props[0].key == "a"
    assert props[0].value == "1"


def test_bool_to_byte():
    assert bool_to_byte(True) == 1
    assert bool_to_byte(False) == 0