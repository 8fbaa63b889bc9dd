from mqttkit.connection import (
    Auth,
    AuthProperties,
    AuthResponse,
    Connack,
    ConnackProperties,
    Connect,
    ConnectProperties,
    Disconnect,
    DisconnectProperties,
    WillMessage,
    WillProperties,
)
from mqttkit.properties import UserProperties


def test_connack_properties_feature_flags_default_available():
    props = ConnackProperties()
    assert props.wildcard_sub_available is True
    assert props.sub_id_available is True
    assert props.shared_sub_available is True
    assert props.retain_available is True


def test_connect_properties_request_defaults():
    props = ConnectProperties()
    assert props.request_problem_info is True
    assert props.request_response_info is False


def test_user_properties_not_shared_between_instances():
    first = AuthProperties()
    second = AuthProperties()
    first.user.add("k", "v")
    assert second.user.get_all("k") == []
    assert first.user.get("k") == "v"


def test_connect_holds_will_and_properties():
    password = b"password"
    will = WillMessage(topic="will/topic", payload=b"am gone")
    will_props = WillProperties(will_delay_interval=200)
    cp = Connect(
        keep_alive=30,
        client_id="testClient",
        clean_start=True,
        password=password,
        password_flag=True,
        properties=ConnectProperties(receive_maximum=200),
        will_message=will,
        will_properties=will_props,
    )
    assert cp.will_message.topic == "will/topic"
    assert cp.will_message.payload == b"am gone"
    assert cp.will_properties.will_delay_interval == 200
    assert cp.properties.receive_maximum == 200
    assert cp.password == password
    assert cp.username_flag is False


def test_connack_equality_round_trip():
    props = ConnackProperties(maximum_qos=1, receive_maximum=12345, topic_alias_maximum=200)
    a = Connack(properties=props, reason_code=0, session_present=False)
    b = Connack(
        properties=ConnackProperties(maximum_qos=1, receive_maximum=12345, topic_alias_maximum=200),
        reason_code=0,
    )
    assert a == b
    b.properties.retain_available = False
    assert a != b
    assert a.properties.retain_available is True


def test_auth_and_response_carry_values():
    auth = Auth(
        reason_code=0x19,
        properties=AuthProperties(auth_method="TEST", auth_data=b"secret data"),
    )
    resp = AuthResponse(
        properties=AuthProperties(reason_string="ok", user=UserProperties([("a", "b")])),
        reason_code=auth.reason_code,
        success=True,
    )
    assert auth.properties.auth_method == "TEST"
    assert resp.reason_code == 0x19
    assert resp.properties.user.get("a") == "b"
    assert resp.success is True


def test_disconnect_properties():
    d = Disconnect(reason_code=0x8B, properties=DisconnectProperties(reason_string="GONE!"))
    assert d.reason_code == 0x8B
    assert d.properties.reason_string == "GONE!"
    assert d.properties.session_expiry_interval is None
    assert Disconnect().properties is None