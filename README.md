# mqttkit

Building blocks for MQTT v5 clients:

- dataclass models for CONNECT, CONNACK, AUTH, DISCONNECT, PUBLISH, SUBSCRIBE, SUBACK, UNSUBSCRIBE and UNSUBACK packets, and for publish responses (`mqttkit.connection`, `mqttkit.messages`);
- user properties that keep their order and allow repeated keys (`mqttkit.properties`);
- topic routing that understands the `+` and `#` wildcards and `$share` subscriptions (`mqttkit.router`);
- packet identifier allocation (`mqttkit.message_ids`);
- in-memory and no-op packet stores (`mqttkit.persistence`);
- automatic topic alias assignment for outgoing publishes (`mqttkit.topicaliases`);
- a small logger interface (`mqttkit.trace`) and `DisconnectError` (`mqttkit.errors`).

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install ".[test]"
```

## Topic matching

```python
from mqttkit.router import match

match("a/+/c", "a/b/c")      # True
match("a/#", "a/b")          # True
match("#", "")               # True
match("$share/a/b", "a/b")   # True
match("b/#", "a/b")          # False
```

`route_split` and `topic_split` split a filter or topic into its levels. `route_split` drops the first level of a route that starts with `$share`.

## Routing incoming publishes

```python
from mqttkit.messages import Publish
from mqttkit.router import StandardRouter

router = StandardRouter()
router.register_handler("sensors/+/temperature", lambda msg: print(msg.topic, msg.payload))
router.route(Publish(topic="sensors/kitchen/temperature", payload=b"21.5"))
```

`StandardRouter` calls every handler whose route matches the topic. A route can have several handlers, and `unregister_handler` removes all of them. When a publish carries both a topic alias and a topic, the router records the alias. When it carries only an alias, the router matches on the recorded topic. Handlers receive the publish unchanged.

`SingleHandlerRouter(handler)` passes every publish to one handler. `register_handler` replaces that handler and `unregister_handler` does nothing. When the alias of a publish is known, the handler receives a copy with the aliased topic filled in. If no handler is set, `route` raises `RuntimeError`.

Both routers accept a `mqttkit.trace.Logger` through `set_debug`. `NoopLogger` discards everything it receives.

## Topic aliases

```python
from mqttkit.messages import Publish
from mqttkit.topicaliases import TopicAliasHandler

aliases = TopicAliasHandler(10)
p = Publish(topic="test")
aliases.publish_hook(p)
# p.topic is now "" and p.properties.topic_alias is 1
```

If a publish already has an alias set, `publish_hook` records that alias for its topic and leaves the publish as it is. If no alias is free, the publish is not changed.

## User properties

```python
from mqttkit.properties import UserProperties, bool_to_byte

props = UserProperties().add("chatname", "alice").add("chatname", "bob")
props.get("chatname")      # "alice"
props.get_all("chatname")  # ["alice", "bob"]
props.get("missing")       # ""
bool_to_byte(True)         # 1
```

## Message ids and persistence

`MessageIDs.request(context)` stores the context under the lowest free id from 1 to 65534 and returns that id. When every id is in use it raises `RuntimeError`. `get` returns the stored context or `None`. `free` releases an id and `clear` forgets all of them.

You must call `open()` on a `MemoryPersistence` before `put`, otherwise `put` raises `RuntimeError`. `MemoryPersistence` stores packets by id. `close()` discards the packets and closes the store. `reset()` empties the store and leaves it open. `NoopPersistence` stores nothing. It raises `ValueError` for ids outside 0 to 65535.

## What this package does not do

The package has no network client. It does not encode or decode packets to bytes, open connections, send keep-alive pings or provide a command-line program. The models, router, id allocator, stores and alias handler are pieces for a client to build on.

## Running the tests

```
pytest
```