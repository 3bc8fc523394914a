# lsrouter

A small link-state router daemon. Each router reads its own section from a
configuration file. It sends JSON `HELLO` datagrams over UDP to the broadcast
address of each of its interfaces, and it keeps track of the neighbours it
hears from.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Configuration

The daemon reads `config/router.conf`, relative to the working directory.
The file is split into sections, and each section is one router. Empty lines
and lines that start with `//` are skipped. A section begins with a line of the
form `[RouterID]`. The other lines are `key=value` pairs. Unknown keys and
lines without `=` are ignored.

```
// two routers on the same lab network
[R_1]
hostname=router1
interfaces=10.1.0.1,192.168.1.1
port=5000

[R_2]
hostname=router2
interfaces=10.1.0.2
port=5000
```

- `hostname`: the name sent in HELLO messages. A received message that carries
  this name is taken to be the router's own, and is ignored.
- `interfaces`: the interface addresses, separated by commas. A HELLO is sent
  to each address with its last dotted component replaced by `255`.
- `port`: the UDP port. The daemon both sends and listens on it. A value that
  does not start with an integer raises `ValueError`. If the key is missing,
  the port is `0`.

## Running

```
lsrouter R_2
```

You can also start it with `python -m lsrouter.cli R_2`.

If you give no router id, the daemon uses `R_1`. It exits with status 1 in any
of these cases:

- the configuration file cannot be opened;
- the section is missing;
- the section has no hostname or no interfaces.

A background thread listens on the configured port. Every five seconds the
main loop does the following:

1. sends a HELLO to the broadcast address of each interface;
2. sends a HELLO straight to each active neighbour;
3. forgets neighbours that have not been heard from for more than 30 seconds;
4. prints the active neighbours, which are those heard from in the last
   10 seconds.

If a HELLO cannot be sent, for example because the address is invalid, the
error is printed to standard error and the loop goes on. Press Ctrl-C to stop
the daemon. It stops the listener thread and exits with status 0.

Each received datagram is printed. The receiver reads at most 2047 bytes of a
datagram, and ignores everything from the first NUL byte onwards. It records
the sender as a neighbour when the message is a JSON object with
`"type": "HELLO"` and a hostname other than the router's own. If the datagram
is not valid JSON, the receiver prints a notice and goes on.

A HELLO message is compact JSON with its keys sorted:

```json
{"hostname":"router1","interfaces":["10.1.0.1","192.168.1.1"],"type":"HELLO"}
```

## Library use

You can use the parts on their own:

```python
from lsrouter.config import get_router_config
from lsrouter.linkstate import LinkStateManager
from lsrouter.packets import PacketManager, build_hello, handle_datagram

config = get_router_config("R_1", "config/router.conf")
lsm = LinkStateManager()
handle_datagram(build_hello("router2", ["10.1.0.2"]), "10.1.0.2", lsm, config.hostname)
print(lsm.active_neighbors())  # ['10.1.0.2']
```

### `lsrouter.config`

- `parse_router_config(path)` returns a dict that maps each router id to its
  `RouterConfig`. A `RouterConfig` has the fields `hostname`, `interfaces`
  and `port`.
- `get_router_config(router_id, path)` returns the configuration for one
  router id. If the id is not found, it returns an empty `RouterConfig`.
- `split(text, delimiter)` splits `text` on `delimiter`. If the last field is
  empty, it is dropped.

### `lsrouter.linkstate`

`LinkStateManager(clock=time.monotonic)` tracks neighbours. It is safe to use
from several threads.

- `update_neighbor(ip)` records that `ip` was just heard from.
- `active_neighbors()` returns the neighbours heard from in the last
  10 seconds.
- `purge_inactive_neighbors()` forgets the neighbours that have been silent
  for more than 30 seconds.

It also supports `in` and `len()`.

### `lsrouter.packets`

- `build_hello(hostname, interfaces)` encodes a HELLO message.
- `handle_datagram(data, sender_ip, lsm, hostname="")` processes one received
  datagram. It returns `True` if it recorded the sender as a neighbour.
- `PacketManager.send_hello(dest_ip, port=5000, hostname="", interfaces=())`
  sends one HELLO datagram, with broadcast allowed. It raises `ValueError`
  for an invalid IPv4 address.
- `PacketManager.receive_packets(port, lsm, running, hostname="")` listens on
  `port` while the `threading.Event` `running` is set.

### `lsrouter.cli`

- `calculate_broadcast_address(ip)` replaces the last dotted component of `ip`
  with `255`.
- `main(argv=None)` runs the daemon.

### Other modules

- `lsrouter.router_node.RouterNode(name)` holds a router's name and an ordered
  list of `Interface(ip, active, capacity)` values. It provides:
  - `add_interface(iface)`;
  - `print_interfaces()`, which prints each address with `[UP]` or `[DOWN]`;
  - `active_interfaces()`.
- `lsrouter.routing.RoutingProtocol` keeps a routing table that maps
  destination prefixes to next hops.
  - `compute_routes()` stores one fixed entry,
    `192.168.2.0/24 -> 10.1.0.2`.
  - `routing_table()` returns a copy of the table, sorted by destination.

## What it does not do

- It only discovers neighbours. It does not exchange link-state
  advertisements, compute real shortest paths or forward packets.
- `RoutingProtocol.compute_routes` does not look at the network.
- The daemon does not use `RouterNode` or `RoutingProtocol`.
- The configuration file path is fixed. There are no command-line options
  other than the router id.