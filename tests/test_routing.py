from lsrouter.routing import RoutingProtocol


def test_table_empty_before_computing():
    assert RoutingProtocol().routing_table() == {}


def test_compute_routes():
    protocol = RoutingProtocol()
    protocol.compute_routes()
    assert protocol.routing_table() == {"192.168.2.0/24": "10.1.0.2"}


def test_compute_routes_is_idempotent():
    protocol = RoutingProtocol()
    protocol.compute_routes()
    protocol.compute_routes()
    assert len(protocol.routing_table()) == 1


def test_routing_table_is_a_copy():
    protocol = RoutingProtocol()
    protocol.compute_routes()
    protocol.routing_table().clear()
    assert "192.168.2.0/24" in protocol.routing_table()