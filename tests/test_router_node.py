from lsrouter.router_node import Interface, RouterNode


def make_node():
    node = RouterNode("R_1")
    node.add_interface(Interface("10.1.0.1", True, 100))
    node.add_interface(Interface("10.2.0.1", False, 10))
    node.add_interface(Interface("10.3.0.1", True, 1000))
    return node


def test_name():
    assert RouterNode("R_1").name == "R_1"


def test_active_interfaces_filters_and_keeps_order():
    active = make_node().active_interfaces()
    assert [iface.ip for iface in active] == ["10.1.0.1", "10.3.0.1"]
    assert all(iface.active for iface in active)


def test_no_interfaces():
    assert RouterNode("empty").active_interfaces() == []


def test_print_interfaces(capsys):
    make_node().print_interfaces()
    assert capsys.readouterr().out.splitlines() == [
        "10.1.0.1 [UP]",
        "10.2.0.1 [DOWN]",
        "10.3.0.1 [UP]",
    ]


def test_active_interfaces_returns_new_list():
    node = make_node()
    node.active_interfaces().clear()
    assert len(node.active_interfaces()) == 2