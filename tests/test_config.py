import pytest

from lsrouter.config import RouterConfig, get_router_config, parse_router_config, split

SAMPLE = """// routers
[R_1]
hostname=alpha
interfaces=10.1.0.1,10.2.0.1
port=5000

[R_2]
hostname=beta
interfaces=10.1.0.2
port=5001
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "router.conf"
    path.write_text(SAMPLE)
    return path


def test_split_basic():
    assert split("a,b,c", ",") == ["a", "b", "c"]


def test_split_drops_single_trailing_empty_field():
    assert split("a,b,", ",") == ["a", "b"]
    assert split("a,,", ",") == ["a", ""]


def test_split_keeps_leading_empty_field():
    assert split(",a", ",") == ["", "a"]


def test_split_empty_string():
    assert split("", ",") == []


def test_parse_all_sections(config_file):
    configs = parse_router_config(config_file)
    assert sorted(configs) == ["R_1", "R_2"]
    assert configs["R_1"] == RouterConfig("alpha", ["10.1.0.1", "10.2.0.1"], 5000)
    assert configs["R_2"] == RouterConfig("beta", ["10.1.0.2"], 5001)


def test_missing_file_gives_empty_mapping(tmp_path, capsys):
    assert parse_router_config(tmp_path / "nope.conf") == {}
    assert "Failed to open config file" in capsys.readouterr().err


def test_lines_before_first_section_are_ignored(tmp_path):
    path = tmp_path / "router.conf"
    path.write_text("hostname=stray\n[R_9]\nport=7\n")
    assert parse_router_config(path) == {"R_9": RouterConfig("", [], 7)}


def test_unknown_keys_and_lines_without_equals_are_ignored(tmp_path):
    path = tmp_path / "router.conf"
    path.write_text("[R_1]\ncolour=blue\njunk line\nhostname=h\n")
    assert parse_router_config(path)["R_1"] == RouterConfig("h", [], 0)


def test_empty_section_name_is_not_saved(tmp_path):
    path = tmp_path / "router.conf"
    path.write_text("[]\nhostname=h\n")
    assert parse_router_config(path) == {}


def test_port_with_trailing_text_uses_leading_digits(tmp_path):
    path = tmp_path / "router.conf"
    path.write_text("[R_1]\nport= 6000abc\n")
    assert parse_router_config(path)["R_1"].port == 6000


def test_invalid_port_raises(tmp_path):
    path = tmp_path / "router.conf"
    path.write_text("[R_1]\nport=abc\n")
    with pytest.raises(ValueError):
        parse_router_config(path)


def test_later_duplicate_section_wins(tmp_path):
    path = tmp_path / "router.conf"
    path.write_text("[R_1]\nhostname=a\n[R_1]\nhostname=b\n")
    assert parse_router_config(path)["R_1"].hostname == "b"


def test_get_router_config_found(config_file):
    assert get_router_config("R_2", config_file).hostname == "beta"


def test_get_router_config_missing(config_file, capsys):
    assert get_router_config("R_7", config_file) == RouterConfig()
    assert "Router ID R_7 not found in config file." in capsys.readouterr().err