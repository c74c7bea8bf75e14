import pytest

from thrift_http_transport import ConfigError, TransportOptions, parse_options


def test_defaults_are_empty() -> None:
    options = parse_options(None)
    assert options == TransportOptions()
    assert dict(options.http_options) == {}
    assert dict(options.extra_headers) == {}


def test_accepts_mapping() -> None:
    options = parse_options({"http_options": {"timeout": 3.0}, "extra_headers": {"X-A": "1"}})
    assert options.http_options == {"timeout": 3.0}
    assert options.extra_headers == {"X-A": "1"}


def test_accepts_pair_list_and_header_pairs() -> None:
    options = parse_options([("extra_headers", [("X-A", "1"), ("X-B", "2")])])
    assert options.extra_headers == {"X-A": "1", "X-B": "2"}


def test_later_entries_win() -> None:
    options = parse_options([("http_options", {"timeout": 1.0}), ("http_options", {"timeout": 2.0})])
    assert options.http_options == {"timeout": 2.0}


def test_options_instance_passes_through() -> None:
    original = TransportOptions(http_options={"timeout": 1.0}, extra_headers={"X-A": "1"})
    assert parse_options(original) == original


@pytest.mark.parametrize(
    "options",
    [
        [("unknownKey", "v")],
        {"proxy": "http://proxy:3128"},
        [("http_options", {}), ("bogus", 1)],
        ["not-a-pair"],
        [("http_options", {}, "extra")],
        "http_options",
    ],
)
def test_rejects_invalid_options(options) -> None:
    with pytest.raises(ConfigError):
        parse_options(options)


def test_unknown_option_is_reported() -> None:
    with pytest.raises(ConfigError) as excinfo:
        parse_options([("extra_headers", {}), ("unknownKey", "v")])
    assert excinfo.value.option == ("unknownKey", "v")
    assert "unknownKey" in str(excinfo.value)


@pytest.mark.parametrize(
    "headers",
    [
        {"X-A": 1},
        {1: "x"},
        {"X-Name": "caf\u00e9"},
        [("X-A",)],
        "X-A: 1",
        42,
    ],
)
def test_rejects_malformed_extra_headers(headers) -> None:
    with pytest.raises(ConfigError):
        parse_options({"extra_headers": headers})


def test_rejects_non_mapping_http_options() -> None:
    with pytest.raises(ConfigError):
        parse_options({"http_options": [("timeout", 1.0)]})


def test_options_are_frozen() -> None:
    options = parse_options({"extra_headers": {"X-A": "1"}})
    with pytest.raises(AttributeError):
        options.extra_headers = {}  # type: ignore[misc]
