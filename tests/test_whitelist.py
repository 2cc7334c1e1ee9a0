import pytest

from image_api.search.whitelist import (
    build_site_filter,
    extract_domain,
    is_allowed_source,
    load_allow_list,
)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("cosmos.so", True),
        ("images.cosmos.so", True),
        ("a.b.cosmos.so", True),
        ("notcosmos.so", False),
        ("cosmos.soo", False),
        ("Cosmos.so", False),  # no case folding
        ("", False),
    ],
)
def test_is_allowed_source(source, expected):
    assert is_allowed_source(source, ["cosmos.so"]) is expected


def test_is_allowed_source_checks_every_entry():
    allowed = ["example.org", "cosmos.so"]
    assert is_allowed_source("cdn.cosmos.so", allowed)
    assert not is_allowed_source("cosmos.so.evil.net", allowed)


def test_empty_allow_list_allows_nothing():
    assert not is_allowed_source("cosmos.so", [])


def test_extract_domain():
    assert extract_domain("www.cosmos.so") == "cosmos.so"
    assert extract_domain("cosmos.so") == "cosmos.so"
    assert extract_domain("images.www.cosmos.so") == "images.www.cosmos.so"
    assert extract_domain("www.") == "www."


def test_build_site_filter_joins_with_spaces():
    assert build_site_filter(["cosmos.so", "are.na"]) == "cosmos.so are.na"
    assert build_site_filter([]) == ""


def test_load_allow_list_merges_file_after_defaults(tmp_path):
    f = tmp_path / "sources.txt"
    f.write_text("# extra sources\nare.na\n\ncosmos.so\n  savee.it  \n", encoding="utf-8")
    assert load_allow_list(f, ["cosmos.so"]) == ["cosmos.so", "are.na", "savee.it"]


def test_load_allow_list_missing_file(tmp_path):
    assert load_allow_list(tmp_path / "nope.txt", ["cosmos.so"]) == ["cosmos.so"]
    assert load_allow_list(None, ["cosmos.so", "cosmos.so"]) == ["cosmos.so"]
