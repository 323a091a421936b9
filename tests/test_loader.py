"""Tests for urlshort.routing.loader — YAML decoding and route folding."""

import logging
from pathlib import Path

import pytest
import yaml

from urlshort.errors import ConfigurationError, DecodeError
from urlshort.http.request import Request
from urlshort.http.response import Response
from urlshort.routing.loader import (
    decode_records,
    load_routes,
    load_routes_file,
    to_routes,
    yaml_handler,
)

GOPHERCISES = b"""\
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /urlshort-final
  url: https://github.com/gophercises/urlshort/tree/solution
"""


async def fallback(request: Request) -> Response:
    return Response("fallback", status=404)


class TestDecodeRecords:
    def test_records_in_order(self) -> None:
        records = decode_records(GOPHERCISES)
        assert records == [
            {"path": "/urlshort", "url": "https://github.com/gophercises/urlshort"},
            {
                "path": "/urlshort-final",
                "url": "https://github.com/gophercises/urlshort/tree/solution",
            },
        ]

    def test_accepts_str(self) -> None:
        assert decode_records("- {path: /a, url: /b}") == [{"path": "/a", "url": "/b"}]

    def test_field_order_irrelevant(self) -> None:
        assert decode_records("- url: /b\n  path: /a\n") == [{"path": "/a", "url": "/b"}]

    def test_extra_keys_ignored(self) -> None:
        payload = "- path: /a\n  url: /b\n  hits: 3\n  tags: [x, y]\n"
        assert decode_records(payload) == [{"path": "/a", "url": "/b"}]

    @pytest.mark.parametrize("payload", [b"", b"\n", b"~", b"null", b"# only a comment\n"])
    def test_empty_document_is_no_records(self, payload: bytes) -> None:
        assert decode_records(payload) == []

    def test_empty_list(self) -> None:
        assert decode_records(b"[]") == []

    def test_missing_fields_are_omitted(self) -> None:
        assert decode_records("- url: /b\n- path: /a\n") == [{"url": "/b"}, {"path": "/a"}]

    @pytest.mark.parametrize("payload", [b"just a string", b"42", b"true"])
    def test_bare_scalar_rejected(self, payload: bytes) -> None:
        with pytest.raises(DecodeError, match="must be a list"):
            decode_records(payload)

    def test_top_level_mapping_rejected(self) -> None:
        with pytest.raises(DecodeError, match="got dict"):
            decode_records(b"path: /a\nurl: /b\n")

    def test_non_mapping_item_rejected(self) -> None:
        with pytest.raises(DecodeError, match="#1 must be a mapping"):
            decode_records(b"- path: /a\n  url: /b\n- /c\n")

    def test_non_string_field_rejected(self) -> None:
        with pytest.raises(DecodeError, match="'url' must be a string"):
            decode_records(b"- path: /a\n  url: [1, 2]\n")

    def test_numeric_path_rejected(self) -> None:
        with pytest.raises(DecodeError, match="'path' must be a string"):
            decode_records(b"- path: 404\n  url: /b\n")

    def test_malformed_yaml_chains_cause(self) -> None:
        with pytest.raises(DecodeError, match="Invalid YAML") as exc_info:
            decode_records(b"- path: /a\n  url: [unclosed\n")
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_unsafe_tags_rejected(self) -> None:
        with pytest.raises(DecodeError):
            decode_records(b"- !!python/object/apply:os.system ['true']\n")


class TestToRoutes:
    def test_fold(self) -> None:
        records = [{"path": "/a", "url": "/1"}, {"path": "/b", "url": "/2"}]
        assert to_routes(records) == {"/a": "/1", "/b": "/2"}

    def test_last_write_wins(self) -> None:
        records = [{"path": "/a", "url": "/1"}, {"path": "/a", "url": "/2"}]
        assert to_routes(records) == {"/a": "/2"}

    def test_empty(self) -> None:
        assert to_routes([]) == {}

    def test_missing_path_maps_empty_key(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="urlshort.routing"):
            routes = to_routes([{"url": "https://example.com"}])

        assert routes == {"": "https://example.com"}
        assert "no path" in caplog.text

    def test_missing_url_maps_empty_value(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="urlshort.routing"):
            routes = to_routes([{"path": "/a"}])

        assert routes == {"/a": ""}
        assert "no url" in caplog.text

    def test_complete_records_log_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="urlshort.routing"):
            to_routes([{"path": "/a", "url": "/b"}])
        assert caplog.records == []


class TestLoadRoutes:
    def test_round_trip(self) -> None:
        assert load_routes(GOPHERCISES) == {
            "/urlshort": "https://github.com/gophercises/urlshort",
            "/urlshort-final": "https://github.com/gophercises/urlshort/tree/solution",
        }

    def test_duplicates_in_yaml(self) -> None:
        payload = b"- {path: /a, url: /1}\n- {path: /a, url: /2}\n"
        assert load_routes(payload) == {"/a": "/2"}

    def test_decode_error_propagates(self) -> None:
        with pytest.raises(DecodeError):
            load_routes(b"hello")


class TestLoadRoutesFile:
    def test_reads_file(self, tmp_path: Path) -> None:
        routes_file = tmp_path / "routes.yaml"
        routes_file.write_bytes(GOPHERCISES)
        assert load_routes_file(routes_file)["/urlshort"] == (
            "https://github.com/gophercises/urlshort"
        )

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        routes_file = tmp_path / "routes.yaml"
        routes_file.write_text("- {path: /a, url: /b}\n")
        assert load_routes_file(str(routes_file)) == {"/a": "/b"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read routes file") as exc_info:
            load_routes_file(tmp_path / "nope.yaml")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_bad_contents(self, tmp_path: Path) -> None:
        routes_file = tmp_path / "routes.yaml"
        routes_file.write_text("not: [a, list")
        with pytest.raises(DecodeError):
            load_routes_file(routes_file)


class TestYamlHandler:
    @pytest.mark.asyncio
    async def test_match_redirects(self) -> None:
        handler = yaml_handler(GOPHERCISES, fallback)
        response = await handler(Request(method="GET", path="/urlshort"))
        assert response.status == 301
        assert response.location == "https://github.com/gophercises/urlshort"

    @pytest.mark.asyncio
    async def test_unknown_falls_through(self) -> None:
        handler = yaml_handler(GOPHERCISES, fallback)
        response = await handler(Request(method="GET", path="/unknown"))
        assert response.status == 404
        assert response.text == "fallback"

    def test_malformed_builds_no_handler(self) -> None:
        handler = None
        with pytest.raises(DecodeError):
            handler = yaml_handler(b"a bare scalar", fallback)
        assert handler is None

    @pytest.mark.asyncio
    async def test_empty_payload_falls_through(self) -> None:
        handler = yaml_handler(b"", fallback)
        response = await handler(Request(method="GET", path="/urlshort"))
        assert response.text == "fallback"
