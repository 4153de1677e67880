"""Tests for the public API: find_nodes, normalize_path, parse_document,
detect_document_type.
"""

from __future__ import annotations

import logging

import pytest
import yaml

from yaml_node_query import (
    DocumentParseError,
    NodeKind,
    PathSyntaxError,
    QueryConfig,
    StatusCodeIndexPolicy,
    detect_document_type,
    find_nodes,
    normalize_path,
    parse_document,
)

# ---------------------------------------------------------------------------
# normalize_path
# ---------------------------------------------------------------------------


class TestNormalizePath:
    def test_default_config(self) -> None:
        assert normalize_path("(root).tags.0.responses.404") == "$.tags[0].responses.404"

    def test_config_policy_and_marker(self) -> None:
        cfg = QueryConfig(index_policy=StatusCodeIndexPolicy(threshold=1000), root_marker="#")
        assert normalize_path("#.responses.404", cfg) == "$.responses[404]"


# ---------------------------------------------------------------------------
# find_nodes
# ---------------------------------------------------------------------------


class TestFindNodes:
    def test_quoted_status_code_key(self, petstore: bytes) -> None:
        nodes = find_nodes(petstore, "(root).paths./pets.get.responses.200.description")
        assert [n.label for n in nodes] == ["A list of pets"]

    def test_unquoted_status_code_key(self, petstore: bytes) -> None:
        nodes = find_nodes(petstore, "(root).paths./pets.get.responses.404.description")
        assert [n.label for n in nodes] == ["Not found"]

    def test_numeric_segment_as_index(self, petstore: bytes) -> None:
        nodes = find_nodes(petstore, "(root).tags.1.name")
        assert [n.label for n in nodes] == ["store"]

    def test_index_inside_operation(self, petstore: bytes) -> None:
        nodes = find_nodes(petstore, "(root).paths./pets.get.parameters.0.in")
        assert [n.label for n in nodes] == ["query"]

    def test_wildcard(self, petstore: bytes) -> None:
        assert [n.label for n in find_nodes(petstore, "$.tags[*].name")] == ["pets", "store"]

    def test_recursive_descent(self, petstore: bytes) -> None:
        labels = {n.label for n in find_nodes(petstore, "$..description")}
        assert labels == {"A list of pets", "Not found", "unexpected error"}

    def test_collection_match(self, petstore: bytes) -> None:
        (info,) = find_nodes(petstore, "$.info")
        assert info.kind == NodeKind.MAP
        assert [c.label for c in info.children] == ["title", "Petstore", "version", "1.0.0"]

    def test_root_match(self, petstore: bytes) -> None:
        (root,) = find_nodes(petstore, "(root)")
        assert root.kind == NodeKind.MAP
        assert root.children[0].label == "openapi"

    def test_matches_carry_source_position(self, petstore: bytes) -> None:
        (title,) = find_nodes(petstore, "$.info.title")
        assert (title.line, title.column) == (3, 10)

    def test_matches_carry_typed_values(self, petstore: bytes) -> None:
        (required,) = find_nodes(petstore, "(root).paths./pets.get.parameters.0.required")
        assert required.kind == NodeKind.BOOLEAN
        assert required.value is False

    def test_miss_is_empty(self, petstore: bytes) -> None:
        assert find_nodes(petstore, "$.info.nothing") == []

    def test_index_out_of_range_is_empty(self, petstore: bytes) -> None:
        assert find_nodes(petstore, "(root).tags.5.name") == []

    def test_accepts_str_documents(self, petstore: bytes) -> None:
        nodes = find_nodes(petstore.decode(), "$.openapi")
        assert [n.label for n in nodes] == ["3.1.0"]

    def test_json_documents(self) -> None:
        doc = b'{"paths": {"/pets": {"get": {"responses": {"200": {"description": "ok"}}}}}}'
        nodes = find_nodes(doc, "(root).paths./pets.get.responses.200.description")
        assert [n.label for n in nodes] == ["ok"]

    def test_custom_policy_keeps_small_numbers_as_keys(self) -> None:
        cfg = QueryConfig(index_policy=StatusCodeIndexPolicy(threshold=0))
        nodes = find_nodes(b"items:\n  '0': zero\n", "(root).items.0", cfg)
        assert [n.label for n in nodes] == ["zero"]

    def test_empty_document(self) -> None:
        assert find_nodes(b"", "$.anything") == []

    def test_apostrophe_key(self) -> None:
        nodes = find_nodes(b"notes:\n  it's: fine\n", "(root).notes.it's")
        assert [n.label for n in nodes] == ["fine"]


class TestFindNodesComputedValues:
    DOC = b"tags:\n  - name: b\n  - name: bb\nother: x\n"

    def test_substitution_results_are_skipped(self) -> None:
        assert find_nodes(self.DOC, "$.tags[*].name.`sub(/b/, c)`") == []

    def test_length_is_skipped(self) -> None:
        assert find_nodes(self.DOC, "$.tags.`len`") == []

    def test_computed_values_never_resolve_to_root(self) -> None:
        nodes = find_nodes(b"tags:\n  - name: b\n  - name: a\n", "$.tags[*].name.`sub(/b/, c)`")
        assert all(n.kind == NodeKind.STRING for n in nodes)

    def test_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="yaml_node_query.api")
        find_nodes(self.DOC, "$.tags.`len`")
        assert "skipping computed match" in caplog.text


class TestFindNodesErrors:
    def test_malformed_path(self, petstore: bytes) -> None:
        with pytest.raises(PathSyntaxError):
            find_nodes(petstore, "$.info[")

    def test_path_checked_before_document(self) -> None:
        with pytest.raises(PathSyntaxError):
            find_nodes(b"not: [valid", "$.info[")

    def test_malformed_document_raises_by_default(self) -> None:
        with pytest.raises(DocumentParseError) as excinfo:
            find_nodes(b"not: [valid", "$.not")
        assert isinstance(excinfo.value.__cause__, yaml.YAMLError)

    def test_lenient_parse_returns_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="yaml_node_query.api")
        cfg = QueryConfig(strict_parse=False)
        assert find_nodes(b"not: [valid", "$.not", cfg) == []
        assert "treating as empty" in caplog.text

    def test_lenient_parse_still_rejects_bad_paths(self) -> None:
        with pytest.raises(PathSyntaxError):
            find_nodes(b"a: 1", "$.a[", QueryConfig(strict_parse=False))


# ---------------------------------------------------------------------------
# parse_document
# ---------------------------------------------------------------------------


class TestParseDocument:
    def test_returns_root(self, petstore: bytes) -> None:
        root = parse_document(petstore)
        assert root is not None
        assert root.kind == NodeKind.MAP

    def test_empty_stream_is_none(self) -> None:
        assert parse_document(b"") is None
        assert parse_document("# only a comment\n") is None

    def test_first_document_only(self) -> None:
        root = parse_document("a: 1\n---\nb: 2\n")
        assert root is not None
        assert [k.label for k in root.children[::2]] == ["a"]

    def test_malformed_raises(self) -> None:
        with pytest.raises(DocumentParseError):
            parse_document("key: 'unterminated")

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_document("a: b: c")

    def test_recursive_alias_raises(self) -> None:
        with pytest.raises(DocumentParseError):
            parse_document("a: &x [*x]\n")


# ---------------------------------------------------------------------------
# detect_document_type
# ---------------------------------------------------------------------------


class TestDetectDocumentType:
    @pytest.mark.parametrize(
        ("doc", "expected"),
        [
            ("openapi: 3.1.0\ninfo: {}\n", "openapi"),
            ("swagger: '2.0'\n", "swagger"),
            ("info: {}\nasyncapi: 2.6.0\n", "asyncapi"),
            ("info:\n  openapi: 3.0.0\n", None),
            ("- openapi\n", None),
            ("title: plain\n", None),
        ],
    )
    def test_detection(self, doc: str, expected: str | None) -> None:
        assert detect_document_type(parse_document(doc)) == expected

    def test_none_root(self) -> None:
        assert detect_document_type(None) is None

    def test_petstore(self, petstore: bytes) -> None:
        assert detect_document_type(parse_document(petstore)) == "openapi"
