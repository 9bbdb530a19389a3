"""Tests for plain-data and JSON rendering of the tree."""

import json

from fusion_parser import dump_json, parse, to_plain
from fusion_parser.core.serialize import dump_model, load_model


class TestToPlain:
    """Tests for the compact plain-data shape."""

    def test_absent_fields_are_omitted(self):
        plain = to_plain(parse("@cache"))
        assert plain == [{"kind": "definition", "path": [{"property": "@cache"}]}]

    def test_null_value_is_kept(self):
        plain = to_plain(parse("a = null"))
        assert plain[0]["value"] == {"simpleValue": None}

    def test_locations_on_every_node(self):
        plain = to_plain(parse("a = 1", add_location=True))
        assert plain == [
            {
                "kind": "definition",
                "path": [
                    {
                        "property": "a",
                        "loc": {
                            "start": {"line": 1, "column": 1},
                            "end": {"line": 1, "column": 2},
                        },
                    }
                ],
                "value": {
                    "simpleValue": 1,
                    "loc": {
                        "start": {"line": 1, "column": 5},
                        "end": {"line": 1, "column": 6},
                    },
                },
                "loc": {
                    "start": {"line": 1, "column": 1},
                    "end": {"line": 1, "column": 6},
                },
            }
        ]

    def test_include_location(self):
        plain = to_plain(parse("include: A.fusion", add_location=True))
        assert plain[0]["loc"]["end"] == {"line": 1, "column": 18}


class TestJson:
    """Tests for JSON output."""

    def test_dump_json_matches_plain(self, neos_root_source):
        tree = parse(neos_root_source)
        assert json.loads(dump_json(tree)) == to_plain(tree)

    def test_indent(self):
        text = dump_json(parse("a = true"), indent=2)
        assert '\n  {\n    "kind": "definition"' in text
        assert '"simpleValue": true' in text


class TestModelDump:
    """Tests for the kind-tagged model dump."""

    def test_dump_uses_field_names(self):
        data = dump_model(parse("a = Vendor:Thing"))
        assert data == [
            {
                "kind": "definition",
                "path": [{"kind": "property", "name": "a", "loc": None}],
                "value": {"kind": "object_name", "name": "Vendor:Thing", "loc": None},
                "block": None,
                "loc": None,
            }
        ]

    def test_load_restores_node_types(self, nested_prototypes_source):
        tree = parse(nested_prototypes_source, add_location=True)
        assert load_model(dump_model(tree)) == tree
