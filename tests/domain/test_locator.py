"""Tests for the structural locator."""

import pytest

from cleanctl.domain.errors import StructureNotFound
from cleanctl.domain.locator import (
    interface_opener,
    locate_interface_body,
    locate_record_method_region,
    record_opener,
    struct_declaration,
)

UNIT = (
    "package interactor\n"
    "\n"
    "type OrderHandler interface {\n"
    "\t// TODO define interface methods\n"
    "}\n"
    "\n"
    "type orderHandler struct {\n"
    "\t// TODO define struct fields and implement the interface\n"
    "}\n"
)


class TestMarkers:
    def test_interface_opener(self) -> None:
        assert interface_opener("Order") == "type Order interface {\n"

    def test_record_opener(self) -> None:
        assert record_opener("order") == "type order struct {\n"

    def test_struct_declaration_has_no_newline(self) -> None:
        assert struct_declaration("AddItem") == "type AddItem struct {"


class TestLocateInterfaceBody:
    def test_offsets_follow_opener(self) -> None:
        prefix_end, suffix_start = locate_interface_body(UNIT, "OrderHandler")
        opener = interface_opener("OrderHandler")
        assert prefix_end == suffix_start
        assert UNIT[:prefix_end].endswith(opener)
        assert UNIT[prefix_end:].startswith("\t// TODO define interface methods")

    def test_first_occurrence_wins(self) -> None:
        text = UNIT + "\ntype OrderHandler interface {\n}\n"
        prefix_end, _ = locate_interface_body(text, "OrderHandler")
        assert prefix_end == UNIT.index("\t// TODO define interface methods")

    def test_missing_interface(self) -> None:
        with pytest.raises(StructureNotFound, match="Interface Basket not found"):
            locate_interface_body(UNIT, "Basket")

    def test_opener_requires_exact_line(self) -> None:
        with pytest.raises(StructureNotFound):
            locate_interface_body("type OrderHandler interface{\n}\n", "OrderHandler")


class TestLocateRecordMethodRegion:
    def test_flat_struct(self) -> None:
        region = locate_record_method_region(UNIT, "orderHandler")
        assert region == len(UNIT) - 1
        assert UNIT[region - 1] == "}"

    def test_nested_braces(self) -> None:
        text = (
            "type orderHandler struct {\n"
            "\tinner struct {\n"
            "\t\tdeep struct {\n"
            "\t\t\tx int\n"
            "\t\t}\n"
            "\t}\n"
            "\tm map[string]struct{}\n"
            "}\n"
            "\n"
            "func (o *orderHandler) Other() {\n"
            "}\n"
        )
        region = locate_record_method_region(text, "orderHandler")
        assert text[:region].endswith("\tm map[string]struct{}\n}")
        assert text[region:].startswith("\n\nfunc")

    def test_braces_in_comments_and_literals(self) -> None:
        text = (
            "type orderHandler struct {\n"
            "\t// closing } in a comment\n"
            "\t/* and { another } */\n"
            '\tname string `json:"}"`\n'
            "}\n"
            "\n"
            'var brace = "}"\n'
            "var r = '}'\n"
        )
        region = locate_record_method_region(text, "orderHandler")
        assert text[:region].endswith('`json:"}"`\n}')

    def test_escaped_quote_in_string(self) -> None:
        text = (
            "type orderHandler struct {\n"
            '\tx string "a\\"}"\n'
            "}\n"
        )
        region = locate_record_method_region(text, "orderHandler")
        assert region == len(text) - 1

    def test_starts_at_first_opener(self) -> None:
        text = "type basket struct {\n}\n\n" + UNIT
        region = locate_record_method_region(text, "orderHandler")
        assert region == len(text) - 1

    def test_missing_opener(self) -> None:
        with pytest.raises(StructureNotFound, match="Implementation basket not found"):
            locate_record_method_region(UNIT, "basket")

    def test_unbalanced_braces(self) -> None:
        text = "type orderHandler struct {\n\tinner struct {\n}\n"
        with pytest.raises(StructureNotFound, match="Closing brace of orderHandler"):
            locate_record_method_region(text, "orderHandler")

    def test_unterminated_block_comment(self) -> None:
        text = "type orderHandler struct {\n/* }\n"
        with pytest.raises(StructureNotFound):
            locate_record_method_region(text, "orderHandler")
