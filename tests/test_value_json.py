"""Tests for the wire JSON shape, decoding and cloning of values."""

import json
import unittest

from attrview.exceptions import AttrViewException, ValueDecodeError
from attrview.models import (
    CheckboxValue,
    MultiSelectValue,
    NumberValue,
    RelationValue,
    RollupCalc,
    RollupValue,
    TextValue,
    UnknownValue,
    ValueCheckbox,
    ValueNumber,
    ValueRelation,
    ValueRollup,
    ValueSelect,
    ValueText,
    parse_value,
    value_from_json,
)


class WireShapeTest(unittest.TestCase):
    def test_empty_top_level_fields_are_omitted(self):
        value = TextValue(text=ValueText(content="hi"))
        self.assertEqual(
            json.loads(value.to_json()),
            {"type": "text", "text": {"content": "hi"}},
        )

    def test_identifiers_use_wire_names(self):
        value = CheckboxValue(
            id="v1",
            key_id="k1",
            block_id="b1",
            is_detached=True,
            checkbox=ValueCheckbox(checked=False),
        )
        self.assertEqual(
            json.loads(value.to_json()),
            {
                "id": "v1",
                "keyID": "k1",
                "blockID": "b1",
                "type": "checkbox",
                "isDetached": True,
                "checkbox": {"checked": False},
            },
        )

    def test_key_order_matches_wire_contract(self):
        value = NumberValue(id="v1", key_id="k1", block_id="b1", number=ValueNumber())
        self.assertEqual(
            list(json.loads(value.to_json())),
            ["id", "keyID", "blockID", "type", "number"],
        )

    def test_payload_fields_are_always_present(self):
        value = NumberValue(number=ValueNumber(content=3.0, format="commas"))
        self.assertEqual(
            json.loads(value.to_json())["number"],
            {
                "content": 3,
                "isNotEmpty": False,
                "format": "commas",
                "formattedContent": "",
            },
        )
        self.assertIn('"content":3,', value.to_json())

    def test_empty_select_list_is_omitted(self):
        value = MultiSelectValue(id="v1")
        self.assertNotIn("mSelect", json.loads(value.to_json()))

    def test_relation_block_ids_wire_name(self):
        value = RelationValue(
            relation=ValueRelation(contents=["a"], block_ids=["20240101000000-abcdefg"])
        )
        self.assertEqual(
            json.loads(value.to_json())["relation"],
            {"contents": ["a"], "blockIDs": ["20240101000000-abcdefg"]},
        )


class DecodeTest(unittest.TestCase):
    def test_decode_dispatches_on_type(self):
        value = value_from_json(
            '{"id":"v1","keyID":"k1","blockID":"b1","type":"mSelect",'
            '"mSelect":[{"content":"A","color":"1"},{"content":"B","color":"2"}]}'
        )
        self.assertIsInstance(value, MultiSelectValue)
        self.assertEqual(value.key_id, "k1")
        self.assertEqual(value.render(), "A B")

    def test_decode_null_relation_lists(self):
        value = parse_value(
            {"type": "relation", "relation": {"contents": None, "blockIDs": None}}
        )
        self.assertEqual(value.relation.contents, [])
        self.assertEqual(value.render(), "")

    def test_decode_ignores_payloads_of_other_types(self):
        value = parse_value({"type": "text", "number": {"content": 1}})
        self.assertIsInstance(value, TextValue)
        self.assertFalse(hasattr(value, "number"))

    def test_unknown_type_survives_round_trip(self):
        value = parse_value({"id": "v9", "type": "lineNumber"})
        self.assertIsInstance(value, UnknownValue)
        self.assertEqual(json.loads(value.to_json()), {"id": "v9", "type": "lineNumber"})

    def test_malformed_json_raises_decode_error(self):
        with self.assertRaises(ValueDecodeError):
            value_from_json("{not json")

    def test_wrong_field_type_raises_decode_error(self):
        with self.assertRaises(ValueDecodeError) as ctx:
            parse_value({"type": "checkbox", "checkbox": {"checked": "maybe"}})
        self.assertTrue(ctx.exception.errors)
        self.assertIsInstance(ctx.exception, AttrViewException)

    def test_non_object_raises_decode_error(self):
        with self.assertRaises(ValueDecodeError):
            parse_value(["type", "text"])

    def test_rollup_calc_result_is_a_value(self):
        calc = RollupCalc.model_validate(
            {"operator": "Sum", "result": {"type": "number", "number": {"content": 2}}}
        )
        self.assertEqual(calc.operator, "Sum")
        self.assertIsInstance(calc.result, NumberValue)
        self.assertEqual(
            calc.to_dict()["result"],
            {
                "type": "number",
                "number": {
                    "content": 2.0,
                    "isNotEmpty": False,
                    "format": "",
                    "formattedContent": "",
                },
            },
        )


class CloneTest(unittest.TestCase):
    def test_clone_is_equal(self):
        value = MultiSelectValue(
            id="v1", m_select=[ValueSelect(content="A", color="1")]
        )
        clone = value.clone()
        self.assertEqual(clone, value)
        self.assertIsNot(clone, value)

    def test_clone_does_not_share_lists(self):
        value = RollupValue(rollup=ValueRollup(contents=["1", "2"]))
        clone = value.clone()
        clone.rollup.contents.append("3")
        self.assertEqual(value.rollup.contents, ["1", "2"])

        value2 = MultiSelectValue(m_select=[ValueSelect(content="A")])
        clone2 = value2.clone()
        clone2.m_select[0].content = "changed"
        self.assertEqual(value2.render(), "A")


if __name__ == "__main__":
    unittest.main()
