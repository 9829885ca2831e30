"""Tests for rendering cell values to display strings."""

import unittest

from attrview.models import (
    BlockValue,
    CheckboxValue,
    CreatedValue,
    DateValue,
    EmailValue,
    MultiAssetValue,
    MultiSelectValue,
    NumberValue,
    PhoneValue,
    RelationValue,
    RollupValue,
    SelectValue,
    TemplateValue,
    TextValue,
    UnknownValue,
    UpdatedValue,
    URLValue,
    ValueAsset,
    ValueBlock,
    ValueCheckbox,
    ValueCreated,
    ValueDate,
    ValueEmail,
    ValueNumber,
    ValuePhone,
    ValueRelation,
    ValueRollup,
    ValueSelect,
    ValueTemplate,
    ValueText,
    ValueUpdated,
    ValueURL,
    parse_value,
    render,
)

ALL_VARIANTS = [
    BlockValue,
    TextValue,
    NumberValue,
    DateValue,
    SelectValue,
    MultiSelectValue,
    URLValue,
    EmailValue,
    PhoneValue,
    MultiAssetValue,
    TemplateValue,
    CreatedValue,
    UpdatedValue,
    CheckboxValue,
    RelationValue,
    RollupValue,
]


class MissingPayloadTest(unittest.TestCase):
    def test_every_type_renders_empty_without_payload(self):
        """A value whose payload is absent renders as the empty string."""
        for cls in ALL_VARIANTS:
            with self.subTest(type=cls.__name__):
                self.assertEqual(cls().render(), "")

    def test_wire_values_without_payload_render_empty(self):
        for cls in ALL_VARIANTS:
            tag = cls().type
            with self.subTest(type=tag):
                value = parse_value({"id": "v1", "type": tag})
                self.assertIsInstance(value, cls)
                self.assertEqual(render(value), "")

    def test_unknown_type_renders_empty(self):
        value = parse_value({"type": "lineNumber", "text": {"content": "x"}})
        self.assertIsInstance(value, UnknownValue)
        self.assertEqual(value.render(), "")

    def test_render_none(self):
        self.assertEqual(render(None), "")


class RenderByTypeTest(unittest.TestCase):
    def test_block(self):
        value = BlockValue(block=ValueBlock(id="b1", content="Row title "))
        self.assertEqual(value.render(), "Row title ")

    def test_text_and_template_are_stripped(self):
        self.assertEqual(TextValue(text=ValueText(content="  hi  \n")).render(), "hi")
        self.assertEqual(
            TemplateValue(template=ValueTemplate(content="\tout ")).render(), "out"
        )

    def test_number_uses_cached_rendering(self):
        value = NumberValue(
            number=ValueNumber(content=1.5, formatted_content="cached")
        )
        self.assertEqual(value.render(), "cached")

    def test_date_like_use_cached_rendering(self):
        self.assertEqual(
            DateValue(date=ValueDate(formatted_content="2024-01-02")).render(),
            "2024-01-02",
        )
        self.assertEqual(
            CreatedValue(created=ValueCreated(formatted_content="c")).render(), "c"
        )
        self.assertEqual(
            UpdatedValue(updated=ValueUpdated(formatted_content="u")).render(), "u"
        )

    def test_select_takes_first_option(self):
        value = SelectValue(
            m_select=[ValueSelect(content="A", color="1"), ValueSelect(content="B")]
        )
        self.assertEqual(value.render(), "A")

    def test_multi_select_joins_with_spaces(self):
        value = MultiSelectValue(
            m_select=[ValueSelect(content="A"), ValueSelect(content="B")]
        )
        self.assertEqual(value.render(), "A B")

    def test_plain_strings(self):
        self.assertEqual(URLValue(url=ValueURL(content="https://a.b")).render(), "https://a.b")
        self.assertEqual(EmailValue(email=ValueEmail(content="a@b.c")).render(), "a@b.c")
        self.assertEqual(PhoneValue(phone=ValuePhone(content="+1 555")).render(), "+1 555")

    def test_assets_join_contents(self):
        value = MultiAssetValue(
            m_asset=[
                ValueAsset(type="image", name="a", content="assets/a.png"),
                ValueAsset(type="file", name="b", content="assets/b.pdf"),
            ]
        )
        self.assertEqual(value.render(), "assets/a.png assets/b.pdf")

    def test_checkbox(self):
        self.assertEqual(CheckboxValue(checkbox=ValueCheckbox(checked=True)).render(), "√")
        self.assertEqual(CheckboxValue(checkbox=ValueCheckbox(checked=False)).render(), "")

    def test_relation_joins_contents(self):
        value = RelationValue(
            relation=ValueRelation(contents=["one", "two"], block_ids=["b1", "b2"])
        )
        self.assertEqual(value.render(), "one two")
        self.assertEqual(RelationValue(relation=ValueRelation()).render(), "")

    def test_rollup_joins_contents(self):
        value = RollupValue(rollup=ValueRollup(contents=["1", "", "3"]))
        self.assertEqual(value.render(), "1  3")

    def test_str_is_render(self):
        value = TextValue(text=ValueText(content=" x "))
        self.assertEqual(str(value), "x")


if __name__ == "__main__":
    unittest.main()
