"""Tests para la definición de campos."""

import pytest

from vozform.core.errors import SchemaError
from vozform.core.fields import FieldOption, FieldSpec, FieldType, NumericRange, choices


class TestFieldPayload:
    """Tests de coherencia tipo/payload."""

    def test_select_requires_options(self):
        with pytest.raises(SchemaError):
            FieldSpec(id="plan", label="Plan", section="s", field_type=FieldType.SELECT)

    def test_slider_requires_range(self):
        with pytest.raises(SchemaError):
            FieldSpec(id="salary", label="Salary", section="s", field_type=FieldType.SLIDER)

    def test_text_rejects_options(self):
        with pytest.raises(SchemaError):
            FieldSpec(id="city", label="City", section="s", options=choices("a", "b"))

    def test_slider_rejects_options(self):
        with pytest.raises(SchemaError):
            FieldSpec(
                id="salary", label="Salary", section="s", field_type=FieldType.SLIDER,
                value_range=NumericRange(0, 10), options=choices("a"),
            )

    def test_default_must_be_an_option(self):
        with pytest.raises(SchemaError):
            FieldSpec(
                id="plan", label="Plan", section="s", field_type=FieldType.SELECT,
                options=choices("basic", "premium"), default="gold",
            )

    def test_invalid_range(self):
        with pytest.raises(SchemaError):
            NumericRange(min_value=10, max_value=5)
        with pytest.raises(SchemaError):
            NumericRange(min_value=0, max_value=5, step=0)
        with pytest.raises(SchemaError):
            NumericRange(min_value=0, max_value=5, default=7)

    def test_missing_id_or_label(self):
        with pytest.raises(SchemaError):
            FieldSpec(id="", label="X", section="s")
        with pytest.raises(SchemaError):
            FieldSpec(id="x", label="", section="s")


class TestFieldDefaults:
    """Tests de valores por defecto según tipo."""

    def test_text_default_empty(self):
        assert FieldSpec(id="a", label="A", section="s").default_value() == ""

    def test_toggle_default(self):
        off = FieldSpec(id="t", label="T", section="s", field_type=FieldType.TOGGLE)
        on = FieldSpec(id="t", label="T", section="s", field_type=FieldType.TOGGLE, default=True)
        assert off.default_value() is False
        assert on.default_value() is True

    def test_tags_default_is_fresh_list(self):
        spec = FieldSpec(id="tags", label="Tags", section="s", field_type=FieldType.TAGS)
        first = spec.default_value()
        first.append("x")
        assert spec.default_value() == []

    def test_choice_default_first_option(self):
        spec = FieldSpec(
            id="lang", label="Lang", section="s", field_type=FieldType.RADIO_ENUM,
            options=choices("english", "spanish"),
        )
        assert spec.default_value() == "english"

    def test_slider_default(self):
        spec = FieldSpec(
            id="salary", label="Salary", section="s", field_type=FieldType.SLIDER,
            value_range=NumericRange(30000, 150000, 5000, default=50000),
        )
        assert spec.default_value() == 50000

    def test_slider_default_min_when_unset(self):
        spec = FieldSpec(
            id="n", label="N", section="s", field_type=FieldType.SLIDER,
            value_range=NumericRange(1, 5),
        )
        assert spec.default_value() == 1

    def test_empty_value(self):
        tags = FieldSpec(id="tags", label="Tags", section="s", field_type=FieldType.TAGS)
        text = FieldSpec(id="a", label="A", section="s")
        assert tags.empty_value() == []
        assert text.empty_value() == ""


class TestFieldOptions:

    def test_option_label(self):
        spec = FieldSpec(
            id="plan", label="Plan", section="s", field_type=FieldType.SELECT,
            options=(FieldOption("basic", "Basic tier"), FieldOption("pro")),
        )
        assert spec.option_label("basic") == "Basic tier"
        assert spec.option_label("pro") == "Pro"
        assert spec.option_label("gold") is None
        assert spec.option_values == ["basic", "pro"]

    def test_is_valid_without_validator(self):
        spec = FieldSpec(id="a", label="A", section="s")
        assert spec.is_valid("anything")

    def test_is_valid_swallows_validator_type_errors(self):
        spec = FieldSpec(id="a", label="A", section="s", validator=lambda v: len(v) > 2)
        assert spec.is_valid("abc")
        assert not spec.is_valid(5)
