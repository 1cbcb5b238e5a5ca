"""Tests for the template catalog."""
from __future__ import annotations

import dataclasses

import pytest

from contractdesk.services.catalog_service import (
    FLAG,
    TemplateKey,
    UnknownTemplateError,
    get_template,
    list_templates,
)
from contractdesk.services.render_service import placeholders


class TestCatalog:
    def test_three_templates_in_order(self) -> None:
        keys = [t.key.value for t in list_templates()]
        assert keys == ["producer-agreement", "management-agreement", "form-producer-agreement"]

    def test_lookup_by_string_and_enum(self) -> None:
        assert get_template("management-agreement") is get_template(TemplateKey.MANAGEMENT_AGREEMENT)

    def test_unknown_template(self) -> None:
        with pytest.raises(UnknownTemplateError) as info:
            get_template("nda")
        assert isinstance(info.value, KeyError)
        msg = str(info.value)
        assert "nda" in msg
        assert "producer-agreement" in msg

    @pytest.mark.parametrize("key", [k.value for k in TemplateKey])
    def test_every_placeholder_is_a_declared_field(self, key: str) -> None:
        tpl = get_template(key)
        sources = [tpl.body] + [a.body for a in tpl.attachments]
        used = {name for text in sources for name in placeholders(text)}
        assert used <= set(tpl.variables)

    @pytest.mark.parametrize("key", [k.value for k in TemplateKey])
    def test_field_names_unique(self, key: str) -> None:
        names = get_template(key).variables
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("key", [k.value for k in TemplateKey])
    def test_attachment_flags_are_flag_fields(self, key: str) -> None:
        tpl = get_template(key)
        for att in tpl.attachments:
            if att.include_when is not None:
                assert tpl.field(att.include_when).kind == FLAG

    def test_common_required_fields(self) -> None:
        for tpl in list_templates():
            required = {f.name for f in tpl.fields if f.required}
            assert {"date", "artist", "producer"} <= required

    def test_management_defaults(self) -> None:
        defaults = get_template("management-agreement").defaults
        assert defaults["commissionRate"] == "20%"
        assert defaults["termYears"] == "4"

    def test_templates_are_frozen(self) -> None:
        tpl = get_template("producer-agreement")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tpl.body = "changed"
