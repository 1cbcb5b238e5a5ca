"""Tests for placeholder substitution and full document rendering."""
from __future__ import annotations

import pytest

from contractdesk.services.assembly_service import AssemblyService
from contractdesk.services.catalog_service import TemplateKey, get_template
from contractdesk.services.render_service import compose, placeholders, render, substitute
from contractdesk.services.resolver_service import resolve_variables


class TestSubstitute:
    def test_placeholders_in_first_appearance_order(self) -> None:
        assert placeholders("${b} then ${a} and ${b} again") == ["b", "a"]

    def test_repeated_placeholders_get_same_value(self) -> None:
        assert substitute("${x}-${x}", {"x": "7"}) == "7-7"

    def test_values_inserted_verbatim_single_pass(self) -> None:
        out = substitute("${a}", {"a": "${b} <b>&", "b": "nope"})
        assert out == "${b} <b>&"

    def test_missing_key_renders_placeholder_text(self) -> None:
        assert substitute("Hi ${who}", {}) == "Hi To be provided"

    def test_non_identifier_braces_untouched(self) -> None:
        assert substitute("cost ${1abc} and $x", {}) == "cost ${1abc} and $x"


class TestRender:
    @pytest.mark.parametrize("key", [k.value for k in TemplateKey])
    def test_no_unresolved_markers(self, key: str, fixed_today) -> None:
        text = AssemblyService().render_text(key, {}, today=fixed_today)
        assert "${" not in text
        assert "undefined" not in text

    @pytest.mark.parametrize("key", [k.value for k in TemplateKey])
    def test_deterministic(self, key: str, fixed_today) -> None:
        values = {"artist": "Ana", "producer": "Bo"}
        svc = AssemblyService()
        assert svc.render_text(key, values, today=fixed_today) == svc.render_text(key, values, today=fixed_today)

    def test_management_scenario(self, fixed_today) -> None:
        text = AssemblyService().render_text(
            "management-agreement", {"commissionRate": "20%", "termYears": "4"}, today=fixed_today
        )
        assert "**20%**" in text
        assert "**4** years" in text
        assert "undefined" not in text
        assert "${" not in text

    def test_management_parties(self, management_values, fixed_today) -> None:
        text = AssemblyService().render_text("management-agreement", management_values, today=fixed_today)
        assert '**Management Company** ("Manager")' in text
        assert '**Taylor Martinez** ("Artist")' in text
        assert "manager@management.com" in text

    def test_missing_values_are_visible(self, fixed_today) -> None:
        text = AssemblyService().render_text("management-agreement", {}, today=fixed_today)
        assert "To be provided" in text
        assert "January 15, 2025" in text


class TestAttachments:
    def test_form_producer_includes_all_by_default(self, fixed_today) -> None:
        text = AssemblyService().render_text("form-producer-agreement", {}, today=fixed_today)
        for heading in ("## SCHEDULE 1", "## SCHEDULE 2", "## EXHIBIT A", "## EXHIBIT B", "## EXHIBIT C"):
            assert heading in text

    def test_flag_off_drops_attachment(self, fixed_today) -> None:
        text = AssemblyService().render_text(
            "form-producer-agreement", {"includeSoundExchangeLod": "no"}, today=fixed_today
        )
        assert "## EXHIBIT C" not in text
        assert "## EXHIBIT B" in text

    def test_producer_exhibits_toggle(self, producer_values, fixed_today) -> None:
        values = dict(producer_values, includeComposerExhibit="no")
        text = AssemblyService().render_text("producer-agreement", values, today=fixed_today)
        assert "## EXHIBIT A" in text
        assert "## EXHIBIT B" not in text

    def test_attachments_separated_by_rule(self) -> None:
        tpl = get_template("form-producer-agreement")
        variables = resolve_variables(tpl, {})
        composed = compose(tpl, variables)
        assert composed.count("\n\n---\n\n## ") == len(tpl.attachments)

    def test_render_matches_compose_then_substitute(self, fixed_today) -> None:
        tpl = get_template("producer-agreement")
        variables = resolve_variables(tpl, {"artist": "Ana"}, today=fixed_today)
        assert render(tpl, variables) == substitute(compose(tpl, variables), variables)
