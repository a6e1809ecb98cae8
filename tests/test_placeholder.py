"""Tests for placeholder rendering and substitution."""

import pytest

from buildver_cli.placeholder import (
    placeholder_regex,
    render_assignment,
    substitute,
    validate_var_name,
)


class TestValidateVarName:
    """Tests for variable name validation."""

    @pytest.mark.parametrize("name", ["BUILD_ID", "_id", "$version", "v2"])
    def test_accepts_identifiers(self, name: str) -> None:
        assert validate_var_name(name) == name

    @pytest.mark.parametrize("name", ["", "BUILD.ID", "2fast", "a b", "ID(", "x+"])
    def test_rejects_non_identifiers(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid variable name"):
            validate_var_name(name)


class TestSubstitute:
    """Tests for substitute."""

    def test_rewrites_spaced_assignment_to_canonical_form(self) -> None:
        content, count = substitute('BUILD_ID = "dev"', "BUILD_ID", "deadbeefcafebabe")
        assert count == 1
        assert content == 'BUILD_ID="deadbeefcafebabe"'

    def test_replaces_every_occurrence(self) -> None:
        source = 'a;BUILD_ID="dev";b;const BUILD_ID  =  "old";\nlet BUILD_ID="";'
        content, count = substitute(source, "BUILD_ID", "abc")
        assert count == 3
        assert content == 'a;BUILD_ID="abc";b;const BUILD_ID="abc";\nlet BUILD_ID="abc";'

    def test_already_current_assignment_is_stable(self) -> None:
        source = 'export const BUILD_ID="deadbeefcafebabe";'
        content, count = substitute(source, "BUILD_ID", "deadbeefcafebabe")
        assert count == 1
        assert content == source

    def test_ignores_longer_identifiers(self) -> None:
        source = 'MY_BUILD_ID = "dev"; BUILD_ID_X = "dev"'
        content, count = substitute(source, "BUILD_ID", "abc")
        assert count == 0
        assert content == source

    def test_ignores_other_variables_and_unquoted_values(self) -> None:
        source = 'VERSION = "dev"; BUILD_ID = dev; BUILD_ID = \'dev\''
        assert substitute(source, "BUILD_ID", "abc") == (source, 0)

    def test_dollar_in_name_is_matched_literally(self) -> None:
        content, count = substitute('$id = "dev"; xid = "dev"', "$id", "abc")
        assert count == 1
        assert content == '$id="abc"; xid = "dev"'

    def test_value_does_not_span_lines(self) -> None:
        source = 'BUILD_ID = "dev\n"'
        assert substitute(source, "BUILD_ID", "abc") == (source, 0)


def test_render_assignment() -> None:
    assert render_assignment("BUILD_ID", "abc123") == 'BUILD_ID="abc123"'


def test_placeholder_regex_escapes_name() -> None:
    assert placeholder_regex("$v").search('$v="x"')
    assert not placeholder_regex("$v").search('v="x"')
