"""Rendering & matching of the `VAR="value"` placeholder assignment.

The assignment is the only channel between the early build pass, which
bakes a placeholder into compiled text, and the final pass, which knows the
real identifier. It is matched purely as text.
"""
from __future__ import annotations

import json
import re
from typing import Tuple

IDENTIFIER_REGEX = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Characters that may continue an identifier; a match must not start after one
_IDENT_CHAR_CLASS = r"A-Za-z0-9_$"


def validate_var_name(var_name: str) -> str:
    """Return var_name unchanged if it is a usable identifier.

    Raises:
        ValueError: If the name could not be emitted as `export const <name>`.
    """
    if not isinstance(var_name, str) or not IDENTIFIER_REGEX.match(var_name):
        raise ValueError(f"Invalid variable name {var_name!r}: expected an identifier like BUILD_ID")
    return var_name


def validate_placeholder_value(value: str) -> str:
    """Return value unchanged if the placeholder pattern can match it once quoted.

    Raises:
        ValueError: If value is not a string or holds a double quote or newline.
    """
    if not isinstance(value, str) or "\n" in value or '"' in value:
        raise ValueError(f"Placeholder value must be a single-line string without double quotes, got {value!r}")
    return value


def quote_value(value: str) -> str:
    """Double-quote a value for embedding in generated source."""
    return json.dumps(value)


def render_assignment(var_name: str, value: str) -> str:
    """Render the canonical `VAR="value"` form written into output files."""
    return f"{validate_var_name(var_name)}={quote_value(value)}"


def placeholder_regex(var_name: str) -> re.Pattern:
    """Compile the pattern that finds assignments to var_name.

    Whitespace around `=` is optional; the quoted value is matched but not
    validated.
    """
    name = re.escape(validate_var_name(var_name))
    return re.compile(rf'(?<![{_IDENT_CHAR_CLASS}]){name}\s*=\s*"[^"\n]*"')


def substitute(content: str, var_name: str, value: str) -> Tuple[str, int]:
    """Replace every assignment to var_name in content with the given value.

    Returns:
        (new_content, match_count)
    """
    replacement = render_assignment(var_name, value)
    # Function replacement keeps backslashes in the value literal
    return placeholder_regex(var_name).subn(lambda _m: replacement, content)
