# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""String shaping helpers for generated deployment configuration."""

from collections.abc import Mapping, Sequence


def get_ordered_escaped_key_vals_string(config: Mapping[str, str]) -> str:
    """Serialize a mapping as quoted ``key=value`` tokens ordered by key.

    Keys are sorted so identical mappings always produce identical output,
    regardless of insertion order.

    Args:
        config: Mapping of string keys to string values.

    Returns:
        Comma-and-space separated tokens, or an empty string for an empty mapping.

    Examples:
        >>> get_ordered_escaped_key_vals_string({"yes": "please", "foo": "bar"})
        '"foo=bar", "yes=please"'
        >>> get_ordered_escaped_key_vals_string({})
        ''
    """
    return ", ".join(f'"{key}={config[key]}"' for key in sorted(config))


def slice_int_is_non_empty(values: Sequence[int] | None) -> bool:
    """Return True if the sequence holds at least one element."""
    return values is not None and len(values) > 0


def wrap_as_arm_variable(s: str) -> str:
    """Format a string for inserting an ARM variable into an ARM expression."""
    return f"',variables('{s}'),'"


def wrap_as_parameter(s: str) -> str:
    """Format a string for inserting an ARM parameter into an ARM expression."""
    return f"',parameters('{s}'),'"


def wrap_as_verbatim(s: str) -> str:
    """Format a string for inserting a literal string into an ARM expression.

    Examples:
        >>> wrap_as_verbatim("foo")
        "',foo,'"
        >>> wrap_as_verbatim("")
        "',,'"
    """
    return f"',{s},'"


def indent_string(original: str, spaces: int) -> str:
    """Pad each line of a string with N spaces.

    Every emitted line is terminated with a newline, including the last one.
    An empty input yields an empty string, and a trailing newline in the input
    does not produce an extra indented blank line.

    Args:
        original: The (possibly multi-line) string to indent.
        spaces: Number of spaces to prepend to each line.

    Returns:
        The indented string.

    Examples:
        >>> indent_string("foo\\nbar", 4)
        '    foo\\n    bar\\n'
        >>> indent_string("", 4)
        ''
    """
    lines = original.split("\n")
    if lines[-1] == "":
        lines.pop()

    padding = " " * spaces
    # One trailing CR per line is dropped, as with CRLF line endings
    return "".join(
        padding + (line[:-1] if line.endswith("\r") else line) + "\n" for line in lines
    )
