# -*- coding: utf-8 -*-

"""Utility modules for agent-datamodel."""

from agent_datamodel.utils.strings import (
    get_ordered_escaped_key_vals_string,
    indent_string,
    slice_int_is_non_empty,
    wrap_as_arm_variable,
    wrap_as_parameter,
    wrap_as_verbatim,
)
from agent_datamodel.utils.url import (
    get_component_name_from_url,
    get_container_image_name_from_url,
)

__all__ = [
    "get_component_name_from_url",
    "get_container_image_name_from_url",
    "get_ordered_escaped_key_vals_string",
    "indent_string",
    "slice_int_is_non_empty",
    "wrap_as_arm_variable",
    "wrap_as_parameter",
    "wrap_as_verbatim",
]
