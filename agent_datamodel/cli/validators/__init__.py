# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""CLI input validators for agent-datamodel.

Validators check user-supplied values before they are accepted into
generated configuration. Validators should validate only - presentation
belongs in agent_datamodel.utils.terminal.
"""

from agent_datamodel.cli.validators.dns_prefix import (
    is_valid_dns_prefix,
    validate_dns_prefix,
)

__all__ = [
    "is_valid_dns_prefix",
    "validate_dns_prefix",
]
