# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""DNS prefix validation.

User-supplied cluster DNS prefixes are checked before they are accepted into
generated configuration, since they become part of externally visible DNS
names.
"""

import logging

from agent_datamodel.core.constants import DNS_PREFIX_PATTERN
from agent_datamodel.core.errors import InvalidDNSPrefixError

logger = logging.getLogger(__name__)


def validate_dns_prefix(dns_prefix: str) -> None:
    """Validate a DNS prefix.

    A valid prefix is 3 to 45 characters long, starts with a letter, ends with
    a letter or a number, and contains only letters, numbers and hyphens. All
    rules are checked together and reported in a single error.

    Args:
        dns_prefix: The DNS prefix to validate (e.g., "myDNS-1234").

    Raises:
        InvalidDNSPrefixError: If any rule is violated. The message quotes the
            prefix and reports its length.
    """
    if not DNS_PREFIX_PATTERN.fullmatch(dns_prefix):
        raise InvalidDNSPrefixError(dns_prefix)
    logger.debug("DNS prefix %s is valid", dns_prefix)


def is_valid_dns_prefix(dns_prefix: str) -> bool:
    """Return True if the DNS prefix passes validate_dns_prefix()."""
    try:
        validate_dns_prefix(dns_prefix)
    except InvalidDNSPrefixError:
        return False
    return True
