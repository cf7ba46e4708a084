# -*- coding: utf-8 -*-

"""Core constants shared across the agent-datamodel helpers."""

import re

# DNS prefix constraints: 3-45 chars, leading letter, trailing letter or digit
DNS_PREFIX_MIN_LENGTH = 3
DNS_PREFIX_MAX_LENGTH = 45
DNS_PREFIX_PATTERN: re.Pattern[str] = re.compile(
    rf"^[A-Za-z][A-Za-z0-9-]{{{DNS_PREFIX_MIN_LENGTH - 2},{DNS_PREFIX_MAX_LENGTH - 2}}}[A-Za-z0-9]$"
)

# Confidential-computing VM families exposing SGX, matched against the full SKU name
SGX_SKU_FAMILY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^Standard_DC[0-9]+s$"),  # DC-series
    re.compile(r"^Standard_DC[0-9]+s?_v2$"),  # DCsv2-series
    re.compile(r"^Standard_DC[0-9]+d?s_v3$"),  # DCsv3 / DCdsv3-series
)

# Managed disk tiers
PREMIUM_STORAGE_TIER = "Premium_LRS"
STANDARD_STORAGE_TIER = "Standard_LRS"

# VM sizes look like <tier>_<capability>[_<version>]; capability flags are lowercase letters
VM_SIZE_SEPARATOR = "_"
VM_SIZE_MIN_TOKENS = 2
PREMIUM_STORAGE_CAPABILITY_MARKERS: frozenset[str] = frozenset({"s"})

# Container image references end in <image>:<tag> or <image>@<digest>
CONTAINER_IMAGE_TAG_SEPARATOR = ":"
CONTAINER_IMAGE_DIGEST_SEPARATOR = "@"

# CLI exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
