# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""VM SKU classification helpers.

Classification is purely textual: SKU names are matched against fixed
tables in ``agent_datamodel.core.constants`` and never parsed into a
structured object.
"""

import logging
from dataclasses import dataclass

from agent_datamodel.core.constants import (
    PREMIUM_STORAGE_CAPABILITY_MARKERS,
    PREMIUM_STORAGE_TIER,
    SGX_SKU_FAMILY_PATTERNS,
    STANDARD_STORAGE_TIER,
    VM_SIZE_MIN_TOKENS,
    VM_SIZE_SEPARATOR,
)
from agent_datamodel.core.errors import InvalidVMSizeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkuInfo:
    """Classification summary for a single VM size.

    Attributes:
        vm_size: The VM size as given (e.g., "Standard_DS2_v2").
        sgx_enabled: Whether the size belongs to an SGX-capable DC family.
        storage_tier: Managed disk tier supported by the size.
    """

    vm_size: str
    sgx_enabled: bool
    storage_tier: str


def is_sgx_enabled_sku(vm_size: str) -> bool:
    """Determine whether a VM SKU has SGX driver support.

    Args:
        vm_size: VM SKU name (e.g., "Standard_DC2s").

    Returns:
        True if the SKU belongs to one of the SGX-capable DC families.
        False otherwise, including for empty or malformed input.

    Examples:
        >>> is_sgx_enabled_sku("Standard_DC4s")
        True
        >>> is_sgx_enabled_sku("Standard_NC12")
        False
    """
    if not vm_size:
        return False
    return any(pattern.match(vm_size) for pattern in SGX_SKU_FAMILY_PATTERNS)


def get_storage_account_type(vm_size: str) -> str:
    """Return the managed disk storage tier supported by a VM size.

    The capability token (second ``_``-separated token) carries lowercase
    feature flags; an ``s`` flag marks premium storage support.

    Args:
        vm_size: VM size name (e.g., "Standard_DS2_v2").

    Returns:
        "Premium_LRS" for premium-capable sizes, "Standard_LRS" otherwise.

    Raises:
        InvalidVMSizeError: If the size has fewer than two tokens.
    """
    tokens = vm_size.split(VM_SIZE_SEPARATOR)
    if len(tokens) < VM_SIZE_MIN_TOKENS:
        raise InvalidVMSizeError(vm_size)

    capability = tokens[1].lower()
    if any(marker in capability for marker in PREMIUM_STORAGE_CAPABILITY_MARKERS):
        logger.debug("VM size %s supports premium storage", vm_size)
        return PREMIUM_STORAGE_TIER
    return STANDARD_STORAGE_TIER


def get_sku_info(vm_size: str) -> SkuInfo:
    """Classify a VM size for both SGX support and storage tier.

    Raises:
        InvalidVMSizeError: If the storage tier cannot be resolved.
    """
    return SkuInfo(
        vm_size=vm_size,
        sgx_enabled=is_sgx_enabled_sku(vm_size),
        storage_tier=get_storage_account_type(vm_size),
    )
