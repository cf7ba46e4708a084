"""Core components shared across the agent-datamodel helpers."""

from agent_datamodel.core.constants import (
    # Storage tiers
    PREMIUM_STORAGE_TIER,
    STANDARD_STORAGE_TIER,
)
from agent_datamodel.core.errors import (
    DataModelError,
    InvalidDNSPrefixError,
    InvalidURLError,
    InvalidVMSizeError,
    URLKind,
)
from agent_datamodel.core.sku import (
    SkuInfo,
    get_sku_info,
    get_storage_account_type,
    is_sgx_enabled_sku,
)

__all__ = [
    # Constants
    "PREMIUM_STORAGE_TIER",
    "STANDARD_STORAGE_TIER",
    # Errors
    "DataModelError",
    "InvalidDNSPrefixError",
    "InvalidURLError",
    "InvalidVMSizeError",
    "URLKind",
    # SKU classification
    "SkuInfo",
    "get_sku_info",
    "get_storage_account_type",
    "is_sgx_enabled_sku",
]
