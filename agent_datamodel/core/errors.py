# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Typed errors raised by the datamodel helpers.

Every error renders a fixed, human-readable message built from a class-level
template. Callers are expected to surface ``str(error)`` verbatim.
"""

from enum import Enum


class DataModelError(ValueError):
    """Base class for all validation and parsing errors in agent-datamodel."""

    template: str = "{message}"

    def __init__(self, **fields: object) -> None:
        self.fields = fields
        super().__init__(self.template.format(**fields))


class InvalidDNSPrefixError(DataModelError):
    """Raised when a DNS prefix violates the length or character rules."""

    template = (
        "DNSPrefix '{dns_prefix}' is invalid. The DNSPrefix must contain between "
        "3 and 45 characters and can contain only letters, numbers, and hyphens.  "
        "It must start with a letter and must end with a letter or a number. "
        "(length was {length})"
    )

    def __init__(self, dns_prefix: str) -> None:
        self.dns_prefix = dns_prefix
        super().__init__(dns_prefix=dns_prefix, length=len(dns_prefix))


class InvalidVMSizeError(DataModelError):
    """Raised when a VM size does not follow the <tier>_<capability> convention."""

    template = "Invalid sizeName: {vm_size}"

    def __init__(self, vm_size: str) -> None:
        self.vm_size = vm_size
        super().__init__(vm_size=vm_size)


class URLKind(str, Enum):
    """Context a URL was extracted from, used to pick the error message prefix."""

    DOWNLOAD_FILE = "download file image"
    CONTAINER_IMAGE = "container image component"


class InvalidURLError(DataModelError):
    """Raised when a download or container image URL has an unexpected shape."""

    template = "{kind} URL is not in the expected format: {url}"

    def __init__(self, url: str, kind: URLKind) -> None:
        self.url = url
        self.kind = kind
        super().__init__(kind=kind.value, url=url)
