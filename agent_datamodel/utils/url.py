# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""URL parsing utilities for agent-datamodel.

This module derives human-readable component names from the download URLs
and container image references listed in component manifests. Only the
textual shape of the URL is inspected; nothing is resolved over the network.
"""

import logging
from urllib.parse import urlparse

from agent_datamodel.core.constants import (
    CONTAINER_IMAGE_DIGEST_SEPARATOR,
    CONTAINER_IMAGE_TAG_SEPARATOR,
)
from agent_datamodel.core.errors import InvalidURLError, URLKind

logger = logging.getLogger(__name__)


def get_component_name_from_url(download_url: str) -> str:
    """Extract the component name from a download file URL.

    The component name is the first segment of the URL path.

    Args:
        download_url: A download URL
            (e.g., "https://acs-mirror.azureedge.net/cni-plugins/v*/binaries").

    Returns:
        The component name (e.g., "cni-plugins").

    Raises:
        InvalidURLError: If the URL cannot be parsed or has no first path segment.

    Examples:
        get_component_name_from_url("https://acs-mirror.azureedge.net/cni-plugins/v*/binaries")
        # Returns: 'cni-plugins'
    """
    try:
        path = urlparse(download_url).path
    except ValueError as e:
        raise InvalidURLError(download_url, URLKind.DOWNLOAD_FILE) from e

    # "/cni-plugins/v*/binaries" -> ["", "cni-plugins", "v*", "binaries"]
    segments = path.split("/")
    if len(segments) < 2 or not segments[1]:
        raise InvalidURLError(download_url, URLKind.DOWNLOAD_FILE)

    logger.debug("Resolved component name %s from %s", segments[1], download_url)
    return segments[1]


def get_container_image_name_from_url(download_url: str) -> str:
    """Extract the image name from a container image reference.

    The image name is the last path segment with its tag or digest removed.

    Args:
        download_url: A container image reference
            (e.g., "mcr.microsoft.com/oss/kubernetes/autoscaler/addon-resizer:*").

    Returns:
        The image name (e.g., "addon-resizer").

    Raises:
        InvalidURLError: If the reference has no image name in its last segment.
    """
    last_segment = download_url.split("/")[-1]
    image_name = last_segment.partition(CONTAINER_IMAGE_DIGEST_SEPARATOR)[0]
    image_name = image_name.partition(CONTAINER_IMAGE_TAG_SEPARATOR)[0]
    if not image_name:
        raise InvalidURLError(download_url, URLKind.CONTAINER_IMAGE)

    logger.debug("Resolved container image name %s from %s", image_name, download_url)
    return image_name
