"""Centralized terminal formatting utilities for agent-datamodel."""

from colorama import Fore, Style, init
import os
import re

from agent_datamodel.core.constants import PREMIUM_STORAGE_TIER
from agent_datamodel.core.sku import SkuInfo

# autoreset=True means colors reset after each print
init(autoreset=True)


class TerminalColors:
    """Centralized color scheme for consistent terminal output.

    This class provides semantic color mappings and formatting methods
    used by the CLI when reporting validation and classification results.
    """

    # Semantic color mapping for different message types
    ERROR = Fore.RED
    SUCCESS = Fore.GREEN
    RESET = Style.RESET_ALL

    BOLD = Style.BRIGHT

    # Check if colors should be disabled (for CI/CD environments)
    NO_COLOR = os.environ.get("NO_COLOR") is not None

    # Regex pattern to match ANSI escape sequences
    ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        """Remove all ANSI escape sequences from text.

        Args:
            text: Text potentially containing ANSI color codes

        Returns:
            Clean text without any ANSI escape sequences
        """
        return cls.ANSI_ESCAPE_PATTERN.sub("", text)

    @classmethod
    def error(cls, text: str) -> str:
        """Format error text in red."""
        if cls.NO_COLOR:
            return text
        return f"{cls.ERROR}{text}{cls.RESET}"

    @classmethod
    def success(cls, text: str) -> str:
        """Format success text in green."""
        if cls.NO_COLOR:
            return text
        return f"{cls.SUCCESS}{text}{cls.RESET}"

    @classmethod
    def bold(cls, text: str) -> str:
        """Format text in bold."""
        if cls.NO_COLOR:
            return text
        return f"{cls.BOLD}{text}{cls.RESET}"

    @classmethod
    def format_sku_info(cls, info: SkuInfo) -> str:
        """Format a SKU classification as a short multi-line report.

        The storage tier is highlighted green for premium sizes, and SGX
        support is only colored when present.

        Args:
            info: Classification result from get_sku_info().

        Returns:
            Formatted report with ANSI color codes for terminal display
        """
        sgx = cls.success("yes") if info.sgx_enabled else "no"
        if info.storage_tier == PREMIUM_STORAGE_TIER:
            tier = cls.success(info.storage_tier)
        else:
            tier = info.storage_tier

        lines = [
            cls.bold(info.vm_size),
            f"  SGX enabled:  {sgx}",
            f"  Storage tier: {tier}",
        ]
        return "\n".join(lines)


# Single instance for use across the codebase
terminal = TerminalColors()
