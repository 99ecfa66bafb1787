"""Native msdf-atlas-gen executable discovery.

The executable ships beside the package under
``runtimes/<rid>/native/<binary>``. Platform and base directory are read
through PlatformInfo so tests can substitute deterministic values.
"""

import os
import platform
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

import structlog

from msdf_atlasgen.config import LocatorConfig
from msdf_atlasgen.exceptions import BinaryNotFoundError, UnsupportedPlatformError

logger = structlog.get_logger(__name__)

BINARY_NAME = "msdf-atlas-gen"
PACKAGE_DIR = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class PlatformInfo:
    """Ambient platform facts used for binary discovery.

    Attributes:
        system: Operating system name as returned by platform.system()
        base_dir: Directory containing the runtimes/ tree
    """

    system: str
    base_dir: Path

    @classmethod
    def current(cls, base_dir: Path | None = None) -> "PlatformInfo":
        """Describe the running interpreter's platform."""
        return cls(system=platform.system(), base_dir=base_dir or PACKAGE_DIR)

    @property
    def is_windows(self) -> bool:
        return self.system == "Windows"


class BinaryLocator:
    """Resolves the msdf-atlas-gen executable for a platform.

    Example:
        locator = BinaryLocator(PlatformInfo.current())
        binary = locator.locate()
    """

    RUNTIME_IDS: ClassVar[dict[str, str]] = {
        "Windows": "win-x64",
        "Linux": "linux-x64",
    }

    def __init__(
        self,
        platform_info: PlatformInfo | None = None,
        config: LocatorConfig | None = None,
    ) -> None:
        """Initialize the locator.

        Args:
            platform_info: Platform to resolve for (current platform if None)
            config: Locator settings; an explicit binary_path skips discovery
        """
        self.config = config or LocatorConfig()
        self.platform_info = platform_info or PlatformInfo.current(self.config.base_dir)

    def runtime_id(self) -> str:
        """Return the runtime identifier for the platform.

        Raises:
            UnsupportedPlatformError: If the platform is neither Windows nor Linux
        """
        try:
            return self.RUNTIME_IDS[self.platform_info.system]
        except KeyError:
            raise UnsupportedPlatformError(self.platform_info.system) from None

    def binary_name(self) -> str:
        return f"{BINARY_NAME}.exe" if self.platform_info.is_windows else BINARY_NAME

    def expected_path(self) -> Path:
        """Compute where the executable should be, without checking it exists."""
        if self.config.binary_path is not None:
            return self.config.binary_path.absolute()

        rid = self.runtime_id()
        return (
            self.platform_info.base_dir / "runtimes" / rid / "native" / self.binary_name()
        ).absolute()

    def locate(self) -> Path:
        """Return the absolute path of the executable.

        Raises:
            UnsupportedPlatformError: If the platform is not supported
            BinaryNotFoundError: If no file exists at the computed path
        """
        binary_path = self.expected_path()

        if not binary_path.is_file():
            raise BinaryNotFoundError(str(binary_path))

        if not self.platform_info.is_windows:
            self._ensure_executable(binary_path)

        logger.debug("Located msdf-atlas-gen", path=str(binary_path))
        return binary_path

    def _ensure_executable(self, binary_path: Path) -> None:
        """Try to add execute permission; failures are logged, not raised.

        If the binary really cannot be executed, launching it fails later
        with ToolLaunchError.
        """
        try:
            mode = binary_path.stat().st_mode
            os.chmod(binary_path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as e:
            logger.warning(
                "Could not mark binary executable",
                path=str(binary_path),
                error=str(e),
            )
