"""Unit tests for native binary discovery."""

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from msdf_atlasgen.config import LocatorConfig
from msdf_atlasgen.core.locator import PACKAGE_DIR, BinaryLocator, PlatformInfo
from msdf_atlasgen.exceptions import BinaryNotFoundError, UnsupportedPlatformError


def _install(base_dir: Path, rid: str, name: str) -> Path:
    native_dir = base_dir / "runtimes" / rid / "native"
    native_dir.mkdir(parents=True)
    binary = native_dir / name
    binary.write_bytes(b"")
    return binary


class TestPlatformInfo:
    """Tests for PlatformInfo."""

    @patch("msdf_atlasgen.core.locator.platform.system", return_value="Linux")
    def test_current_defaults_to_package_dir(self, _mock_system):  # noqa: ARG002
        """Test current() reads the platform and defaults to the package dir."""
        info = PlatformInfo.current()
        assert info.system == "Linux"
        assert info.base_dir == PACKAGE_DIR

    def test_current_with_base_dir(self, tmp_path):
        """Test current() honours an explicit base directory."""
        assert PlatformInfo.current(tmp_path).base_dir == tmp_path

    def test_is_windows(self, tmp_path):
        """Test is_windows property."""
        assert PlatformInfo("Windows", tmp_path).is_windows
        assert not PlatformInfo("Linux", tmp_path).is_windows


class TestBinaryLocator:
    """Tests for BinaryLocator."""

    def test_linux_path(self, tmp_path):
        """Test Linux resolves to linux-x64 without an extension."""
        binary = _install(tmp_path, "linux-x64", "msdf-atlas-gen")
        locator = BinaryLocator(PlatformInfo("Linux", tmp_path))

        located = locator.locate()

        assert located == binary.absolute()
        assert located.is_absolute()

    def test_windows_path(self, tmp_path):
        """Test Windows resolves to win-x64 with .exe."""
        binary = _install(tmp_path, "win-x64", "msdf-atlas-gen.exe")
        locator = BinaryLocator(PlatformInfo("Windows", tmp_path))

        assert locator.locate() == binary.absolute()

    @pytest.mark.parametrize("system", ["Darwin", "FreeBSD", ""])
    def test_unsupported_platform(self, tmp_path, system):
        """Test other platforms raise UnsupportedPlatformError."""
        locator = BinaryLocator(PlatformInfo(system, tmp_path))
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            locator.locate()
        assert exc_info.value.system == system

    def test_missing_binary(self, tmp_path):
        """Test an absent executable raises BinaryNotFoundError."""
        locator = BinaryLocator(PlatformInfo("Linux", tmp_path))
        with pytest.raises(BinaryNotFoundError) as exc_info:
            locator.locate()
        expected = tmp_path / "runtimes" / "linux-x64" / "native" / "msdf-atlas-gen"
        assert exc_info.value.path == str(expected.absolute())

    def test_binary_path_override(self, tmp_path):
        """Test an explicit binary path skips platform discovery."""
        binary = tmp_path / "custom-tool"
        binary.write_bytes(b"")
        locator = BinaryLocator(
            PlatformInfo("Darwin", tmp_path),
            LocatorConfig(binary_path=binary),
        )

        assert locator.locate() == binary.absolute()

    def test_binary_path_override_missing(self, tmp_path):
        """Test a missing explicit binary still raises BinaryNotFoundError."""
        locator = BinaryLocator(
            PlatformInfo("Linux", tmp_path),
            LocatorConfig(binary_path=tmp_path / "nope"),
        )
        with pytest.raises(BinaryNotFoundError):
            locator.locate()

    def test_base_dir_from_config(self, tmp_path):
        """Test LocatorConfig.base_dir feeds the default PlatformInfo."""
        locator = BinaryLocator(config=LocatorConfig(base_dir=tmp_path))
        assert locator.platform_info.base_dir == tmp_path

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_marks_binary_executable(self, tmp_path):
        """Test execute bits are added on non-Windows platforms."""
        binary = _install(tmp_path, "linux-x64", "msdf-atlas-gen")
        binary.chmod(0o644)

        BinaryLocator(PlatformInfo("Linux", tmp_path)).locate()

        assert binary.stat().st_mode & stat.S_IXUSR

    def test_chmod_failure_is_swallowed(self, tmp_path):
        """Test a failing chmod does not prevent locating the binary."""
        binary = _install(tmp_path, "linux-x64", "msdf-atlas-gen")

        with patch(
            "msdf_atlasgen.core.locator.os.chmod",
            side_effect=PermissionError("read-only filesystem"),
        ) as mock_chmod:
            located = BinaryLocator(PlatformInfo("Linux", tmp_path)).locate()

        mock_chmod.assert_called_once()
        assert located == binary.absolute()

    def test_no_chmod_on_windows(self, tmp_path):
        """Test Windows never attempts to change permissions."""
        _install(tmp_path, "win-x64", "msdf-atlas-gen.exe")

        with patch("msdf_atlasgen.core.locator.os.chmod") as mock_chmod:
            BinaryLocator(PlatformInfo("Windows", tmp_path)).locate()

        mock_chmod.assert_not_called()
