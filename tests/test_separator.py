"""Tests for the PATH separator constants.

Every form of the separator is derived from a single byte, so all views
must agree with each other and with the running platform.
"""

import os
import sys

from py_pathenv import separator
from py_pathenv.separator import PlatformFamily, current_family, separator_for


class TestPlatformFamily:
    """Verify the separator chosen for each platform family."""

    def test_posix_uses_colon(self) -> None:
        """POSIX-like systems join entries with ':'."""
        assert separator_for(PlatformFamily.POSIX) == ord(":")

    def test_windows_uses_semicolon(self) -> None:
        """Windows joins entries with ';'."""
        assert separator_for(PlatformFamily.WINDOWS) == ord(";")

    def test_current_family_matches_interpreter(self) -> None:
        """The detected family should follow sys.platform."""
        expected = PlatformFamily.WINDOWS if sys.platform == "win32" else PlatformFamily.POSIX
        assert current_family() is expected


class TestSeparatorViews:
    """Verify the derived views all describe the same byte."""

    def test_byte_matches_family(self) -> None:
        """BYTE should be the separator of the running family."""
        assert separator.BYTE == separator_for(current_family())

    def test_bytes_view(self) -> None:
        """BYTES should be the one-byte form of BYTE."""
        assert separator.BYTES == bytes([separator.BYTE])
        assert len(separator.BYTES) == 1

    def test_char_and_str_views(self) -> None:
        """CHAR and STR should both be the character for BYTE."""
        assert separator.CHAR == chr(separator.BYTE)
        assert separator.STR == separator.CHAR

    def test_os_str_view(self) -> None:
        """OS_STR should encode back to exactly BYTES."""
        assert os.fsencode(separator.OS_STR) == separator.BYTES

    def test_matches_os_pathsep(self) -> None:
        """The separator should agree with the standard library."""
        assert separator.STR == os.pathsep
