"""Tests for directory name validation."""

import pytest

from dirpick.models import NameFailure
from dirpick.validator import (
    is_reserved_device_name,
    is_windows,
    validate_name,
)

PLATFORMS = ["linux", "darwin", "win32"]


class TestIsWindows:
    def test_win32(self):
        assert is_windows("win32")

    def test_posix_platforms(self):
        assert not is_windows("linux")
        assert not is_windows("darwin")
        assert not is_windows("cygwin")


class TestEmptyNames:
    @pytest.mark.parametrize("name", ["", "   ", "\t", None])
    def test_rejects_empty(self, name):
        result = validate_name(name, "linux")
        assert not result.accepted
        assert result.failure_reason == NameFailure.EMPTY
        assert result.canonical_name is None


class TestSeparators:
    @pytest.mark.parametrize("platform", PLATFORMS)
    @pytest.mark.parametrize("name", ["a/b", "a\\b", "/", "\\", "trailing/"])
    def test_rejects_separators_everywhere(self, name, platform):
        """Separators are invalid on every platform."""
        result = validate_name(name, platform)
        assert not result.accepted
        assert result.failure_reason == NameFailure.INVALID_CHARACTERS


class TestInvalidCharacters:
    @pytest.mark.parametrize("name", ["a<b", "a>b", "a:b", 'a"b', "a|b", "a?b", "a*b", "a\x01b"])
    def test_windows_rejects(self, name):
        result = validate_name(name, "win32")
        assert result.failure_reason == NameFailure.INVALID_CHARACTERS

    @pytest.mark.parametrize("name", ["a<b", "a:b", "what?", "star*"])
    def test_posix_allows_windows_only_characters(self, name):
        result = validate_name(name, "linux")
        assert result.accepted

    def test_posix_rejects_nul(self):
        result = validate_name("a\0b", "linux")
        assert result.failure_reason == NameFailure.INVALID_CHARACTERS


class TestReservedReferences:
    @pytest.mark.parametrize("platform", PLATFORMS)
    @pytest.mark.parametrize("name", [".", "..", "  ..  "])
    def test_rejects_dot_names(self, name, platform):
        result = validate_name(name, platform)
        assert result.failure_reason == NameFailure.RESERVED_REFERENCE

    def test_allows_hidden_folder_names(self):
        assert validate_name(".config", "linux").accepted


class TestReservedDeviceNames:
    @pytest.mark.parametrize("name", ["CON", "con", "con.", "con ", "Con..", "PRN", "AUX", "NUL"])
    def test_windows_rejects_device_names(self, name):
        result = validate_name(name, "win32")
        assert not result.accepted
        assert result.failure_reason == NameFailure.RESERVED_DEVICE_NAME

    @pytest.mark.parametrize("name", ["COM1", "com9", "LPT1", "lpt9"])
    def test_windows_rejects_ports(self, name):
        assert validate_name(name, "win32").failure_reason == NameFailure.RESERVED_DEVICE_NAME

    @pytest.mark.parametrize("name", ["con.txt", "aux.tar.gz", "NUL .old", "com1.backup"])
    def test_windows_rejects_device_prefixes(self, name):
        """A device name followed by a dot or space is still the device."""
        assert validate_name(name, "win32").failure_reason == NameFailure.RESERVED_DEVICE_NAME

    @pytest.mark.parametrize("name", ["con:", "LPT1:stream", "aux:"])
    def test_windows_device_with_colon_reports_device(self, name):
        """The colon is invalid too, but the device name is the reported reason."""
        assert validate_name(name, "win32").failure_reason == NameFailure.RESERVED_DEVICE_NAME

    @pytest.mark.parametrize("name", ["CONSOLE", "COM10", "COM0", "LPT", "icon", "auxiliary"])
    def test_windows_allows_lookalikes(self, name):
        assert validate_name(name, "win32").accepted

    @pytest.mark.parametrize("platform", ["linux", "darwin"])
    @pytest.mark.parametrize("name", ["CON", "COM1", "nul", "lpt1", "con.txt"])
    def test_posix_allows_device_names(self, name, platform):
        """Device names only mean something on Windows."""
        result = validate_name(name, platform)
        assert result.accepted
        assert result.canonical_name == name

    def test_helper(self):
        assert is_reserved_device_name("con.")
        assert is_reserved_device_name("LPT3 ")
        assert not is_reserved_device_name("console")


class TestAccepted:
    def test_trims_whitespace_and_keeps_case(self):
        result = validate_name("  My Project  ", "linux")
        assert result.accepted
        assert result.canonical_name == "My Project"
        assert result.failure_reason is None

    def test_unicode_names(self):
        assert validate_name("Données 2024", "win32").canonical_name == "Données 2024"

    def test_message_mentions_name(self):
        result = validate_name("reports", "linux")
        assert "reports" in result.message

    def test_rejection_message(self):
        result = validate_name("a/b", "linux")
        assert "invalid characters" in result.message

    def test_defaults_to_host_platform(self):
        assert validate_name("plain-name").accepted
