"""Tests for the runtime version gate."""

import importlib

import pytest

import nragent
from nragent import runtime
from nragent.exceptions import FatalStartupError
from nragent.runtime import verify_runtime_version

MISSING_MODULE = "nragent_no_such_capability"


class TestVerifyRuntimeVersion:
    """Tests for verify_runtime_version."""

    def test_current_interpreter_passes(self) -> None:
        verify_runtime_version()

    def test_capability_marker_overrides_version(self) -> None:
        """A present marker module accepts even an old version string."""
        verify_runtime_version(version_info=(3, 8, 0), capability="json")

    def test_supported_version_without_marker(self) -> None:
        verify_runtime_version(version_info=(3, 11, 0), capability=MISSING_MODULE)
        verify_runtime_version(version_info=(4, 0, 0), capability=MISSING_MODULE)

    def test_old_version_without_marker_fails(self) -> None:
        with pytest.raises(FatalStartupError, match="Python 3.11 required") as exc_info:
            verify_runtime_version(version_info=(3, 10, 12), capability=MISSING_MODULE)
        assert "found 3.10.12" in exc_info.value.message

    def test_empty_marker_checks_version_only(self) -> None:
        with pytest.raises(FatalStartupError):
            verify_runtime_version(version_info=(2, 7, 18), capability="")

    def test_default_marker_read_at_call_time(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(runtime, "CAPABILITY_MARKER", MISSING_MODULE)
        with pytest.raises(FatalStartupError):
            verify_runtime_version(version_info=(3, 10, 0))


class TestPackageImportGate:
    """The package refuses to import on an unsupported interpreter."""

    def test_import_runs_gate(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(runtime, "MINIMUM_PYTHON", (99, 0))
        monkeypatch.setattr(runtime, "CAPABILITY_MARKER", MISSING_MODULE)

        with pytest.raises(FatalStartupError, match="Python 99.0 required"):
            importlib.reload(nragent)

    def test_import_passes_on_current_interpreter(self) -> None:
        assert importlib.reload(nragent).run is not None
