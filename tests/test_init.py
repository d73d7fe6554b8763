"""Tests for the package export surface."""

import hookit
from hookit.manager import HookManager


def test_exports_hook_manager():
    assert hookit.HookManager is HookManager
    assert isinstance(hookit.HookManager(), HookManager)


def test_exports_error_codes():
    assert hookit.ENOHOOK == hookit.NoHookError.code == "ENOHOOK"
    assert hookit.EHOOKEXISTS == hookit.HookExistsError.code == "EHOOKEXISTS"
    assert issubclass(hookit.NoHookError, hookit.HookError)
    assert issubclass(hookit.HookExistsError, hookit.HookError)


def test_all_names_resolve():
    for name in hookit.__all__:
        assert hasattr(hookit, name), name


def test_version():
    assert hookit.__version__ == "0.1.0"
