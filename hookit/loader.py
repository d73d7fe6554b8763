"""Wire hook points and plugins from configuration data.

Plugins are plain modules exposing a function (``register_hooks`` by
default) that receives a registerer bound to the plugin's origin::

    def register_hooks(register):
        register("routes", add_health_route)
"""

import importlib
import logging
import sys
from typing import Any, Callable, Optional

from .config import HookitConfig
from .errors import HookConfigError, HookError, HookExistsError
from .manager import HookManager

logger = logging.getLogger(__name__)

DEFAULT_PLUGIN_ENTRY = "register_hooks"


def resolve_callable(reference: str) -> Callable[..., Any]:
    """Import ``"package.module:attr"`` and return the callable it names.

    Raises:
        HookConfigError: If the reference is malformed, cannot be imported,
            or does not name a callable
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise HookConfigError(f"Invalid reference '{reference}', expected 'module:attr'")

    try:
        target: Any = importlib.import_module(module_name)
    except Exception as e:
        raise HookConfigError(f"Cannot import '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise HookConfigError(f"'{module_name}' has no attribute '{attr_path}'") from e

    if not callable(target):
        raise HookConfigError(f"'{reference}' is not callable")
    return target


def load_hook_points_from_config(
    manager: HookManager,
    hooks_data: list[dict[str, Any]],
) -> list[str]:
    """Register the hook points described by a list of config dicts.

    Each dict should have:
        name: str (required)
        sync: bool (optional, default False)
        resolver: str (optional) - "module:attr" reference

    Entries without a name are skipped. Duplicate names and bad resolver
    references raise.

    Returns:
        Names of the registered hook points, in order.
    """
    registered = []

    for entry in hooks_data:
        if not isinstance(entry, dict) or not entry.get("name"):
            logger.warning("Skipping invalid hook entry: %r", entry)
            continue

        name = str(entry["name"])
        resolver = None
        if entry.get("resolver"):
            try:
                resolver = resolve_callable(str(entry["resolver"]))
            except HookConfigError as e:
                raise HookConfigError(f"Hook {name}: {e}", hook=name) from e

        manager.register(name, bool(entry.get("sync", False)), resolver)
        registered.append(name)

    return registered


def load_plugin(
    manager: HookManager,
    module_name: str,
    origin: Optional[str] = None,
    entry: str = DEFAULT_PLUGIN_ENTRY,
) -> str:
    """Import a plugin module and let it attach its handlers.

    Returns:
        The origin the plugin's handlers were registered under.
    """
    origin = origin or module_name
    register_hooks = resolve_callable(f"{module_name}:{entry}")
    try:
        register_hooks(manager.create_registerer(origin))
    except HookError:
        raise
    except Exception as e:
        raise HookConfigError(f"Plugin {module_name} failed to register: {e}") from e
    logger.debug("Loaded plugin %s as %s", module_name, origin)
    return origin


def load_plugins_from_config(
    manager: HookManager,
    plugins_data: list[dict[str, Any]],
) -> list[str]:
    """Load every enabled plugin described by a list of config dicts.

    Each dict should have:
        module: str (required)
        entry: str (optional, default "register_hooks")
        origin: str (optional, default the module name)
        enabled: bool (optional, default True)

    Returns:
        Origins of the loaded plugins, in order.
    """
    loaded = []

    for entry in plugins_data:
        if not isinstance(entry, dict) or not entry.get("module"):
            logger.warning("Skipping invalid plugin entry: %r", entry)
            continue
        if not entry.get("enabled", True):
            logger.debug("Plugin %s is disabled", entry["module"])
            continue

        loaded.append(load_plugin(
            manager,
            str(entry["module"]),
            origin=entry.get("origin") or None,
            entry=entry.get("entry") or DEFAULT_PLUGIN_ENTRY,
        ))

    return loaded


def add_config_dir_to_path(config: HookitConfig) -> str:
    """Make modules next to the config file importable.

    Returns:
        The directory that is now on ``sys.path``.
    """
    config_dir = str(config.config_path.resolve().parent)
    if config_dir not in sys.path:
        sys.path.insert(0, config_dir)
        logger.debug("Added %s to sys.path", config_dir)
    return config_dir


def build_manager(config: HookitConfig) -> HookManager:
    """Build a HookManager from a config: hook points first, then plugins.

    Plugin and resolver modules are imported relative to the config file's
    directory as well as the regular ``sys.path``.
    """
    add_config_dir_to_path(config)
    manager = HookManager()
    try:
        load_hook_points_from_config(manager, config.get_hooks_config())
    except HookExistsError as e:
        raise HookConfigError(f"Duplicate hook in {config.config_path}: {e.hook}", hook=e.hook) from e
    load_plugins_from_config(manager, config.get_plugins_config())
    return manager
