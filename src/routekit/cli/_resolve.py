"""Route module loading — importing a module registers its routes."""

import importlib


def load_modules(module_paths: list[str]) -> None:
    """Import every module in *module_paths*.

    Routes register themselves through ``@route`` at import time, so
    importing is all it takes to populate the default registry.

    Raises:
        ModuleNotFoundError: If a module cannot be imported.
    """
    for module_path in module_paths:
        importlib.import_module(module_path)
