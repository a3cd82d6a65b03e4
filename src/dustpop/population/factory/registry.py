import importlib
import pkgutil
import os

_registry = {}

def register(name):
    def decorator(cls_or_fn):
        _registry[name] = cls_or_fn
        return cls_or_fn
    return decorator


def discover_dust_mix_types():
    """Discover all dust mix factories in the factory/ submodule."""
    types_pkg = __package__
    types_path = os.path.dirname(__file__)

    modules = {}
    for _, module_name, _ in pkgutil.iter_modules([types_path]):
        if module_name.startswith("_") or module_name == "registry":
            continue
        modules[module_name] = importlib.import_module(f"{types_pkg}.{module_name}")

    # decorator-registered names first, module-level build() as fallback
    dust_mix_types = dict(_registry)
    for module_name, module in modules.items():
        if module_name not in dust_mix_types and hasattr(module, "build"):
            dust_mix_types[module_name] = module.build
    return dust_mix_types
