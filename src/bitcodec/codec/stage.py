from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence
import importlib
import pkgutil

from .modules._core import OutOfRangeError  # noqa: F401  (re-export)


_OPERATIONS = (
    "extract_all",
    "extract_until",
    "extract_until_unchecked",
    "reconstruct",
    "reconstruct_unchecked",
)


@dataclass(frozen=True)
class Config:
    """
    Codec stage config.

    module: width module name (e.g. "u8", "u64")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "u64"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available width modules under codec/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_width_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_width_module(cfg.module)

    if not hasattr(mod, "Config"):
        raise AttributeError(f"width module '{cfg.module}' missing Config")
    missing = [op for op in _OPERATIONS if not hasattr(mod, op)]
    if missing:
        raise AttributeError(f"width module '{cfg.module}' missing {'/'.join(missing)}")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, module_cfg


# ----------------------------
# Extraction
# ----------------------------

def extract_all(value: Any, *, cfg: Config) -> List[bool]:
    """
    All bits of value, LSB first.
    """
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.extract_all(value, cfg=module_cfg)


def extract_until(value: Any, until: int, *, cfg: Config) -> List[bool]:
    """
    Bits [0, until) of value, LSB first.
    Raises OutOfRangeError if until exceeds the module width.
    """
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.extract_until(value, until, cfg=module_cfg)


def extract_until_unchecked(value: Any, until: int, *, cfg: Config) -> List[bool]:
    """
    As extract_until, without range checks. until > width is undefined.
    """
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.extract_until_unchecked(value, until, cfg=module_cfg)


# ----------------------------
# Reconstruction
# ----------------------------

def reconstruct(bits: Sequence[Any], *, cfg: Config) -> Any:
    """
    LSB-first bits -> integer of the module width. Missing high bits are 0.
    Raises OutOfRangeError if there are more bits than the width.
    """
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.reconstruct(bits, cfg=module_cfg)


def reconstruct_unchecked(bits: Sequence[Any], *, cfg: Config) -> Any:
    """
    As reconstruct, without length checks. len(bits) > width is undefined.
    """
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    return mod.reconstruct_unchecked(bits, cfg=module_cfg)
