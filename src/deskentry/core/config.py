#!/usr/bin/env python3
"""
DESKENTRY CONFIG - Parser Limits & Settings
-------------------------------------------
Holds the knobs the parser used to bury in fixed-size buffers: the key and
value caps, the required file suffix and the keys the Loader cares about.
An optional YAML settings file can override any of them.

Author: DeskEntry Team
Date: 2026-10-19
"""

import codecs
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ruamel.yaml import YAML, YAMLError

logger = logging.getLogger("deskentry.config")


@dataclass(frozen=True)
class ParserConfig:
    """
    Explicit parser constants.

    Keys longer than `max_key_length` are truncated there and the rest of the
    line is reported as a syntax error. Values longer than `max_value_length`
    are truncated and the rest of the physical line is discarded; a multi-byte
    character cut by the cap is dropped whole.
    """
    max_key_length: int = 63
    max_value_length: int = 255
    suffix: str = ".desktop"
    recognized_keys: Tuple[str, ...] = ("Name", "Comment", "Exec")
    required_keys: Tuple[str, ...] = ("Name", "Exec")
    encoding: str = "utf-8"

    def __post_init__(self):
        if self.max_key_length < 1:
            raise ValueError(f"max_key_length must be positive, got {self.max_key_length}")
        if self.max_value_length < 1:
            raise ValueError(f"max_value_length must be positive, got {self.max_value_length}")
        missing = [k for k in self.required_keys if k not in self.recognized_keys]
        if missing:
            raise ValueError(f"Required keys are not recognized keys: {', '.join(missing)}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding '{self.encoding}'")


DEFAULT_CONFIG = ParserConfig()


def _coerce(name: str, value: Any) -> Any:
    """Normalizes YAML scalars/sequences into the dataclass field types."""
    if name in ("recognized_keys", "required_keys"):
        if isinstance(value, str):
            return (value,)
        return tuple(str(v) for v in value)
    if name in ("max_key_length", "max_value_length"):
        return int(value)
    return str(value)


def load_config(path: Optional[Union[str, Path]] = None,
                base: ParserConfig = DEFAULT_CONFIG) -> ParserConfig:
    """
    Overlays a YAML settings file onto `base`.

    Args:
        path: Location of the settings file. None returns `base` untouched.
        base: The configuration to start from.
    """
    if path is None:
        return base

    settings_path = Path(path)
    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            data = YAML(typ='safe').load(f)
    except (OSError, YAMLError) as e:
        logger.error(f"Unable to load settings from {settings_path}")
        raise RuntimeError(f"Failed to load config: {str(e)}")

    if data is None:
        return base
    if not isinstance(data, dict):
        raise RuntimeError(f"Failed to load config: {settings_path} is not a mapping")

    known = {f.name for f in fields(ParserConfig)}
    overrides: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown setting '{key}' in {settings_path}")
            continue
        try:
            overrides[key] = _coerce(key, value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid value for '{key}' in {settings_path}: {value!r}")

    return replace(base, **overrides)
