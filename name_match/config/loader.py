"""
Configuration loading for name matching ensembles.

Reads YAML files of the form::

    ensemble:
      equal_weight: true
      matchers:
        - kind: jaro_winkler
          weight: 0.5
          similarity_threshold: 0.7
        - kind: soundex_jaccard
"""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Mapping, Union
import yaml

from name_match.config.models import (
    EnsembleConfig,
    JaroWinklerConfig,
    MatcherKind,
    MatcherSpec
)

logger = logging.getLogger(__name__)

OPTION_TYPES = {f.name: f.type for f in fields(JaroWinklerConfig)}
ENSEMBLE_TYPES = {f.name: f.type for f in fields(EnsembleConfig) if f.name != 'matchers'}


def get_default_ensemble_config() -> EnsembleConfig:
    """
    Get the default ensemble configuration.

    Returns:
        EnsembleConfig: Jaro-Winkler, Soundex-Jaccard and Jaccard matchers
        with equal weights
    """
    return EnsembleConfig(
        matchers=[
            MatcherSpec(MatcherKind.JARO_WINKLER, options=JaroWinklerConfig()),
            MatcherSpec(MatcherKind.SOUNDEX_JACCARD),
            MatcherSpec(MatcherKind.JACCARD)
        ],
        equal_weight=True
    )


def _coerce(name: str, value: Any, target: type) -> Any:
    """Convert a configuration value to the type of its field."""
    if target is bool or isinstance(value, bool):
        if target is not bool or not isinstance(value, bool):
            raise ValueError(f"Invalid value for {name}: {value!r}")
        return value

    try:
        coerced = target(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value for {name}: {value!r}") from None

    # int() truncates floats such as 2.5
    if target is int and coerced != float(value):
        raise ValueError(f"Invalid value for {name}: {value!r}")
    return coerced


def _parse_matcher(entry: Any) -> MatcherSpec:
    if not isinstance(entry, Mapping) or 'kind' not in entry:
        raise ValueError(f"Matcher entry must be a mapping with a 'kind': {entry!r}")

    entry = dict(entry)
    try:
        kind = MatcherKind(entry.pop('kind'))
    except ValueError as e:
        raise ValueError(f"Unknown matcher type in configuration: {e}") from None

    weight = _coerce('weight', entry.pop('weight', 1.0), float)

    unknown = set(entry) - OPTION_TYPES.keys()
    if unknown:
        raise ValueError(f"Unknown options for {kind.value} matcher: {sorted(unknown)}")

    options = None
    if kind is MatcherKind.JARO_WINKLER:
        options = JaroWinklerConfig(**{
            key: _coerce(key, value, OPTION_TYPES[key]) for key, value in entry.items()
        })
    elif entry:
        raise ValueError(f"Matcher type {kind.value} does not accept options: {sorted(entry)}")

    return MatcherSpec(kind=kind, weight=weight, options=options)


def parse_ensemble_config(config: Mapping[str, Any]) -> EnsembleConfig:
    """
    Build an ensemble configuration from a mapping.

    Accepts either the full document or the contents of its ``ensemble``
    section.

    Args:
        config: Parsed configuration mapping

    Returns:
        EnsembleConfig: Validated configuration

    Raises:
        ValueError: If the mapping is malformed
    """
    section = config.get('ensemble', config)
    if not isinstance(section, Mapping):
        raise ValueError("Ensemble configuration must be a mapping")

    matchers = section.get('matchers')
    if not isinstance(matchers, list) or not matchers:
        raise ValueError("Ensemble configuration requires a non-empty 'matchers' list")

    settings: Dict[str, Any] = {
        key: _coerce(key, section[key], target)
        for key, target in ENSEMBLE_TYPES.items() if key in section
    }
    unknown = set(section) - ENSEMBLE_TYPES.keys() - {'matchers'}
    if unknown:
        raise ValueError(f"Unknown ensemble settings: {sorted(unknown)}")

    return EnsembleConfig(
        matchers=[_parse_matcher(entry) for entry in matchers],
        **settings
    )


def load_ensemble_config(config_path: Union[str, Path]) -> EnsembleConfig:
    """
    Load an ensemble configuration from a YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        EnsembleConfig: Parsed configuration, or the default configuration if
        the file does not exist

    Raises:
        ValueError: If the file content is malformed
        yaml.YAMLError: If the file is not valid YAML
    """
    config_file = Path(config_path)
    if not config_file.exists():
        logger.warning(f"Configuration file {config_path} not found, using defaults")
        return get_default_ensemble_config()

    with open(config_file, 'r') as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, Mapping):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")

    ensemble_config = parse_ensemble_config(config)
    logger.info(
        f"Loaded ensemble configuration with {len(ensemble_config.matchers)} "
        f"matchers from {config_path}"
    )
    return ensemble_config
