"""Handles the core validation pipeline for pylinkval.

This module runs the format catalog over a value, which includes:
1.  Discovering all available `BaseValidator` implementations.
2.  Filtering them by the enabled/disabled lists in the configuration and,
    optionally, by an explicit set of format kinds.
3.  Running each validator and aggregating the results.
4.  Guessing the format of a value from the detectable validators that
    accept it.
"""

import inspect
import logging
import os
import pkgutil
from typing import Any, Dict, Iterable, List, Optional, Type

from .base_validator import BaseValidator
from .config import Config
from .formats import FormatKind
from .. import validators as validators_package

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def discover_validators() -> List[Type[BaseValidator]]:
    """Discovers all validator classes within the `pylinkval.validators` package.

    This function iterates through the modules in the `validators` package,
    inspects their members, and collects all classes that are subclasses of
    `BaseValidator` (excluding `BaseValidator` itself). The result is
    ordered by `FormatKind` declaration order.

    Returns:
        List[Type[BaseValidator]]: A list of the discovered validator classes.
    """
    validators = []
    path = os.path.dirname(validators_package.__file__)

    for _, name, _ in pkgutil.iter_modules([path]):
        try:
            module = __import__(f"{validators_package.__name__}.{name}", fromlist=["*"])
            for _, item in inspect.getmembers(module, inspect.isclass):
                if issubclass(item, BaseValidator) and item is not BaseValidator and item not in validators:
                    validators.append(item)
        except ImportError as e:
            logger.warning(f"Could not import validator module {name}: {e}")

    order = list(FormatKind)
    validators.sort(key=lambda v: order.index(v.kind) if v.kind else len(order))
    return validators


def get_validator(kind: FormatKind) -> Type[BaseValidator]:
    """Returns the validator class registered for `kind`.

    Raises:
        KeyError: If no validator handles `kind`.
    """
    for validator in discover_validators():
        if validator.kind is kind:
            return validator
    raise KeyError(f"No validator handles {kind.name}")


def validate_format(kind: FormatKind, value: str, **options: Any) -> Any:
    """Runs the bare check of one format.

    Args:
        kind (FormatKind): The format to check.
        value (str): The string to check.
        **options: Format options, e.g. `country` for postal codes.

    Returns:
        Any: A bool verdict, or the 0-4 score for `FormatKind.PASSWORD`.
    """
    return get_validator(kind).check(value, **options)


def validate_value(
    value: str,
    config: Config,
    kinds: Optional[Iterable[FormatKind]] = None,
    **options: Any,
) -> Dict[str, Any]:
    """Runs all enabled validators over one value.

    Args:
        value (str): The string to validate.
        config (Config): The application's configuration object.
        kinds (Optional[Iterable[FormatKind]]): Restricts the run to these
            formats. Kinds named here run even if the configuration disables
            their validator.
        **options: Passed to every validator (e.g. `country`).

    Returns:
        Dict[str, Any]: A dictionary containing the value, the names of the
        formats that accepted it, aggregated warnings and the detailed
        validator outputs.
    """
    logger.info(f"Validating value: {value!r}, kinds: {kinds}")
    wanted = set(kinds) if kinds is not None else None

    enabled_validators = [
        v(value, config, **options)
        for v in discover_validators()
        if (v.kind in wanted if wanted is not None else config.is_validator_enabled(v.name))
    ]
    validator_results = [v.validate() for v in enabled_validators]

    return {
        "value": value,
        "matches": [res["name"] for res in validator_results if res["valid"]],
        "warnings": [warn for res in validator_results if res["valid"] for warn in res["warnings"]],
        "validator_results": validator_results,
    }


def detect_formats(value: str, config: Config) -> List[FormatKind]:
    """Returns the detectable formats that accept `value`, in priority order.

    Scoring and catch-all validators (password strength, generic postal
    codes) are skipped since almost any string satisfies them.
    """
    return [
        v.kind
        for v in discover_validators()
        if v.detectable and v.kind and config.is_validator_enabled(v.name) and v.check(value)
    ]


def detect_format(value: str, config: Config) -> Optional[FormatKind]:
    """Returns the highest-priority format that accepts `value`, or None."""
    formats = detect_formats(value, config)
    return formats[0] if formats else None
