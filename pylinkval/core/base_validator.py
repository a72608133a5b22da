"""
Base validator class that all format checks inherit from.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, TYPE_CHECKING

from .formats import FormatKind

if TYPE_CHECKING:
    from .config import Config


class BaseValidator(ABC):
    """Abstract base class for all format validators.

    Each validator wraps one of the pure `validate_*` functions and reports
    its verdict with supporting details, so the pipeline in
    `pylinkval.core.validator` can run a list of different checks over the
    same value polymorphically.

    Attributes:
        name (str): The display name of the validator.
        category (str): A category for grouping validators (e.g., "Network").
        description (str): A brief explanation of what the validator checks.
        kind (Optional[FormatKind]): The catalog entry this validator tags.
        detectable (bool): Whether a match is evidence that a value *is* of
            this format. Scores and catch-all grammars are not.
    """

    name: str = "UnnamedValidator"
    category: str = "General"
    description: str = "No description provided"
    kind: Optional[FormatKind] = None
    detectable: bool = True

    def __init__(self, value: str, config: "Config", **options: Any) -> None:
        """Initializes the validator with the value and configuration.

        Args:
            value (str): The string to validate.
            config (Config): The application's configuration object.
            **options: Validator-specific options (e.g. `country` for
                postal codes). Unknown options are ignored.
        """
        self.value = value
        self.config = config
        self.options = options
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.info: Dict[str, Any] = {}

    def validate(self) -> Dict[str, Any]:
        """Performs the validation check and returns the results.

        Unexpected exceptions from `_validate` are recorded as an error of
        this validator, so one faulty check does not stop the others.

        Returns:
            Dict[str, Any]: A dictionary containing the validation results.
        """
        try:
            self._validate()
        except Exception as e:
            self.add_error(f"Validator {self.name} failed: {str(e)}")
        return self.result()

    @classmethod
    @abstractmethod
    def check(cls, value: str, **options: Any) -> Any:
        """Runs the bare predicate (or score) of this format.

        Returns:
            Any: A bool verdict, or an int score for scoring validators.
        """
        raise NotImplementedError("Subclasses must implement check()")

    @abstractmethod
    def _validate(self) -> None:
        """Abstract method for implementing the core validation logic.

        Subclasses record a rejected value with `add_error`, soft concerns
        with `add_warning` and details with `add_info`.
        """
        raise NotImplementedError("Subclasses must implement _validate()")

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def result(self) -> Dict[str, Any]:
        """Returns the validation results in a standardized dictionary format.

        Returns:
            Dict[str, Any]: A dictionary containing the validator's name,
            category, description, format kind, verdict and findings.
        """
        return {
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "kind": self.kind.value if self.kind else None,
            "valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
            "info": self.info,
        }

    def add_error(self, message: str) -> None:
        """Adds an error message; any error means the value is rejected.

        Args:
            message (str): The error message to add.
        """
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        """Adds a warning message.

        A warning flags something worth a second look in a value that is
        otherwise accepted.

        Args:
            message (str): The warning message to add.
        """
        self.warnings.append(message)

    def add_info(self, key: str, value: Any) -> None:
        """Adds informational data to the validation results.

        Args:
            key (str): The key for the informational data.
            value (Any): The value of the informational data.
        """
        self.info[key] = value

    def get_option(self, option: str, default: Any = None) -> Any:
        """Reads an option, falling back to this validator's config section.

        Options given at construction win over `validators.<name>.<option>`
        in the configuration.

        Args:
            option (str): The option name.
            default (Any): The value to return if neither source sets it.

        Returns:
            Any: The option value or the default.
        """
        if self.options.get(option) is not None:
            return self.options[option]
        return self.config.get(f"validators.{self.name}.{option}", default)
