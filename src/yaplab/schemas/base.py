"""
Base Schema Classes

This module provides base classes for request and response schemas with
common serialization and deserialization methods to avoid code duplication.

Python attributes use snake_case while the HTTP API speaks camelCase JSON,
so field names are converted on the way in and out.
"""

import json
from dataclasses import MISSING, asdict, fields
from typing import Any, Dict, TypeVar

T = TypeVar("T", bound="BaseResponse")


def to_camel(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase wire key."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class BaseRequest:
    """
    Base class for request schemas.

    Provides common serialization methods for converting request objects
    to dictionary and JSON formats.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary keyed by camelCase wire names.
        """
        return {to_camel(key): value for key, value in asdict(self).items()}

    def to_json(self) -> str:
        """
        Convert to JSON string.

        Returns:
            JSON string representation of the request.
        """
        return json.dumps(self.to_dict())

    @property
    def endpoint(self) -> str:
        """
        API path the request is posted to.

        Should be overridden by subclasses to provide the specific path.
        """
        raise NotImplementedError("Subclasses must define endpoint")


class BaseResponse:
    """
    Base class for response schemas.

    Provides common deserialization methods for creating response objects
    from dictionary and JSON formats.
    """

    @classmethod
    def from_dict(cls: type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from dictionary.

        Args:
            data: Dictionary containing response data.

        Returns:
            Instance of the response class.

        Raises:
            ValueError: If data is not a mapping or a required key is missing
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"{cls.__name__} expects an object, got {type(data).__name__}"
            )
        try:
            return cls._from_data(data)
        except KeyError as e:
            raise ValueError(f"{cls.__name__} missing field {e}") from e

    @classmethod
    def from_json(cls: type[T], json_str: str) -> T:
        """
        Create instance from JSON string.

        Args:
            json_str: JSON string containing response data.

        Returns:
            Instance of the response class.
        """
        data = json.loads(json_str)
        return cls.from_dict(data)

    @classmethod
    def _from_data(cls: type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from response data dictionary.

        Picks out the camelCase keys matching the dataclass fields and
        ignores the rest. Subclasses override this for required keys or
        nested objects.

        Args:
            data: Dictionary containing response data.

        Returns:
            Instance of the response class.
        """
        kwargs = {}
        for f in fields(cls):
            key = to_camel(f.name)
            if key in data:
                kwargs[f.name] = data[key]
            elif f.default is MISSING and f.default_factory is MISSING:
                raise KeyError(key)
        return cls(**kwargs)
