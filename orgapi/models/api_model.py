"""
Base dataclass for the read-only API models.
"""

import json
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Dict

from orgapi.errors import MarshalFailure


def is_empty(value) -> bool:
    return value is None or value == "" or value == [] or value == {}


@dataclass(kw_only=True)
class ApiModel:
    """
    A base dataclass for models exposed over the API.

    Field metadata drives serialisation:
        alias       name of the key on the wire (defaults to the field name)
        omit_empty  drop the key when the value is None, "" or an empty list
    """

    def _convert_value(self, value):
        """Helper to convert a single value for as_dict."""
        if is_dataclass(value) and hasattr(value, 'as_dict'):
            return value.as_dict()
        return value

    def _convert_list_value(self, value):
        """Helper to convert list values for as_dict."""
        return [self._convert_value(item) for item in value]

    def as_dict(self) -> Dict[str, Any]:
        """
        Convert this model to a JSON-ready dictionary, keyed by wire names in field order.
        """
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get('omit_empty') and is_empty(value):
                continue
            key = f.metadata.get('alias', f.name)
            if isinstance(value, (list, tuple)):
                result[key] = self._convert_list_value(value)
            else:
                result[key] = self._convert_value(value)
        return result

    def to_json(self) -> str:
        """
        Serialise this model to compact JSON.

        Raises:
            MarshalFailure: when a value cannot be encoded.
        """
        try:
            return json.dumps(self.as_dict(), separators=(',', ':'), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise MarshalFailure(f"{type(self).__name__} could not be marshalled, err={e}") from e
