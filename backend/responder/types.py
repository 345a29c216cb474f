"""Shapes of the open mappings carried by an envelope."""
from __future__ import annotations

from typing import Any, Union

ErrorObject = dict[str, Any]
MetaObject = dict[str, Any]
HeadersObject = dict[str, Union[str, list[str]]]
