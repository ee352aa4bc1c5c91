"""Parser for the ``name:type`` field-list mini-language.

``"title, count:number, active:boolean"`` becomes three ``FieldDescriptor``
entries in declaration order.  A segment without a type defaults to
``"string"``; type names are passed through verbatim because they are
host-language specific.
"""

from __future__ import annotations

from typing import Optional

from .errors import InvalidFieldError
from .models import FieldDescriptor

DEFAULT_FIELD_TYPE = "string"


def parse_fields(text: Optional[str]) -> list[FieldDescriptor]:
    """Parse a comma-separated field list.

    Args:
        text: Raw field list, e.g. ``"title, views:number"``.  ``None`` or a
            blank string yields an empty list.

    Returns:
        Field descriptors in the order they were declared.

    Raises:
        InvalidFieldError: If any segment has an empty name (this includes
            empty segments such as the one in ``"a,,b"``).
    """
    if text is None or not text.strip():
        return []

    fields: list[FieldDescriptor] = []
    for position, segment in enumerate(text.split(","), start=1):
        name, sep, type_ = segment.strip().partition(":")
        name = name.strip()
        if not name:
            raise InvalidFieldError(segment, position)
        type_ = type_.strip() if sep else ""
        fields.append(FieldDescriptor(name=name, type=type_ or DEFAULT_FIELD_TYPE))
    return fields
