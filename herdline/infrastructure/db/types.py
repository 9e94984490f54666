from __future__ import annotations

import json

from sqlalchemy import String, Text, TypeDecorator
from sqlalchemy.dialects.postgresql import ARRAY


class ListOf(TypeDecorator):
    """Stores a list as ARRAY in PostgreSQL, JSON text elsewhere (SQLite)."""

    impl = Text
    cache_ok = True

    def __init__(self, item_type=String, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.item_type = item_type

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(ARRAY(self.item_type))
        return dialect.type_descriptor(Text())

    def process_bind_param(self, value, dialect):
        if value is None:
            value = []
        if dialect.name == "postgresql":
            return list(value)
        return json.dumps(list(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return []
        if dialect.name == "postgresql":
            return list(value)
        return json.loads(value) if value else []
