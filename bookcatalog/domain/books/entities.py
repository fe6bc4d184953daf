"""
Domain entities for the books bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any

# Fields a partial update may change. The isbn is the record's identity
# and is never part of this list.
MUTABLE_FIELDS: tuple[str, ...] = (
    "amazon_url",
    "author",
    "language",
    "pages",
    "publisher",
    "title",
    "year",
)


@dataclass(frozen=True)
class Book:
    """A catalogue entry identified by its ISBN.

    The ISBN is an opaque string supplied by the client; no checksum
    validation is performed.
    """

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Book":
        """Build a Book from a mapping holding (at least) every field."""
        return cls(**{f.name: data[f.name] for f in fields(cls)})

    def merged_with(self, changes: dict[str, Any]) -> "Book":
        """Return a copy with the supplied mutable fields replaced.

        Keys outside MUTABLE_FIELDS (including ``isbn``) are ignored, so
        a partial update can never rename a record.
        """
        updates = {name: changes[name] for name in MUTABLE_FIELDS if name in changes}
        return replace(self, **updates)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
