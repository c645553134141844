"""Document paths and snapshots for the hierarchical store."""

from dataclasses import dataclass, field

PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class DocumentPath:
    """Path to a document: alternating collection and document ids."""

    segments: tuple[str, ...]

    @classmethod
    def of(cls, *segments: str) -> "DocumentPath":
        """Build a path from collection/document id pairs."""
        if not segments or len(segments) % 2:
            raise ValueError(f"Not a document path: {'/'.join(segments)}")
        return cls(tuple(segments))

    @classmethod
    def parse(cls, raw: str) -> "DocumentPath":
        """Parse a slash-separated document path."""
        return cls.of(*raw.strip(PATH_SEPARATOR).split(PATH_SEPARATOR))

    @property
    def id(self) -> str:
        return self.segments[-1]

    @property
    def collection_id(self) -> str:
        """Id of the collection directly containing the document."""
        return self.segments[-2]

    @property
    def collection_path(self) -> str:
        return PATH_SEPARATOR.join(self.segments[:-1])

    @property
    def parent_document_id(self) -> str | None:
        """Id of the document owning this document's collection, if any."""
        if len(self.segments) < 4:
            return None
        return self.segments[-3]

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(self.segments)


@dataclass(frozen=True)
class StoredDocument:
    """A document read from the store together with its full path."""

    path: DocumentPath
    fields: dict[str, object] = field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.path.id


@dataclass(frozen=True)
class CollectionGroupQuery:
    """Matches documents in any collection named ``collection_id``.

    The match ignores ancestors, so ``users/a/itineraries/x`` and
    ``users/b/itineraries/y`` both belong to the ``itineraries`` group.
    """

    collection_id: str

    def matches(self, path: DocumentPath) -> bool:
        return path.collection_id == self.collection_id
