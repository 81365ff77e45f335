"""Dict-backed document store: upsert with id assignment, predicate search, id lookup"""

import logging
import re
import threading
from dataclasses import dataclass, field

from docstore.config import Settings
from docstore.core.filters import MATCH_ALL, MATCH_ANY, build_predicates, matches
from docstore.core.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo
from docstore.errors import InvalidArgumentError


logger = logging.getLogger(__name__)

ID_ADVANCE = "advance"
ID_PRESERVE = "preserve"

_ID_RE = re.compile(r"[0-9]+")


def parse_id(value) -> int | None:
    """Return value as a positive int, or None if it is not a string of ASCII digits above zero."""
    if not isinstance(value, str) or not _ID_RE.fullmatch(value):
        return None
    n = int(value)
    return n if n > 0 else None


@dataclass
class MemoryRepo(DocumentRepo):
    """In-process store owning a map of int id -> Document and the next auto id.

    id_policy 'advance' raises the counter past any explicitly supplied id;
    'preserve' leaves it untouched. match_mode selects OR ('any') or AND
    ('all') combination of search predicates.
    """
    id_policy:  str = ID_ADVANCE
    match_mode: str = MATCH_ANY
    _docs:    dict[int, Document] = field(default_factory=dict)
    _next_id: int = 1
    _lock:    threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self):
        if self.id_policy not in (ID_ADVANCE, ID_PRESERVE):
            raise ValueError(f"Unknown id policy: {self.id_policy!r}")
        if self.match_mode not in (MATCH_ANY, MATCH_ALL):
            raise ValueError(f"Unknown match mode: {self.match_mode!r}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "MemoryRepo":
        return cls(id_policy=settings.id_policy, match_mode=settings.match_mode)

    def __len__(self) -> int:
        return len(self._docs)

    @property
    def next_id(self) -> int:
        """The id the next id-less save will receive."""
        return self._next_id

    def save(self, document: Document) -> Document:
        if document is None:
            raise InvalidArgumentError("document must not be null")

        with self._lock:
            if document.id is None:
                key = self._next_id
                document.id = str(key)
                self._next_id += 1
                logger.debug("Assigned id %s", key)
            else:
                key = parse_id(document.id)
                if key is None:
                    raise InvalidArgumentError(f"document id must be a positive integer, got {document.id!r}")
                if self.id_policy == ID_ADVANCE and self._next_id <= key:
                    self._next_id = key + 1
                    logger.debug("Advanced id counter to %s", self._next_id)
            self._docs[key] = document
        return document

    def search(self, request: SearchRequest) -> list[Document]:
        if request is None:
            raise InvalidArgumentError("search request must not be null")

        predicates = build_predicates(request)
        with self._lock:
            docs = list(self._docs.values())
        found = [d for d in docs if matches(d, predicates, self.match_mode)]
        logger.debug("Search with %d active filter(s) matched %d of %d document(s)",
                     len(predicates), len(found), len(docs))
        return found

    def find_by_id(self, id: str) -> Document | None:
        key = parse_id(id)
        if key is None:
            return None
        with self._lock:
            if key not in self._docs:
                return None
            return self._docs[key]
