"""Search predicates: one predicate per active SearchRequest field, combined by match mode"""

from typing import Callable

from docstore.core.models import Document, SearchRequest


Predicate = Callable[[Document], bool]

MATCH_ANY = "any"
MATCH_ALL = "all"


def _by_author(author_ids: list[str]) -> Predicate:
    return lambda doc: doc.author is not None and doc.author.id in author_ids


def _by_title_prefix(prefixes: list[str]) -> Predicate:
    return lambda doc: doc.title is not None and any(doc.title.startswith(p) for p in prefixes)


def _by_content(substrings: list[str]) -> Predicate:
    return lambda doc: doc.content is not None and any(s in doc.content for s in substrings)


def _by_created_window(start, end) -> Predicate:
    return lambda doc: doc.created is not None and start < doc.created < end


def build_predicates(request: SearchRequest) -> list[Predicate]:
    """Return the predicates activated by request.

    List fields activate when non-empty. The created window activates only
    when both bounds are set; both bounds are exclusive.
    """
    predicates: list[Predicate] = []
    if request.author_ids:
        predicates.append(_by_author(request.author_ids))
    if request.title_prefixes:
        predicates.append(_by_title_prefix(request.title_prefixes))
    if request.contains_contents:
        predicates.append(_by_content(request.contains_contents))
    if request.created_from is not None and request.created_to is not None:
        predicates.append(_by_created_window(request.created_from, request.created_to))
    return predicates


def matches(doc: Document, predicates: list[Predicate], mode: str = MATCH_ANY) -> bool:
    """Combine predicates for doc.

    'any' is true when at least one predicate holds, so no predicates means no match.
    'all' is true when every predicate holds, so no predicates means a match.
    """
    if mode == MATCH_ANY:
        return any(p(doc) for p in predicates)
    if mode == MATCH_ALL:
        return all(p(doc) for p in predicates)
    raise ValueError(f"Unknown match mode: {mode!r}")
