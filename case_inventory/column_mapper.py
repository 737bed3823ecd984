"""
Resolves free-form spreadsheet headers onto the catalog's canonical fields.

Matching is substring based: a header maps to the first canonical field
(in alias-table order) that has an alias contained in the normalized header.
"""
import logging
import re
import unicodedata
from typing import Callable, Iterable, Mapping, Optional, Sequence

from .schemas import CanonicalField

logger = logging.getLogger(__name__)

ColumnMapping = dict[str, CanonicalField]

_DISALLOWED_CHARS = re.compile(r"[^\w\s]")


def _normalize_header(raw: str) -> str:
    """Lowercases, trims, drops punctuation and folds accents ('Preço' -> 'preco')."""
    text = _DISALLOWED_CHARS.sub("", str(raw).lower().strip())
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _contains_any(aliases: Iterable[str]) -> Callable[[str], bool]:
    folded = tuple(_normalize_header(alias) for alias in aliases)
    return lambda header: any(alias in header for alias in folded)


class ColumnMapper:
    def __init__(
        self, aliases: Sequence[tuple[CanonicalField, Iterable[str]]]
    ) -> None:
        # Explicit ordered (field, predicate) pairs keep resolution deterministic.
        self._rules: tuple[tuple[CanonicalField, Callable[[str], bool]], ...] = tuple(
            (field, _contains_any(field_aliases)) for field, field_aliases in aliases
        )

    def match(self, header: str) -> Optional[CanonicalField]:
        normalized = _normalize_header(header)
        for field, predicate in self._rules:
            if predicate(normalized):
                return field
        return None

    def resolve(self, headers: Sequence[str]) -> ColumnMapping:
        """
        Builds a header -> canonical field mapping. Headers that match no alias
        are left out. When two headers detect the same field, the first one
        keeps it so a field is never fed by more than one column.
        """
        mapping: ColumnMapping = {}
        claimed: set[CanonicalField] = set()

        for header in headers:
            field = self.match(header)
            if field is None:
                logger.debug(f"  > Ignoring unmapped column '{header}'")
                continue
            if field in claimed:
                logger.debug(
                    f"  > Column '{header}' also matches '{field.value}', already taken."
                )
                continue
            mapping[header] = field
            claimed.add(field)

        return mapping

    @staticmethod
    def assign(
        mapping: Mapping[str, CanonicalField],
        header: str,
        field: Optional[CanonicalField],
    ) -> ColumnMapping:
        """
        Manual override. Returns a new mapping where `header` feeds `field`;
        any other header holding `field` is evicted. `field=None` unmaps `header`.
        """
        updated = dict(mapping)
        if field is None:
            updated.pop(header, None)
            return updated

        for other, held in mapping.items():
            if held == field and other != header:
                del updated[other]
        updated[header] = field
        return updated
