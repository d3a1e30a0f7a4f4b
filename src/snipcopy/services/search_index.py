import json
import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from bs4 import BeautifulSoup
from pydantic import ValidationError

from snipcopy.errors import StoreFormatError
from snipcopy.models.post import PostRecord

logger = logging.getLogger(__name__)

STORE_PREFIX_RE = re.compile(r"^\s*var\s+store\s*=\s*", re.DOTALL)
WS_RE = re.compile(r"\s+")
DEFAULT_EXCERPT_WORDS = 50


def excerpt_from_html(content: str, words: int = DEFAULT_EXCERPT_WORDS) -> str:
    """Plain-text teaser of ``content``: tags stripped, whitespace collapsed,
    cut to ``words`` words with ``...`` appended when cut."""
    text = BeautifulSoup(content, "html.parser").get_text(" ")
    tokens = WS_RE.sub(" ", text).strip().split(" ")
    tokens = [t for t in tokens if t]
    if len(tokens) <= words:
        return " ".join(tokens)
    return " ".join(tokens[:words]) + "..."


def build_record(
    title: str,
    content: str,
    url: str,
    categories: Sequence[str] = (),
    tags: Sequence[str] = (),
    teaser: Optional[str] = None,
    excerpt_words: int = DEFAULT_EXCERPT_WORDS,
) -> PostRecord:
    return PostRecord(
        title=title,
        excerpt=excerpt_from_html(content, excerpt_words),
        categories=list(categories),
        tags=list(tags),
        url=url,
        teaser=teaser,
    )


class SearchIndex:
    """Ordered collection of post records backing the site search."""

    def __init__(self, records: Iterable[PostRecord] = ()):
        self.records: List[PostRecord] = list(records)

    def __iter__(self) -> Iterator[PostRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SearchIndex):
            return NotImplemented
        return self.records == other.records

    def append(self, record: PostRecord) -> None:
        self.records.append(record)

    # ------------------------------------------------------------------
    # parsing / serialization
    # ------------------------------------------------------------------
    @classmethod
    def loads(cls, text: str) -> "SearchIndex":
        body = STORE_PREFIX_RE.sub("", text, count=1).strip()
        if body.endswith(";"):
            body = body[:-1].rstrip()

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise StoreFormatError(f"store is not a JSON array: {e}") from e

        if not isinstance(data, list):
            raise StoreFormatError(f"store must be an array, got {type(data).__name__}")

        records = []
        for position, entry in enumerate(data):
            try:
                records.append(PostRecord.model_validate(entry))
            except ValidationError as e:
                raise StoreFormatError(f"record {position} is invalid: {e}") from e

        logger.debug(f"Loaded {len(records)} search records")
        return cls(records)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "SearchIndex":
        return cls.loads(Path(path).read_text(encoding="utf-8"))

    def to_list(self) -> List[dict]:
        return [record.model_dump() for record in self.records]

    def dumps(self, js: bool = True, indent: Optional[int] = 2) -> str:
        body = json.dumps(self.to_list(), indent=indent, ensure_ascii=False)
        if js:
            return f"var store = {body}\n"
        return body + "\n"

    def dump(self, path: Union[str, Path], js: bool = True) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.dumps(js=js), encoding="utf-8")
        logger.info(f"Wrote {len(self.records)} search records to {path}")

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------
    def filter(self, category: Optional[str] = None, tag: Optional[str] = None) -> "SearchIndex":
        records = self.records
        if category is not None:
            records = [r for r in records if category in r.categories]
        if tag is not None:
            records = [r for r in records if tag in r.tags]
        return SearchIndex(records)

    def categories(self) -> List[str]:
        return sorted({c for r in self.records for c in r.categories})

    def tags(self) -> List[str]:
        return sorted({t for r in self.records for t in r.tags})
