from snipcopy.services.search_index import SearchIndex, build_record, excerpt_from_html
from snipcopy.services.snippet_copier import (
    SelectionClipboardWriter,
    SnippetCopier,
    copy_snippet,
    decode_payload,
    temporary_surface,
)

__all__ = [
    'SearchIndex',
    'SelectionClipboardWriter',
    'SnippetCopier',
    'build_record',
    'copy_snippet',
    'decode_payload',
    'excerpt_from_html',
    'temporary_surface',
]
