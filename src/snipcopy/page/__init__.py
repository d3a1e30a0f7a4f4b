from snipcopy.page.document import Document
from snipcopy.page.element import ClassList, Element, Event
from snipcopy.page.loader import load_document, load_document_file
from snipcopy.page.selection import Selection

__all__ = [
    'ClassList',
    'Document',
    'Element',
    'Event',
    'Selection',
    'load_document',
    'load_document_file',
]
