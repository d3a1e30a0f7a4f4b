from snipcopy.models.post import PostRecord
from snipcopy.models.snippet import ButtonState, SnippetButton

__all__ = ['ButtonState', 'PostRecord', 'SnippetButton']
