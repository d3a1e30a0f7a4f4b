import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

import ulid

logger = logging.getLogger(__name__)

Listener = Callable[["Event"], Any]


class Event:
    """Dispatched event; ``target`` is the element the event fired on."""

    def __init__(self, type: str, target: "Element"):
        self.type = type
        self.target = target
        self.current_target: Optional["Element"] = None


class ClassList:
    def __init__(self, element: "Element"):
        self._element = element

    def _tokens(self) -> List[str]:
        return (self._element.get_attribute("class") or "").split()

    def _store(self, tokens: List[str]) -> None:
        if tokens:
            self._element.set_attribute("class", " ".join(tokens))
        else:
            self._element.remove_attribute("class")

    def add(self, *names: str) -> None:
        tokens = self._tokens()
        for name in names:
            if name not in tokens:
                tokens.append(name)
        self._store(tokens)

    def remove(self, *names: str) -> None:
        self._store([t for t in self._tokens() if t not in names])

    def contains(self, name: str) -> bool:
        return name in self._tokens()

    def toggle(self, name: str) -> bool:
        if self.contains(name):
            self.remove(name)
            return False
        self.add(name)
        return True

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens())


class Element:

    def __init__(self, tag: str, attributes: Optional[Dict[str, str]] = None, text: str = ""):
        self.tag = tag.lower()
        self.attributes: Dict[str, str] = dict(attributes or {})
        self.children: List["Element"] = []
        self.parent: Optional["Element"] = None
        self.owner_document: Any = None
        self.element_id = str(ulid.new())
        self._text = text
        self._listeners: Dict[str, List[Listener]] = {}

    def __repr__(self) -> str:
        return f"<Element {self.tag} id={self.element_id} class={self.get_attribute('class')!r}>"

    # attributes

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    @property
    def class_list(self) -> ClassList:
        return ClassList(self)

    # text

    @property
    def text_content(self) -> str:
        return self._text + "".join(child.text_content for child in self.children)

    @text_content.setter
    def text_content(self, value: str) -> None:
        for child in list(self.children):
            self.remove_child(child)
        self._text = value

    # tree

    def append_child(self, child: "Element") -> "Element":
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: "Element") -> "Element":
        if child.parent is not self:
            raise ValueError(f"{child!r} is not a child of {self!r}")
        self.children.remove(child)
        child.parent = None
        return child

    def iter_descendants(self) -> Iterator["Element"]:
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    # events

    def add_event_listener(self, type: str, listener: Listener) -> None:
        self._listeners.setdefault(type, []).append(listener)

    def listeners(self, type: str) -> List[Listener]:
        return list(self._listeners.get(type, []))

    def dispatch_event(self, event: Event) -> None:
        # Listener errors propagate to the dispatcher; remaining listeners
        # on this element do not run.
        event.current_target = self
        for listener in self.listeners(event.type):
            listener(event)

    def click(self) -> None:
        logger.debug(f"click {self!r}")
        self.dispatch_event(Event("click", self))
