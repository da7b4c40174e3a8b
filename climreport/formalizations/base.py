"""Abstract base class for markup formalizations."""

from abc import ABC, abstractmethod


class Formalization(ABC):
    """Renders a report's caption and item list into one markup dialect.

    The four operations are independent and stateless; the report
    orchestrator calls them in caption, begin, items, end order and
    concatenates the results.
    """

    @abstractmethod
    def make_caption(self, caption: str) -> str: ...

    @abstractmethod
    def begin_list(self) -> str: ...

    @abstractmethod
    def make_item(self, label: str, value_text: str) -> str: ...

    @abstractmethod
    def end_list(self) -> str: ...

    @classmethod
    def name(cls) -> str:
        return cls.__name__
