from abc import ABC, abstractmethod


class Page(ABC):
    """A page selectable from the sidebar."""

    @abstractmethod
    def render(self):
        pass
