"""An ordered set of named menus for an application menu bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, List


@dataclass
class MenuBarMenu:
    """A menu title and the callback that draws its contents."""

    title: str
    render_ui: Callable[[], object]


@dataclass
class MenuBar:
    """Menus shown in the order they were added."""

    menus: List[MenuBarMenu] = field(default_factory=list)

    def add_menu(self, title: str, render_ui: Callable[[], object]) -> None:
        self.menus.append(MenuBarMenu(title, render_ui))

    def remove_menu(self, title: str) -> None:
        """Remove the first menu with this title; unknown titles are ignored."""
        for index, menu in enumerate(self.menus):
            if menu.title == title:
                del self.menus[index]
                return

    def __iter__(self) -> Iterator[MenuBarMenu]:
        return iter(list(self.menus))

    def __len__(self) -> int:
        return len(self.menus)