"""Application service: Show Menu use case (query)."""

from __future__ import annotations

from rms.domain.model.menu import MenuComponent


class ShowMenuHandler:

    def __init__(self, menu: MenuComponent) -> None:
        self._menu = menu

    def handle(self) -> list[str]:
        return list(self._menu.display())
