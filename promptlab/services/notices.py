"""
Blocking user-visible notices.

The UI shell decides how to show them (modal, toast); the core only records
them in order.
"""

from typing import List, Optional

from loguru import logger as log
from pydantic import BaseModel


class Notice(BaseModel):
    message: str
    source: str


class NoticeBoard:
    def __init__(self):
        self.notices: List[Notice] = []

    def notify(self, message: str, source: str = "app") -> Notice:
        notice = Notice(message=message, source=source)
        self.notices.append(notice)
        log.info(f"Notice from {source}: {message}")
        return notice

    def current(self) -> Optional[Notice]:
        """The notice on screen: the oldest one not yet dismissed."""
        return self.notices[0] if self.notices else None

    def latest(self) -> Optional[Notice]:
        return self.notices[-1] if self.notices else None

    def dismiss(self) -> Optional[Notice]:
        """Drop the oldest pending notice."""
        if not self.notices:
            return None
        return self.notices.pop(0)

    def clear(self) -> None:
        self.notices.clear()

    def __len__(self) -> int:
        return len(self.notices)
