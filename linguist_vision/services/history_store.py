"""In-memory session history of finished lesson rounds."""

from __future__ import annotations

from linguist_vision.domain.models import HistoryItem, LessonPrompt


class HistoryStore:
    """Most-recent-first list of rounds plus the lesson currently on screen.

    Items are never mutated or removed while the process lives.
    """

    def __init__(self) -> None:
        self._items: list[HistoryItem] = []
        self._lessons: dict[str, LessonPrompt] = {}
        self._current: LessonPrompt | None = None

    def append(self, item: HistoryItem) -> None:
        self._items.insert(0, item)
        self._lessons.setdefault(item.prompt.id, item.prompt)

    def items(self) -> list[HistoryItem]:
        return list(self._items)

    def get(self, item_id: str) -> HistoryItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def register_lesson(self, prompt: LessonPrompt) -> None:
        self._lessons[prompt.id] = prompt
        self._current = prompt

    def get_lesson(self, lesson_id: str) -> LessonPrompt | None:
        return self._lessons.get(lesson_id)

    def select(self, item_id: str) -> HistoryItem | None:
        """Make a past round's prompt the current lesson again."""

        item = self.get(item_id)
        if item is not None:
            self._current = item.prompt
        return item

    @property
    def current(self) -> LessonPrompt | None:
        return self._current

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["HistoryStore"]
