from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Section(str, Enum):
    HOME = "home"
    VOCAB = "vocab"
    GRAMMAR = "grammar"
    QUIZ = "quiz"


class ViewState(BaseModel):
    """Which page is showing and which flashcard is flipped open."""

    section: Section = Section.HOME
    selected_card: Optional[int] = None

    def navigate(self, section: Section) -> None:
        self.section = section
        self.selected_card = None

    def toggle_card(self, card_id: int) -> None:
        self.selected_card = None if self.selected_card == card_id else card_id
