import glob
import logging
import os
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import ValidationError

from .content import CORE_VOCABULARY, GRAMMAR_POINTS
from .models import GrammarPoint, VocabularyEntry

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("term", "reading", "translation")


class VocabularyManager:
    """Manages loading and accessing vocabulary decks."""

    def __init__(self, directory: str, builtin_deck: str = "core"):
        self.directory = directory
        self.builtin_deck = builtin_deck
        self.decks: Dict[str, List[VocabularyEntry]] = {}
        self.load_all()

    def load_all(self):
        self.decks = {self.builtin_deck: list(CORE_VOCABULARY)}
        if not os.path.isdir(self.directory):
            logger.info(f"No vocabulary directory at {self.directory}, using built-in deck")
            return

        csv_files = sorted(glob.glob(os.path.join(self.directory, "*.csv")))
        for file_path in csv_files:
            deck_name = os.path.splitext(os.path.basename(file_path))[0]
            if deck_name == self.builtin_deck:
                logger.error(f"Skipping {file_path}: '{deck_name}' is reserved")
                continue
            try:
                entries = self._read_deck(file_path)
            except (OSError, ValueError, ValidationError) as e:
                logger.error(f"Failed to load {file_path}: {e}")
                continue
            self.decks[deck_name] = entries
            logger.info(f"Loaded {len(entries)} words from {deck_name}")

    @staticmethod
    def _read_deck(file_path: str) -> List[VocabularyEntry]:
        df = pd.read_csv(file_path, encoding="utf-8", dtype=str)
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"missing columns {', '.join(missing)}")

        df = df.fillna("")
        if "id" not in df.columns:
            df["id"] = [str(i) for i in range(1, len(df) + 1)]
        if "category" not in df.columns:
            df["category"] = ""
        df["id"] = df["id"].astype(int)
        if df["id"].duplicated().any():
            raise ValueError("duplicate ids")

        return [
            VocabularyEntry(
                id=int(row["id"]),
                term=row["term"],
                reading=row["reading"],
                translation=row["translation"],
                category=row["category"],
            )
            for row in df.to_dict("records")
        ]

    def has_deck(self, deck: str) -> bool:
        return deck in self.decks

    def get_entries(self, deck: str) -> List[VocabularyEntry]:
        return self.decks.get(deck, [])

    def get_entry(self, deck: str, entry_id: int) -> Optional[VocabularyEntry]:
        for entry in self.get_entries(deck):
            if entry.id == entry_id:
                return entry
        return None

    def get_categories(self, deck: str) -> List[str]:
        return sorted({e.category for e in self.get_entries(deck) if e.category})

    def get_decks(self) -> List[Dict[str, Any]]:
        decks = []
        for key, entries in self.decks.items():
            display_name = key.replace("_", " ").title()
            decks.append({"id": key, "name": display_name, "count": len(entries)})
        decks.sort(key=lambda x: x["name"])
        return decks

    def get_grammar(self) -> List[GrammarPoint]:
        return list(GRAMMAR_POINTS)
