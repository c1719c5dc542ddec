"""
models/item.py
--------------
Domain model for catalog items (books, films, etc.).
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from utils.exceptions import ValidationError

MIN_YEAR = 1000
# Upcoming releases may be catalogued up to this many years ahead.
MAX_YEARS_AHEAD = 10


@dataclass
class Item:
    """
    Represents a single catalog entry.

    Attributes:
        id: Database primary key (None until assigned by the database).
        title: Title of the book, film, etc.
        author: Author, director or creator.
        year: Publication or release year.
        genre: Genre or category.
        details: Free-form notes.
    """
    title: str
    author: str
    year: int
    genre: str
    details: str = ""
    id: Optional[int] = None

    def validate(self) -> None:
        """
        Check the fields required for a new item.

        Raises:
            ValidationError: If title, author or genre is blank, or the year
                is outside MIN_YEAR .. current year + MAX_YEARS_AHEAD.
        """
        for label, value in (("Title", self.title), ("Author", self.author),
                             ("Genre", self.genre)):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")

        max_year = date.today().year + MAX_YEARS_AHEAD
        if not MIN_YEAR <= self.year <= max_year:
            raise ValidationError(f"Year must be between {MIN_YEAR} and {max_year}")

    def __str__(self) -> str:
        return f"{self.id} - {self.title} ({self.author}, {self.year}) - {self.genre}"
