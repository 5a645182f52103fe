"""Input forms for adding books and users, lending and searching."""

from __future__ import annotations

from dataclasses import dataclass

YEAR_RANGE = range(0, 2501)
USER_ID_RANGE = range(1, 1001)


class FormError(ValueError):
    """Raised when a form holds input that cannot be accepted."""


@dataclass
class BookForm:
    """Title, author and year of a book to add."""

    title: str = ""
    author: str = ""
    year: int = 1950

    def validate(self) -> BookForm:
        if not self.title.strip() or not self.author.strip():
            raise FormError("Title and Author fields cannot be empty")
        if self.year not in YEAR_RANGE:
            raise FormError(
                f"Year must be between {YEAR_RANGE.start} and {YEAR_RANGE.stop - 1}"
            )
        return self


@dataclass
class UserForm:
    """Name and id of a user to register."""

    name: str = ""
    user_id: int = 1

    def validate(self) -> UserForm:
        if not self.name.strip():
            raise FormError("Name cannot be empty")
        if self.user_id not in USER_ID_RANGE:
            raise FormError("Incorrect ID")
        return self


@dataclass
class LendForm:
    """Title of the book to lend and the id of the borrower."""

    book_title: str = ""
    user_id: int = 1

    def validate(self) -> LendForm:
        if not self.book_title.strip():
            raise FormError("Book Title cannot be empty")
        if self.user_id not in USER_ID_RANGE:
            raise FormError("Incorrect ID")
        return self


@dataclass
class SearchForm:
    """Optional title and author to search for."""

    title: str = ""
    author: str = ""

    def validate(self) -> SearchForm:
        """Both fields are optional, so any input is accepted."""
        return self