"""Operations behind the main window, independent of any widget toolkit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, TypeVar

from booklib.details import details, search_result
from booklib.forms import BookForm, LendForm, SearchForm, UserForm
from booklib.library import Library
from booklib.models import Book, User

_T = TypeVar("_T")


def _at(items: Sequence[_T], row: int) -> _T:
    if not 0 <= row < len(items):
        raise IndexError(f"row {row} is out of range")
    return items[row]


@dataclass
class LibraryController:
    """Applies the user's requests from forms and table rows to a library."""

    library: Library = field(default_factory=Library)

    def add_book(self, form: BookForm) -> Book:
        form.validate()
        book = Book(form.title, form.author, form.year)
        self.library.add_book(book)
        return book

    def delete_book(self, row: int) -> str:
        """Remove every book titled like the one in the row; return the title."""
        title = _at(self.library.books, row).title
        self.library.remove_book(title)
        return title

    def search(self, form: SearchForm) -> str:
        """Return the text describing the first matching book, if any."""
        form.validate()
        return search_result(self.library.find_book(form.title, form.author))

    def add_user(self, form: UserForm) -> User:
        form.validate()
        user = User(form.name, form.user_id)
        self.library.add_user(user)
        return user

    def delete_user(self, row: int) -> int:
        """Remove every user with the id shown in the row; return the id."""
        user_id = _at(self.library.users, row).user_id
        self.library.remove_user(user_id)
        return user_id

    def lend_book(self, form: LendForm) -> User:
        """Lend the book; raises BookNotFoundError or UserNotFoundError."""
        form.validate()
        return self.library.lend_book(form.book_title, form.user_id)

    def book_rows(self) -> list[tuple[str, str, str]]:
        return [(book.title, book.author, str(book.year)) for book in self.library.books]

    def user_rows(self) -> list[tuple[str, str]]:
        return [(str(user.user_id), user.name) for user in self.library.users]

    def book_details(self, row: int) -> str:
        return details(book=_at(self.library.books, row))

    def user_details(self, row: int) -> str:
        return details(user=_at(self.library.users, row))