"""The library: its books, its users and lending between them."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from booklib.models import Book, User


class BookNotFoundError(LookupError):
    """Raised when no book with the requested title is in the library."""

    def __init__(self, title: str) -> None:
        super().__init__(f'Book "{title}" not found in library')
        self.title = title


class UserNotFoundError(LookupError):
    """Raised when no user with the requested id is registered."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with ID {user_id} not found.")
        self.user_id = user_id


@dataclass
class Library:
    """Books available for lending and the registered users."""

    books: list[Book] = field(default_factory=list)
    users: list[User] = field(default_factory=list)

    def add_book(self, book: Book) -> None:
        self.books.append(book)

    def remove_book(self, title: str) -> None:
        """Remove every book with the given title."""
        self.books = [book for book in self.books if book.title != title]

    def find_book(self, title: str = "", author: str = "") -> Book | None:
        """Return the first book matching the title and author; empty means any."""
        return next(
            (
                book
                for book in self.books
                if (not title or book.title == title)
                and (not author or book.author == author)
            ),
            None,
        )

    def add_user(self, user: User) -> None:
        self.users.append(user)

    def remove_user(self, user_id: int) -> None:
        """Remove every user with the given id."""
        self.users = [user for user in self.users if user.user_id != user_id]

    def lend_book(self, book_title: str, user_id: int) -> User:
        """Move the first book with the title from the shelves to the user.

        Returns the user who received the book.
        """
        index = next(
            (i for i, book in enumerate(self.books) if book.title == book_title),
            None,
        )
        if index is None:
            raise BookNotFoundError(book_title)
        user = next((u for u in self.users if u.user_id == user_id), None)
        if user is None:
            raise UserNotFoundError(user_id)
        user.borrowed_books.append(self.books.pop(index))
        return user

    def display_books(self, file: TextIO | None = None) -> None:
        out = file if file is not None else sys.stdout
        print(f"Library books ({len(self.books)}):", file=out)
        for book in self.books:
            print(book, file=out)

    def display_users(self, file: TextIO | None = None) -> None:
        out = file if file is not None else sys.stdout
        print(f"\nLibrary Users ({len(self.users)} ):", file=out)
        for user in self.users:
            print(user, file=out)
            print(file=out)