"""Text descriptions of books, users and search results."""

from __future__ import annotations

from booklib.models import Book, User


def book_details(book: Book) -> str:
    return (
        "Book Details:\n"
        f"Title: {book.title}\n"
        f"Author: {book.author}\n"
        f"Year: {book.year}\n\n"
    )


def user_details(user: User) -> str:
    text = f"User Details:\nID: {user.user_id}\nName: {user.name}"
    if user.borrowed_books:
        text += "\nBorrowed Books:\n"
        text += "".join(
            f"{book.title}, {book.author}, {book.year}\n"
            for book in user.borrowed_books
        )
    else:
        text += "\nNo borrowed books.\n"
    return text


def details(book: Book | None = None, user: User | None = None) -> str:
    """Describe the book, the user, or both, in that order."""
    text = ""
    if book is not None:
        text += book_details(book)
    if user is not None:
        text += user_details(user)
    return text


def search_result(book: Book | None) -> str:
    if book is None:
        return "Book not found"
    return (
        "Found Book:\n"
        f"Title: {book.title}\n"
        f"Author: {book.author}\n"
        f"Year: {book.year}"
    )