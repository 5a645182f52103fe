"""Console walkthrough of the library followed by the main window."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from booklib.library import Library
from booklib.models import Book, User


def _out(file: TextIO | None) -> TextIO:
    return file if file is not None else sys.stdout


def print_book(book: Book | None, file: TextIO | None = None) -> None:
    """Print a book with a heading; print nothing for no book."""
    if book is None:
        return
    out = _out(file)
    print(" Book Info:", file=out)
    print(book, file=out)
    print(file=out)


def create_and_print_unique_book(file: TextIO | None = None) -> None:
    print_book(Book("1984", "George Orwell", 1949), file)


def _classic_library() -> Library:
    library = Library()
    library.add_book(Book("Pride and Prejudice", "Jane Austen", 1813))
    library.add_book(Book("Moby-Dick", "Herman Melville", 1851))
    library.add_book(Book("War and Peace", "Leo Tolstoy", 1869))
    return library


def demonstration2(file: TextIO | None = None) -> None:
    _classic_library().display_books(_out(file))


def demonstration3(file: TextIO | None = None) -> None:
    out = _out(file)
    book = _classic_library().find_book("War and Peace", "Leo Tolstoy")
    if book is not None:
        print("\nFound book:", file=out)
        print(book, file=out)
    else:
        print("\nBook not found", file=out)


def demonstration4(file: TextIO | None = None) -> None:
    out = _out(file)
    library = Library()
    library.add_book(Book("The Great Gatsby", "F. Scott Fitzgerald", 1925))
    library.add_book(Book("1984", "George Orwell", 1949))
    library.add_book(Book("To Kill a Mockingbird", "Harper Lee", 1960))
    library.display_books(out)

    library.add_user(User("Liza", 1))
    library.add_user(User("Max", 2))
    print("\nUsers:", file=out)
    library.display_users(out)

    for title, user_id in (("1984", 1), ("The Great Gatsby", 2), ("Non Book", 1)):
        try:
            user = library.lend_book(title, user_id)
        except LookupError as exc:
            print(exc, file=out)
        else:
            print(f'Lending book "{title}" to user "{user.name}".', file=out)

    print("\nLibrary books after lending:", file=out)
    library.display_books(out)
    print("\nUsers after lending:", file=out)
    library.display_users(out)


def demonstration5(file: TextIO | None = None) -> None:
    out = _out(file)
    library = Library()
    library.add_book(Book("Brave New World", "Aldous Huxley", 1932))
    library.add_book(Book("Fahrenheit 451", "Ray Bradbury", 1953))
    library.display_books(out)
    library.add_user(User("Kate", 3))
    library.add_user(User("Diana", 4))
    library.display_users(out)


def run_demonstrations(file: TextIO | None = None) -> None:
    out = _out(file)
    print("Part 1: Printing a single book", file=out)
    create_and_print_unique_book(out)
    print("\nPart 2: A library of books", file=out)
    demonstration2(out)
    print("\nPart 3: Searching for a book", file=out)
    demonstration3(out)
    print("\nPart 4: User class and Book Lending Demonstration", file=out)
    demonstration4(out)
    print("\nPart 5: Books and users together", file=out)
    demonstration5(out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="booklib", description="Print the library walkthrough, then open the window."
    )
    parser.add_argument(
        "--no-gui", action="store_true", help="only print the walkthrough"
    )
    args = parser.parse_args(argv)
    run_demonstrations()
    if not args.no_gui:
        from booklib.gui import run

        run()
    return 0


if __name__ == "__main__":
    sys.exit(main())