"""Books and library users."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Book:
    """A book held by the library."""

    title: str
    author: str
    year: int

    def __str__(self) -> str:
        return f"Title: {self.title}, Author: {self.author}, Year: {self.year}"


@dataclass(eq=False)
class User:
    """A library user together with the books they have borrowed."""

    name: str
    user_id: int
    borrowed_books: list[Book] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"User ID: {self.user_id}, Name: {self.name}"]
        if self.borrowed_books:
            lines.append(" Borrowed books:")
            lines.extend(f"    {book}" for book in self.borrowed_books)
        else:
            lines.append(" No borrowed books.")
        return "\n".join(lines)