# booklib

A small lending library. It keeps a catalogue of books and a list of
users, and lends books to users. A book that is lent leaves the
catalogue and goes into the user's borrowed books.

## Installing

    pip install .

The window is built with Tk (`tkinter`), which must be available in
your Python installation. There are no other dependencies.

## Running

    booklib

This prints a walkthrough of the library at work (printing a book,
listing books, searching for a book, registering users and lending books
to them) and then opens the library window.

    booklib --no-gui

prints the walkthrough only.

In the window, the left table lists the books on the shelves and the
right table lists the users. The "Books" menu adds, deletes, searches
for and lends books; the "Users" menu adds and deletes users. Deleting
acts on the selected row. Double-clicking a row shows the details of
that book or user, including the books a user has borrowed.

## Using the library from Python

```python
from booklib.models import Book, User
from booklib.library import Library, BookNotFoundError

lib = Library()
lib.add_book(Book("1984", "George Orwell", 1949))
lib.add_book(Book("The Great Gatsby", "F. Scott Fitzgerald", 1925))
lib.add_user(User("Liza", 1))

# An empty title or author matches any.
print(lib.find_book("", "George Orwell"))

user = lib.lend_book("1984", 1)
print(user.borrowed_books)

try:
    lib.lend_book("Non Book", 1)
except BookNotFoundError as exc:
    print(exc)  # Book "Non Book" not found in library

lib.display_books()
lib.display_users()
```

- `Library.find_book(title, author)` returns the first matching `Book`,
  or `None`.
- `Library.lend_book(book_title, user_id)` moves the first book with that
  title to the user and returns the user. It raises `BookNotFoundError`
  when no book has the title and `UserNotFoundError` when no user has the
  id; both are `LookupError`s.
- `Library.remove_book(title)` and `Library.remove_user(user_id)` remove
  every book with that title and every user with that id.
- `display_books(file)` and `display_users(file)` print listings to the
  given text stream, standard output by default.

### Forms

`booklib.forms` holds `BookForm`, `UserForm`, `LendForm` and
`SearchForm`. Their `validate()` returns the form, or raises `FormError`
when a required text field is blank, a year is outside 0–2500, or a user
id is outside 1–1000. A `SearchForm` accepts any input.

### Details and the controller

`booklib.details` renders the text shown for a book (`book_details`), a
user (`user_details`), either or both (`details`), and a search result
(`search_result`).

`booklib.controller.LibraryController` carries out what the window's
menus do, without any widgets: it takes forms and table row numbers,
applies them to its `library`, and gives back table rows (`book_rows`,
`user_rows`) and detail text. A row number out of range raises
`IndexError`.

`booklib.gui.run(controller)` opens the window on a given controller,
or a new empty one.

## What it does not do

The library lives only in memory. Nothing is saved: books and users
added in the window are gone once it is closed, and each run starts
with an empty library. There is also no way to return a borrowed book.

## Tests

    pip install .[test]
    pytest