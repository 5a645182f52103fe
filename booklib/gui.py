"""Tk main window and dialogs for managing the library."""

from __future__ import annotations

import tkinter as tk
from tkinter import TclError, messagebox, ttk
from typing import Any, Callable

from booklib.controller import LibraryController
from booklib.forms import (
    USER_ID_RANGE,
    YEAR_RANGE,
    BookForm,
    FormError,
    LendForm,
    SearchForm,
    UserForm,
)

# A field is (label, default value, allowed range for numbers or None for text).
_Field = tuple[str, Any, "range | None"]


def _ask(master: Any, title: str, fields: list[_Field], build: Callable[..., Any]) -> Any:
    """Show a modal form; return the validated form or None if cancelled."""
    dialog = tk.Toplevel(master)
    dialog.title(title)
    dialog.transient(master)
    variables = []
    for row, (label, default, limits) in enumerate(fields):
        ttk.Label(dialog, text=label).grid(row=row, column=0, sticky="w", padx=6, pady=3)
        if limits is None:
            var = tk.StringVar(dialog, value=default)
            widget = ttk.Entry(dialog, textvariable=var)
        else:
            var = tk.IntVar(dialog, value=default)
            widget = ttk.Spinbox(
                dialog, from_=limits.start, to=limits.stop - 1, textvariable=var
            )
        widget.grid(row=row, column=1, sticky="ew", padx=6, pady=3)
        variables.append(var)

    accepted = []

    def on_ok() -> None:
        try:
            form = build(*(var.get() for var in variables)).validate()
        except TclError:
            messagebox.showwarning("Error", "Enter a whole number", parent=dialog)
            return
        except FormError as exc:
            messagebox.showwarning("Error", str(exc), parent=dialog)
            return
        accepted.append(form)
        dialog.destroy()

    buttons = ttk.Frame(dialog)
    buttons.grid(row=len(fields), column=0, columnspan=2, pady=6)
    ttk.Button(buttons, text="OK", command=on_ok).pack(side="left", padx=3)
    ttk.Button(buttons, text="Cancel", command=dialog.destroy).pack(side="left", padx=3)
    dialog.grab_set()
    master.wait_window(dialog)
    return accepted[0] if accepted else None


def _show_text(master: Any, title: str, text: str) -> None:
    dialog = tk.Toplevel(master)
    dialog.title(title)
    dialog.transient(master)
    ttk.Label(dialog, text=text, wraplength=400, justify="left").pack(padx=10, pady=10)
    ttk.Button(dialog, text="OK", command=dialog.destroy).pack(pady=6)
    dialog.grab_set()
    master.wait_window(dialog)


class MainWindow:
    """The library window: a table of books and a table of users."""

    def __init__(self, master: Any, controller: LibraryController | None = None) -> None:
        self.master = master
        self.controller = controller if controller is not None else LibraryController()
        master.title("Library")
        master.geometry("1000x600+250+150")
        self._create_menus()

        panes = ttk.PanedWindow(master, orient="horizontal")
        panes.pack(fill="both", expand=True)
        self.books_table = self._table(panes, ("Title", "Author", "Year"))
        self.users_table = self._table(panes, ("User ID", "Name"))
        self.books_table.bind("<Double-1>", self._show_book_details)
        self.users_table.bind("<Double-1>", self._show_user_details)
        self.refresh()

    def _table(self, panes: Any, headings: tuple[str, ...]) -> Any:
        table = ttk.Treeview(panes, columns=headings, show="headings", selectmode="browse")
        for heading in headings:
            table.heading(heading, text=heading)
        panes.add(table, weight=1)
        return table

    def _create_menus(self) -> None:
        menubar = tk.Menu(self.master)
        book_menu = tk.Menu(menubar, tearoff=0)
        book_menu.add_command(label="Add Book", command=self._add_book)
        book_menu.add_command(label="Delete Book", command=self._delete_book)
        book_menu.add_command(label="Search Book", command=self._search_book)
        book_menu.add_command(label="Lend Book", command=self._lend_book)
        menubar.add_cascade(label="Books", menu=book_menu)
        user_menu = tk.Menu(menubar, tearoff=0)
        user_menu.add_command(label="Add User", command=self._add_user)
        user_menu.add_command(label="Delete User", command=self._delete_user)
        menubar.add_cascade(label="Users", menu=user_menu)
        self.master.config(menu=menubar)

    def refresh(self) -> None:
        """Fill both tables from the library."""
        for table, rows in (
            (self.books_table, self.controller.book_rows()),
            (self.users_table, self.controller.user_rows()),
        ):
            table.delete(*table.get_children())
            for row in rows:
                table.insert("", "end", values=row)

    @staticmethod
    def _selected_row(table: Any) -> int | None:
        selection = table.selection()
        if not selection:
            return None
        return table.index(selection[0])

    def _add_book(self) -> None:
        form = _ask(
            self.master,
            "Add Book",
            [("Title:", "", None), ("Author:", "", None), ("Year:", 1950, YEAR_RANGE)],
            BookForm,
        )
        if form is not None:
            self.controller.add_book(form)
            self.refresh()

    def _delete_book(self) -> None:
        row = self._selected_row(self.books_table)
        if row is None:
            messagebox.showwarning("Delete Book", "Select a book to delete", parent=self.master)
            return
        self.controller.delete_book(row)
        self.refresh()

    def _search_book(self) -> None:
        form = _ask(
            self.master,
            "Search Book",
            [("Title (optional):", "", None), ("Author (optional):", "", None)],
            SearchForm,
        )
        if form is not None:
            messagebox.showinfo(
                "Search Result", self.controller.search(form), parent=self.master
            )

    def _lend_book(self) -> None:
        form = _ask(
            self.master,
            "Lend Book to User",
            [("Book Title:", "", None), ("User ID:", 1, USER_ID_RANGE)],
            LendForm,
        )
        if form is None:
            return
        try:
            self.controller.lend_book(form)
        except LookupError as exc:
            messagebox.showwarning("Lend Book", str(exc), parent=self.master)
        self.refresh()

    def _add_user(self) -> None:
        form = _ask(
            self.master,
            "Add User",
            [("Name:", "", None), ("ID:", 1, USER_ID_RANGE)],
            UserForm,
        )
        if form is not None:
            self.controller.add_user(form)
            self.refresh()

    def _delete_user(self) -> None:
        row = self._selected_row(self.users_table)
        if row is None:
            messagebox.showwarning("Delete User", "Select a user to delete.", parent=self.master)
            return
        self.controller.delete_user(row)
        self.refresh()

    def _show_book_details(self, event: Any = None) -> None:
        row = self._selected_row(self.books_table)
        if row is not None and row < len(self.controller.library.books):
            _show_text(self.master, "Info", self.controller.book_details(row))

    def _show_user_details(self, event: Any = None) -> None:
        row = self._selected_row(self.users_table)
        if row is not None and row < len(self.controller.library.users):
            _show_text(self.master, "Info", self.controller.user_details(row))


def run(controller: LibraryController | None = None) -> MainWindow:
    """Open the main window and run the event loop until it is closed."""
    root = tk.Tk()
    window = MainWindow(root, controller)
    root.mainloop()
    return window