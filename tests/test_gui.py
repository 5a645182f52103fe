from unittest import mock

import pytest

from booklib import gui
from booklib.controller import LibraryController
from booklib.forms import BookForm, UserForm


@pytest.fixture
def toolkit():
    with mock.patch.object(gui, "tk") as tk_mock, mock.patch.object(
        gui, "ttk"
    ) as ttk_mock, mock.patch.object(gui, "messagebox") as box_mock:
        ttk_mock.Treeview.side_effect = lambda *a, **k: mock.MagicMock()
        yield tk_mock, ttk_mock, box_mock


@pytest.fixture
def controller():
    ctl = LibraryController()
    ctl.add_book(BookForm("Moby-Dick", "Herman Melville", 1851))
    ctl.add_user(UserForm("Liza", 1))
    return ctl


def test_window_title_and_rows(toolkit, controller):
    master = mock.MagicMock()
    window = gui.MainWindow(master, controller)
    master.title.assert_called_once_with("Library")
    window.books_table.insert.assert_called_once_with(
        "", "end", values=("Moby-Dick", "Herman Melville", "1851")
    )
    window.users_table.insert.assert_called_once_with("", "end", values=("1", "Liza"))


def test_refresh_shows_new_book(toolkit, controller):
    window = gui.MainWindow(mock.MagicMock(), controller)
    controller.add_book(BookForm("Dune", "Frank Herbert", 1965))
    window.books_table.insert.reset_mock()
    window.refresh()
    assert window.books_table.insert.call_count == 2
    assert window.books_table.insert.call_args_list[1] == mock.call(
        "", "end", values=("Dune", "Frank Herbert", "1965")
    )


def test_delete_without_selection_warns(toolkit, controller):
    _, _, box = toolkit
    master = mock.MagicMock()
    window = gui.MainWindow(master, controller)
    window.books_table.selection.return_value = ()
    window._delete_book()
    box.showwarning.assert_called_once_with(
        "Delete Book", "Select a book to delete", parent=master
    )
    assert len(controller.book_rows()) == 1


def test_delete_selected_user(toolkit, controller):
    window = gui.MainWindow(mock.MagicMock(), controller)
    window.users_table.selection.return_value = ("I001",)
    window.users_table.index.return_value = 0
    window._delete_user()
    assert controller.user_rows() == []


def test_run_starts_event_loop(toolkit, controller):
    tk_mock, _, _ = toolkit
    window = gui.run(controller)
    tk_mock.Tk.return_value.mainloop.assert_called_once_with()
    assert window.controller is controller