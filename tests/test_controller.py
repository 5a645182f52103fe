import pytest

from booklib.controller import LibraryController
from booklib.forms import BookForm, FormError, LendForm, SearchForm, UserForm
from booklib.library import BookNotFoundError, UserNotFoundError


@pytest.fixture
def controller():
    ctl = LibraryController()
    ctl.add_book(BookForm("Moby-Dick", "Herman Melville", 1851))
    ctl.add_book(BookForm("War and Peace", "Leo Tolstoy", 1869))
    ctl.add_user(UserForm("Liza", 1))
    ctl.add_user(UserForm("Max", 2))
    return ctl


def test_book_rows_follow_insertion_order(controller):
    assert controller.book_rows() == [
        ("Moby-Dick", "Herman Melville", "1851"),
        ("War and Peace", "Leo Tolstoy", "1869"),
    ]


def test_user_rows(controller):
    assert controller.user_rows() == [("1", "Liza"), ("2", "Max")]


def test_add_book_rejects_empty_title(controller):
    with pytest.raises(FormError):
        controller.add_book(BookForm("  ", "Someone", 2000))
    assert len(controller.book_rows()) == 2


def test_add_user_rejects_empty_name(controller):
    with pytest.raises(FormError):
        controller.add_user(UserForm("", 5))
    assert len(controller.user_rows()) == 2


def test_delete_book_removes_row(controller):
    assert controller.delete_book(0) == "Moby-Dick"
    assert [row[0] for row in controller.book_rows()] == ["War and Peace"]


def test_delete_book_out_of_range(controller):
    with pytest.raises(IndexError):
        controller.delete_book(5)
    with pytest.raises(IndexError):
        controller.delete_book(-1)


def test_delete_user(controller):
    assert controller.delete_user(1) == 2
    assert controller.user_rows() == [("1", "Liza")]


def test_search_found(controller):
    text = controller.search(SearchForm(author="Leo Tolstoy"))
    assert text == "Found Book:\nTitle: War and Peace\nAuthor: Leo Tolstoy\nYear: 1869"


def test_search_not_found(controller):
    assert controller.search(SearchForm(title="Nothing")) == "Book not found"


def test_lend_moves_book_to_user(controller):
    user = controller.lend_book(LendForm("Moby-Dick", 2))
    assert user.name == "Max"
    assert [b.title for b in user.borrowed_books] == ["Moby-Dick"]
    assert [row[0] for row in controller.book_rows()] == ["War and Peace"]


def test_lend_unknown_book(controller):
    with pytest.raises(BookNotFoundError):
        controller.lend_book(LendForm("Non Book", 1))


def test_lend_unknown_user(controller):
    with pytest.raises(UserNotFoundError):
        controller.lend_book(LendForm("Moby-Dick", 99))
    assert len(controller.book_rows()) == 2


def test_lend_rejects_empty_title(controller):
    with pytest.raises(FormError):
        controller.lend_book(LendForm("", 1))


def test_book_details(controller):
    text = controller.book_details(1)
    assert text.startswith("Book Details:\nTitle: War and Peace\n")


def test_user_details_lists_borrowed(controller):
    controller.lend_book(LendForm("War and Peace", 1))
    text = controller.user_details(0)
    assert "War and Peace, Leo Tolstoy, 1869\n" in text


def test_details_out_of_range(controller):
    with pytest.raises(IndexError):
        controller.user_details(2)