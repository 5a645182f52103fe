"""A small lending library of books and users, with a console walkthrough and a Tk window."""

__version__ = "1.0.0"