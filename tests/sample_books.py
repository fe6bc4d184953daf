"""Reference books shared by the test modules."""

from bookcatalog.domain.books.entities import Book

POWER_UP = Book(
    isbn="0691161518",
    amazon_url="http://a.co/eobPtX2",
    author="Matthew Lane",
    language="english",
    pages=264,
    publisher="Princeton University Press",
    title="Power-Up: Unlocking the Hidden Mathematics in Video Games",
    year=2017,
)

FAHRENHEIT = Book(
    isbn="0691161519",
    amazon_url="https://www.amazon.com/Fahrenheit-451-Ray-Bradbury/dp/1451673310",
    author="Ray Bradbury",
    language="english",
    pages=256,
    publisher="Ballantine Books",
    title="Fahrenheit 451",
    year=1953,
)
