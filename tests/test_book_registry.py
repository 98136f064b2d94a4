import pytest

from library_catalog.book_registry import BookRegistry


@pytest.fixture
def registry():
    reg = BookRegistry()
    reg.add("Java Programming", "James Gosling", "12345", 3)
    reg.add("Data Structures", "Mark Allen", "67890", 2)
    reg.add("Operating Systems", "Silberschatz", "11223", 4)
    return reg


def test_add_assigns_sequential_ids():
    reg = BookRegistry()
    first = reg.add("T", "A", "I", 2)
    second = reg.add("T2", "A2", "I2", 1)
    assert (first.id, second.id) == (1, 2)
    assert first.copies == 2


def test_get_by_id_returns_added_record(registry):
    book = registry.add("Ulysses", "James Joyce", "9780199535675", 1)
    found = registry.get_by_id(book.id)
    assert found is book
    assert found.to_dict() == {"id": 4, "title": "Ulysses", "author": "James Joyce",
                               "isbn": "9780199535675", "copies": 1}


def test_get_by_id_unknown(registry):
    assert registry.get_by_id(99) is None


def test_add_accepts_negative_copies():
    reg = BookRegistry()
    book = reg.add("Broken", "Nobody", "000", -3)
    assert reg.get_by_id(book.id).copies == -3


def test_list_all_in_insertion_order(registry):
    assert [b.title for b in registry.list_all()] == ["Java Programming", "Data Structures", "Operating Systems"]


def test_list_all_is_a_copy(registry):
    registry.list_all().clear()
    assert len(registry.list_all()) == 3


@pytest.mark.parametrize("keyword,expected", [
    ("java", ["Java Programming"]),
    ("MARK", ["Data Structures"]),
    ("112", ["Operating Systems"]),
    ("s", ["Java Programming", "Data Structures", "Operating Systems"]),
    ("nothing here", []),
])
def test_search_matches_title_author_or_isbn(registry, keyword, expected):
    assert [b.title for b in registry.search(keyword)] == expected


def test_search_empty_keyword_matches_everything(registry):
    assert registry.search("") == registry.list_all()


def test_search_is_subset_of_list_all(registry):
    keyword = "at"
    expected = [
        b for b in registry.list_all()
        if keyword in b.title.lower() or keyword in b.author.lower() or keyword in b.isbn.lower()
    ]
    assert registry.search(keyword.upper()) == expected


def test_set_copies_has_no_bounds_check(registry):
    registry.set_copies(1, -1)
    assert registry.get_by_id(1).copies == -1


def test_set_copies_unknown_book(registry):
    with pytest.raises(KeyError, match="Book with ID 42 not found."):
        registry.set_copies(42, 1)


def test_book_str_format(registry):
    assert str(registry.get_by_id(1)) == "ID:1 | Java Programming by James Gosling | ISBN:12345 | Copies:3"
