import pytest

from role_catalog.classification import (
    Category,
    CategorySet,
    MisconfiguredCategorySet,
    remainder,
)


def _always(name):
    return True


def _courses(name):
    return name.startswith("CS ")


def test_category_set_keeps_declaration_order():
    first = Category("First", _courses, sort_key=0)
    second = Category("Second", lambda name: name == "Snooper", sort_key=0)
    rest = remainder("Rest", [first, second], sort_key=9)

    categories = CategorySet([second, first, rest])

    assert categories.labels == ("Second", "First", "Rest")
    assert categories.catch_all is rest


def test_category_set_rejects_sort_keys_declared_out_of_order():
    first = Category("First", _courses, sort_key=0)
    rest = remainder("Rest", [first], sort_key=9)

    with pytest.raises(MisconfiguredCategorySet, match="declared after"):
        CategorySet([rest, first])


def test_empty_category_set_is_misconfigured():
    with pytest.raises(MisconfiguredCategorySet, match="empty"):
        CategorySet([])


def test_last_category_must_be_catch_all():
    tautology = Category("Everything", _always)

    with pytest.raises(MisconfiguredCategorySet, match="not a catch-all"):
        CategorySet([Category("CS", _courses), tautology])


def test_catch_all_must_come_last():
    early = Category("Early", _always, catch_all=True)
    late = Category("Late", _always, catch_all=True)

    with pytest.raises(MisconfiguredCategorySet, match="must come last"):
        CategorySet([early, late])


def test_catch_all_that_rejects_leftovers_is_misconfigured():
    picky = Category("Picky", lambda name: name == "Snooper", catch_all=True)

    with pytest.raises(MisconfiguredCategorySet, match="rejects"):
        CategorySet([Category("CS", _courses), picky])


def test_duplicate_labels_are_misconfigured():
    with pytest.raises(MisconfiguredCategorySet, match="Duplicate"):
        CategorySet([Category("Same", _courses), Category("Same", _always, catch_all=True)])


def test_remainder_accepts_only_unmatched_names():
    courses = Category("CS", _courses)
    rest = remainder("Rest", [courses])

    assert rest.catch_all
    assert rest.matches("Snooper")
    assert rest.matches("")
    assert not rest.matches("CS 121")


def test_category_set_is_indexable():
    courses = Category("CS", _courses)
    categories = CategorySet([courses, remainder("Rest", [courses])])

    assert len(categories) == 2
    assert categories[0] is courses
    assert [category.label for category in categories] == ["CS", "Rest"]
