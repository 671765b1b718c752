import threading

import pytest

from string_analyzer.exceptions import AlreadyExistsError, NotFoundError
from string_analyzer.models.filters import FilterSet
from string_analyzer.services.analyzer import analyze


def test_create_then_get(store):
    record = store.create(analyze("hello"))
    assert store.get("hello") == record
    assert "hello" in store
    assert len(store) == 1


def test_duplicate_create_is_rejected(store):
    store.create(analyze("twice"))
    with pytest.raises(AlreadyExistsError):
        store.create(analyze("twice"))
    assert len(store) == 1


def test_values_are_case_sensitive_keys(store):
    store.create(analyze("Noon"))
    store.create(analyze("noon"))
    assert len(store) == 2


def test_delete_then_recreate(store):
    store.create(analyze("again"))
    store.delete("again")
    assert "again" not in store
    store.create(analyze("again"))
    assert store.get("again").value == "again"


def test_delete_missing_value(store):
    with pytest.raises(NotFoundError):
        store.delete("ghost")
    with pytest.raises(NotFoundError):
        store.get("ghost")


def test_lookup_by_identifier(store):
    record = store.create(analyze("indexed"))
    assert store.get_by_identifier(record.identifier) == record

    store.delete("indexed")
    with pytest.raises(NotFoundError):
        store.get_by_identifier(record.identifier)


def test_list_length_range(store):
    for value in ("abcd", "abcdefghij", "abcdefghijk", "abc"):
        store.create(analyze(value))

    results = store.list(FilterSet(min_length=4, max_length=10))
    assert sorted(r.value for r in results) == ["abcd", "abcdefghij"]


def test_list_keeps_insertion_order(store):
    values = ["zeta", "alpha", "mid"]
    for value in values:
        store.create(analyze(value))

    assert [r.value for r in store.list()] == values
    assert [r.value for r in store.list()] == [r.value for r in store.list(FilterSet())]


def test_list_palindromes(seeded_store):
    results = seeded_store.list(FilterSet(is_palindrome=True))
    # case-fold only, so the spaced Panama sentence is not a palindrome
    assert {r.value for r in results} == {"racecar", "noon"}


def test_concurrent_creates_store_value_once(store):
    errors = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        try:
            store.create(analyze("race"))
        except AlreadyExistsError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 1
    assert len(errors) == 7


def test_returned_records_do_not_share_stored_state(store):
    original = analyze("aa")
    store.create(original)
    original.properties.character_frequency_map["x"] = 1

    fetched = store.get("aa")
    fetched.properties.character_frequency_map["z"] = 9
    store.list()[0].properties.character_frequency_map["y"] = 3

    assert store.get("aa").properties.character_frequency_map == {"a": 2}
