import time

from core.compare import compare_tags
from core.models import Tag, TagDelta


def _tags(**kv):
    return [Tag(k, v) for k, v in kv.items()]


def test_compare_tags_added_updated_deleted():
    old = _tags(key1="value1", key2="value2", key3="value3")
    new = _tags(key1="value1_updated", key2="value2", key4="value4")

    added, updated, deleted = compare_tags(old, new)

    assert added == [Tag("key4", "value4")]
    assert updated == [Tag("key1", "value1_updated")]
    assert deleted == [Tag("key3", "value3")]


def test_compare_tags_identical_sets_is_empty():
    tags = _tags(a="1", b="2")
    delta = compare_tags(tags, list(reversed(tags)))
    assert delta == TagDelta([], [], [])
    assert delta.is_empty()


def test_compare_tags_empty_inputs():
    assert compare_tags([], _tags(a="1")) == TagDelta([Tag("a", "1")], [], [])
    assert compare_tags(_tags(a="1"), []) == TagDelta([], [], [Tag("a", "1")])
    assert compare_tags([], []).is_empty()


def test_compare_tags_output_order():
    old = _tags(z="1", y="2", x="3", w="4")
    new = [Tag("c", "new"), Tag("y", "changed"), Tag("a", "new"), Tag("z", "changed")]

    delta = compare_tags(old, new)

    assert [t.key for t in delta.added] == ["c", "a"]
    assert [t.key for t in delta.updated] == ["y", "z"]
    assert [t.key for t in delta.deleted] == ["x", "w"]


def test_compare_tags_duplicate_keys_last_value_wins():
    old = [Tag("a", "1"), Tag("a", "2")]
    new = [Tag("a", "2"), Tag("b", "x"), Tag("b", "y")]

    delta = compare_tags(old, new)

    assert delta.added == [Tag("b", "y")]
    assert delta.updated == []
    assert delta.deleted == []


def test_compare_tags_keys_are_disjoint_and_round_trip():
    old = _tags(a="1", b="2", c="3", d="4")
    new = _tags(b="2", c="changed", e="5")

    delta = compare_tags(old, new)

    keys = [t.key for t in delta.added + delta.updated + delta.deleted]
    assert len(keys) == len(set(keys))

    state = {t.key: t.value for t in old}
    state.update({t.key: t.value for t in delta.to_set()})
    for t in delta.deleted:
        del state[t.key]
    assert state == {t.key: t.value for t in new}


def test_compare_tags_large_sets_are_linear():
    n = 50_000
    old = [Tag(f"k{i}", "v") for i in range(n)]
    new = [Tag(f"k{i}", "v" if i % 2 else "w") for i in range(n // 2, n + n // 2)]

    started = time.perf_counter()
    delta = compare_tags(old, new)
    elapsed = time.perf_counter() - started

    assert len(delta.deleted) == n // 2
    assert len(delta.added) == n // 2
    # uma varredura quadrática em 50k tags levaria minutos
    assert elapsed < 5


def test_delta_to_dict():
    delta = compare_tags(_tags(a="1", b="2"), _tags(a="x", c="3"))
    assert delta.to_dict() == {
        "added": {"c": "3"},
        "updated": {"a": "x"},
        "deleted": {"b": "2"},
    }
