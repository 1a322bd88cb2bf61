from core.adapters.base import BaseTagAdapter
from core.arn import Arn
from core.models import Tag, TagDelta


class _RecordingAdapter(BaseTagAdapter):
    service = "x"
    pretty_name = "Fake"

    @classmethod
    def supports(cls, arn):  # pragma: no cover
        return False

    def __init__(self, arn):
        self.arn = arn
        self.calls = []

    def get_current_tags(self):  # pragma: no cover
        return []

    def set_tags(self, tags):
        self.calls.append(("set", tags))

    def remove_tags(self, keys):
        self.calls.append(("remove", keys))


ARN = Arn.parse("arn:aws:ecs:us-east-1:123:service/main/web")


def test_apply_delta_sets_added_and_updated_in_one_call():
    adapter = _RecordingAdapter(ARN)
    delta = TagDelta(added=[Tag("A", "1")], updated=[Tag("B", "2")], deleted=[Tag("C", "3")])

    assert adapter.apply_delta(delta) is True
    assert adapter.calls == [
        ("set", [Tag("A", "1"), Tag("B", "2")]),
        ("remove", ["C"]),
    ]


def test_apply_delta_without_prune_keeps_deleted():
    adapter = _RecordingAdapter(ARN)
    delta = TagDelta(added=[], updated=[], deleted=[Tag("C", "3")])

    assert adapter.apply_delta(delta, prune=False) is False
    assert adapter.calls == []


def test_apply_delta_empty_makes_no_calls():
    adapter = _RecordingAdapter(ARN)
    assert adapter.apply_delta(TagDelta([], [], [])) is False
    assert adapter.calls == []


def test_taggable_respects_long_arn_requirement():
    short = Arn.parse("arn:aws:ecs:us-east-1:123:service/web")

    adapter = _RecordingAdapter(short)
    assert adapter.taggable() is True

    adapter.requires_long_arn = True
    assert adapter.taggable() is False

    adapter.arn = ARN
    assert adapter.taggable() is True
