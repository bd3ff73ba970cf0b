from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from hn_graphql.models import HNItem, HNUser, ItemKind
from hn_graphql.schema.resolvers import MissingTextError, resolve_id, resolve_item_text, unix_to_iso
from hn_graphql.schema.types import Job, Poll, Story, resolve_top_level_type


class TestTopLevelTypeResolution:
    """Dispatch of TopLevelItem members by item discriminant."""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (ItemKind.story, Story),
            (ItemKind.poll, Poll),
            (ItemKind.job, Job),
            ("story", Story),
            ("poll", Poll),
            ("job", Job),
        ],
    )
    def test_top_level_kinds(self, kind, expected):
        assert resolve_top_level_type(kind) is expected

    @pytest.mark.parametrize("kind", [ItemKind.comment, ItemKind.pollopt, "comment", "pollopt", "Story", "", None, 42])
    def test_other_kinds_are_unresolved(self, kind):
        assert resolve_top_level_type(kind) is None

    def test_every_kind_maps_to_a_fixed_result(self):
        first = {kind: resolve_top_level_type(kind) for kind in ItemKind}
        second = {kind: resolve_top_level_type(kind) for kind in ItemKind}
        assert first == second
        assert set(first.values()) == {Story, Poll, Job, None}

    def test_is_type_of_uses_discriminant(self):
        story = HNItem(id=1, type="story", time=0, title="t", score=1, descendants=0)
        job = HNItem(id=2, type="job", time=0, title="t", score=1)

        assert Story.is_type_of(story, None)
        assert not Poll.is_type_of(story, None)
        assert Job.is_type_of(job, None)
        assert not Story.is_type_of(SimpleNamespace(), None)


class TestIsoTimestamps:
    def test_epoch(self):
        assert unix_to_iso(0) == "1970-01-01T00:00:00.000Z"

    def test_known_timestamp(self):
        assert unix_to_iso(1175714200) == "2007-04-04T19:16:40.000Z"

    @pytest.mark.parametrize("timestamp", [0, 1, 1160418111, 1700000000, 2147483648])
    def test_round_trip(self, timestamp):
        iso = unix_to_iso(timestamp)
        parsed = datetime.strptime(iso, "%Y-%m-%dT%H:%M:%S.%fZ").replace(tzinfo=timezone.utc)

        assert iso.endswith(".000Z")
        assert parsed.microsecond == 0
        assert parsed.timestamp() == timestamp


class TestScalarResolvers:
    def test_id_is_string(self):
        assert resolve_id(HNItem(id=8863, type="story", time=0)) == "8863"

    def test_user_id_passes_through(self):
        assert resolve_id(HNUser(id="pg", created=1160418092)) == "pg"

    def test_story_text_may_be_null(self):
        assert resolve_item_text(HNItem(id=1, type="story", time=0)) is None

    @pytest.mark.parametrize("kind", ["comment", "pollopt"])
    def test_missing_text_on_comment_or_pollopt(self, kind):
        with pytest.raises(MissingTextError) as exc_info:
            resolve_item_text(HNItem(id=7, type=kind, time=0))

        assert exc_info.value.item_id == 7
        assert kind in str(exc_info.value)

    def test_comment_text_passthrough(self):
        assert resolve_item_text(HNItem(id=7, type="comment", time=0, text="<p>hi</p>")) == "<p>hi</p>"
