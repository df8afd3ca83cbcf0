"""Tests for playback planning."""

import pytest

from islbridge.core.errors import PlaybackError, TranslationError

from ..catalog import SignCatalog
from ..playback import (
    BASE_SIGN_DURATION_MS,
    PlaybackPlan,
    build_playback_plan,
    sign_duration_ms,
)


class ModelClips:
    """Clip catalog backed by a fixed set of animation names."""

    def __init__(self, names):
        self.names = set(names)

    def has_sign(self, gloss: str) -> bool:
        return gloss in self.names


class TestSignDuration:
    """Test per-sign duration."""

    def test_normal_speed(self):
        assert sign_duration_ms(1.0) == BASE_SIGN_DURATION_MS

    def test_default_speed(self):
        assert sign_duration_ms() == 2143

    @pytest.mark.parametrize("speed,expected", [(0.5, 3000), (2.0, 750), (1.5, 1000)])
    def test_scaled(self, speed, expected):
        assert sign_duration_ms(speed) == expected

    def test_integer_speed(self):
        assert sign_duration_ms(2) == 750

    @pytest.mark.parametrize("speed", [0.4, 2.1, 0, -1])
    def test_out_of_range(self, speed):
        with pytest.raises(PlaybackError) as exc_info:
            sign_duration_ms(speed)
        assert exc_info.value.speed == speed

    @pytest.mark.parametrize("speed", ["fast", None, True])
    def test_not_a_number(self, speed):
        with pytest.raises(PlaybackError):
            sign_duration_ms(speed)

    def test_is_translation_error(self):
        with pytest.raises(TranslationError):
            sign_duration_ms(5.0)


class TestBuildPlaybackPlan:
    """Test playback plan construction."""

    def test_steps_are_contiguous(self):
        plan = build_playback_plan(["i", "rice", "eat"], speed=1.0)

        assert [s.start_ms for s in plan.steps] == [0, 1500, 3000]
        assert plan.steps[-1].end_ms == 4500
        assert plan.total_ms == 4500

    def test_known_glosses_use_own_clip(self):
        plan = build_playback_plan(["i", "eat"], speed=1.0)

        assert plan.clips == ["i", "eat"]
        assert plan.fallback_glosses == []

    def test_missing_clip_falls_back_to_idle(self):
        plan = build_playback_plan(["i", "mango", "eat"], speed=1.0)

        assert plan.clips == ["i", "idle", "eat"]
        assert plan.fallback_glosses == ["mango"]
        assert plan.steps[1].gloss == "mango"
        assert plan.steps[1].is_fallback

    def test_custom_idle_clip(self):
        plan = build_playback_plan(["mango"], speed=1.0, idle_clip="rest")
        assert plan.clips == ["rest"]

    def test_custom_clip_catalog(self):
        clips = ModelClips(["mango"])
        plan = build_playback_plan(["i", "mango"], speed=1.0, clip_catalog=clips)

        assert plan.clips == ["idle", "mango"]

    def test_sign_catalog_as_clip_catalog(self):
        plan = build_playback_plan(["rice"], clip_catalog=SignCatalog(["rice"]))
        assert plan.clips == ["rice"]

    def test_empty_sequence(self):
        plan = build_playback_plan([])

        assert isinstance(plan, PlaybackPlan)
        assert plan.steps == []
        assert plan.total_ms == 0

    def test_speed_recorded(self):
        plan = build_playback_plan(["i"], speed=2)
        assert plan.speed == 2.0
        assert plan.steps[0].duration_ms == 750

    def test_invalid_speed_raises_even_when_empty(self):
        with pytest.raises(PlaybackError):
            build_playback_plan([], speed=10)

    def test_to_dict(self):
        plan = build_playback_plan(["i", "mango"], speed=1.0)
        data = plan.to_dict()

        assert data["speed"] == 1.0
        assert data["total_ms"] == 3000
        assert data["steps"][1] == {
            "index": 1,
            "gloss": "mango",
            "clip": "idle",
            "start_ms": 1500,
            "duration_ms": 1500,
            "is_fallback": True,
        }
