import pytest

from signmotion.core.poses import FacePose, HandPose, PoseFrame, ease_in_out
from signmotion.core.timeline import (
    TRANSITION_GLOSS,
    AnimationTrack,
    Timeline,
    TimelineAssembler,
    TrackKind,
    assemble,
    scrub,
)


def _authored_timeline():
    track = AnimationTrack(
        gloss="REACH",
        kind=TrackKind.PROCEDURAL,
        start_ms=0.0,
        end_ms=1000.0,
        keyframes=(
            PoseFrame(0, right_hand=HandPose((0.0, 0.0, 0.0))),
            PoseFrame(1000, right_hand=HandPose((1.0, 1.0, 1.0))),
        ),
    )
    return Timeline((track,))


def assert_contiguous(timeline):
    for a, b in zip(timeline.tracks, timeline.tracks[1:]):
        assert b.start_ms == a.end_ms
    assert timeline.total_duration_ms == timeline.tracks[-1].end_ms


# ── Assembly ──────────────────────────────────────────────────

def test_hello_goodbye_procedural_total_duration(procedural_resolver):
    timeline = assemble(["HELLO", "GOODBYE"], resolver=procedural_resolver)
    assert [t.gloss for t in timeline.tracks] == ["HELLO", TRANSITION_GLOSS, "GOODBYE"]
    assert timeline.total_duration_ms == pytest.approx(3650)
    assert_contiguous(timeline)


def test_contiguity_across_mixed_sources(resolver):
    timeline = TimelineAssembler(resolver).assemble(
        ["HELLO", "GOODBYE", "XYZ", "COFFEE", "COFFEE", "THANK YOU"], "ASL"
    )
    kinds = [t.kind for t in timeline.tracks]
    assert kinds == [
        TrackKind.VIDEO,
        TrackKind.PROCEDURAL,
        TrackKind.TRANSITION,
        TrackKind.FINGERSPELLING,
        TrackKind.VIDEO,
        TrackKind.VIDEO,
        TrackKind.PROCEDURAL,
    ]
    assert_contiguous(timeline)


def test_video_adjacent_boundaries_get_no_transition(resolver):
    timeline = assemble(["HELLO", "GOODBYE"], "ASL", resolver=resolver)
    assert len(timeline.tracks) == 2
    assert timeline.total_duration_ms == pytest.approx(1800 + 2000)


def test_video_track_shape(resolver):
    track = assemble(["HELLO"], "ASL", resolver=resolver).tracks[0]
    assert track.media_url == "videos/asl/HELLO_720p.mp4"
    assert len(track.keyframes) == 2
    assert all(kf.is_empty for kf in track.keyframes)
    assert track.fallback is False


def test_transition_is_eased_and_face_snaps_to_target(procedural_resolver):
    timeline = assemble(["HELLO", "GOODBYE"], resolver=procedural_resolver)
    hello, bridge, goodbye = timeline.tracks

    assert bridge.duration_ms == 150
    assert len(bridge.keyframes) == 4
    assert [kf.timestamp_ms for kf in bridge.keyframes] == pytest.approx([0, 50, 100, 150])

    src = hello.keyframes[-1].right_hand.position
    dst = goodbye.keyframes[0].right_hand.position
    expected_x = src[0] + (dst[0] - src[0]) * ease_in_out(1 / 3)
    assert bridge.keyframes[1].right_hand.position[0] == pytest.approx(expected_x)
    assert bridge.keyframes[-1].right_hand.position == pytest.approx(dst)
    assert all(kf.face == goodbye.keyframes[0].face for kf in bridge.keyframes)


def test_transition_settings(procedural_resolver):
    assembler = TimelineAssembler(procedural_resolver, transition_ms=300, transition_steps=6)
    bridge = assembler.assemble(["HELLO", "GOODBYE"]).tracks[1]
    assert bridge.duration_ms == 300
    assert len(bridge.keyframes) == 7

    no_bridge = TimelineAssembler(procedural_resolver, transition_ms=0).assemble(["HELLO", "GOODBYE"])
    assert no_bridge.total_duration_ms == pytest.approx(3500)


def test_empty_sequence(procedural_resolver):
    timeline = assemble([], resolver=procedural_resolver)
    assert timeline.tracks == ()
    assert timeline.total_duration_ms == 0
    assert scrub(timeline, 100).is_empty
    assert timeline.track_at(0) is None


# ── Scrubbing ─────────────────────────────────────────────────

def test_authored_keyframes_interpolate_linearly():
    pose = scrub(_authored_timeline(), 500)
    assert pose.right_hand.position == pytest.approx((0.5, 0.5, 0.5))
    assert pose.timestamp_ms == 500


def test_scrub_holds_last_frame_past_end(procedural_resolver):
    timeline = assemble(["HELLO", "GOODBYE"], resolver=procedural_resolver)
    total = timeline.total_duration_ms
    assert scrub(timeline, total + 5000) == scrub(timeline, total)
    assert scrub(timeline, -250) == scrub(timeline, 0)
    assert scrub(timeline, 0).right_hand.position == pytest.approx(
        timeline.tracks[0].keyframes[0].right_hand.position
    )


def test_scrub_ends_at_rest(procedural_resolver):
    timeline = assemble(["HELLO"], resolver=procedural_resolver)
    end = scrub(timeline, timeline.total_duration_ms)
    assert end.face.expression == "neutral"
    assert end.right_hand.handshape == "relaxed"


def test_shared_boundary_goes_to_later_track(procedural_resolver):
    timeline = assemble(["HELLO", "GOODBYE"], resolver=procedural_resolver)
    assert timeline.track_at(1500).gloss == TRANSITION_GLOSS
    assert timeline.track_at(1499.9).gloss == "HELLO"
    assert timeline.track_at(1650).gloss == "GOODBYE"


def test_video_region_returns_empty_pose(resolver):
    timeline = assemble(["HELLO"], "ASL", resolver=resolver)
    assert timeline.scrub(900).is_empty


def test_fingerspelling_handshape_holds_per_letter(procedural_resolver):
    timeline = assemble(["AB"], resolver=procedural_resolver)
    assert scrub(timeline, 400).right_hand.handshape == "fist_thumb_side"
    assert scrub(timeline, 799).right_hand.handshape == "fist_thumb_side"
    assert scrub(timeline, 1200).right_hand.handshape == "flat_thumb_tucked"


def test_discrete_fields_switch_after_midpoint():
    track = AnimationTrack(
        gloss="X",
        kind=TrackKind.PROCEDURAL,
        start_ms=0.0,
        end_ms=100.0,
        keyframes=(
            PoseFrame(0, right_hand=HandPose((0, 0, 0), handshape="fist"), face=FacePose("neutral")),
            PoseFrame(100, right_hand=HandPose((1, 0, 0), handshape="point"), face=FacePose("smile")),
        ),
    )
    timeline = Timeline((track,))
    assert timeline.scrub(40).right_hand.handshape == "fist"
    assert timeline.scrub(60).right_hand.handshape == "point"
    assert timeline.scrub(60).face.expression == "smile"


def test_to_dict(procedural_resolver):
    data = assemble(["HI", "YES"], resolver=procedural_resolver).to_dict()
    assert data["total_duration_ms"] == pytest.approx(1000 + 150 + 1200)
    assert [s["is_transition"] for s in data["signs"]] == [False, True, False]
    assert data["signs"][0]["frames"][0]["timestamp_ms"] == 0
    assert data["signs"][0]["source"] == "procedural"
