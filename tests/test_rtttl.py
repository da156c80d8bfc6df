import threading

import pytest

from reginakit.rtttl import Note, RtttlPlayer, parse_rtttl


def test_parse_worked_example_frequencies():
    notes = parse_rtttl("Test:d=4,o=5,b=120:c,8d#6,p,e.")
    assert [n.frequency for n in notes] == [523, 1245, 0, 659]


def test_parse_durations_relations():
    first, eighth, rest, dotted = parse_rtttl("Test:d=4,o=5,b=120:c,8d#6,p,e.")
    assert eighth.duration * 2 == first.duration
    assert rest.duration == first.duration
    assert rest.is_rest
    assert dotted.duration == first.duration + first.duration // 2


def test_default_tempo_and_octave_apply():
    assert parse_rtttl("x:d=4:c") == parse_rtttl("x:d=4,o=6,b=63:c")


def test_default_duration_when_missing():
    assert parse_rtttl("x:b=100:c") == parse_rtttl("x:d=4,b=100:4c")


def test_invalid_octave_falls_back_to_default():
    assert parse_rtttl("x:o=9,b=100:c") == parse_rtttl("x:o=6,b=100:c")


def test_faster_tempo_shortens_notes():
    slow = parse_rtttl("x:b=60:c")[0]
    fast = parse_rtttl("x:b=120:c")[0]
    assert fast.duration * 2 == slow.duration


def test_missing_colon_raises():
    with pytest.raises(ValueError):
        parse_rtttl("no header here")


def test_zero_tempo_raises():
    with pytest.raises(ValueError):
        parse_rtttl("x:b=0:c")


def test_note_below_table_raises():
    with pytest.raises(ValueError):
        parse_rtttl("x:o=3:c")


def test_empty_melody():
    assert parse_rtttl("x:d=4,o=5,b=120:") == []


def test_player_plays_all_notes():
    beeps = []
    delays = []
    player = RtttlPlayer(lambda f, d: beeps.append((f, d)), delays.append)
    text = "Test:d=4,o=5,b=120:c,8d#6,p,e."
    assert player.play(text) is True
    assert player.wait(5) is True
    notes = parse_rtttl(text)
    assert beeps == [(n.frequency, n.duration) for n in notes if n.frequency]
    assert delays == [n.duration for n in notes]
    assert player.is_playing() is False


def test_player_stop_halts_before_next_note():
    beeps = []
    player = RtttlPlayer(lambda f, d: beeps.append(f), lambda d: player.stop())
    player.play("x:d=4,o=5,b=120:c,d,e,f")
    assert player.wait(5) is True
    assert beeps == [523]


def test_player_refuses_second_melody_while_playing():
    release = threading.Event()
    player = RtttlPlayer(lambda f, d: None, lambda d: release.wait(5))
    assert player.play("x:b=120:c") is True
    assert player.is_playing() is True
    assert player.play("x:b=120:d") is False
    release.set()
    assert player.wait(5) is True


def test_player_bad_melody_raises_and_stays_idle():
    player = RtttlPlayer(lambda f, d: None, lambda d: None)
    with pytest.raises(ValueError):
        player.play("x:b=0:c")
    assert player.is_playing() is False


def test_note_rest_property():
    assert Note(0, 100).is_rest is True
    assert Note(440, 100).is_rest is False