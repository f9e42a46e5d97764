import io

import mido
import pytest
import soundfile as sf

from services.playback import (
    PREVIEW_SR,
    melody_midi_bytes,
    melody_to_midi,
    melody_wav_bytes,
    midi_to_hz,
    pitch_to_midi,
    render_melody,
)
from songbank.melody import NOTE_COUNT, SCALES, generate_melody


def test_melody_reference_sequence():
    melody = generate_melody(42)
    assert melody.scale == "A minor"
    assert [n.pitch for n in melody.notes] == [
        "D4", "G4", "F4", "B3", "E4", "C4", "E4", "G4",
        "D4", "B3", "A4", "F4", "C4", "B3", "E4", "F4",
    ]


def test_melody_timing():
    melody = generate_melody(7)
    assert len(melody.notes) == NOTE_COUNT
    assert [n.start_time for n in melody.notes] == [0.25 * k for k in range(16)]
    assert all(n.duration == 0.2 for n in melody.notes)
    assert melody.total_duration == 4.0


def test_melody_is_reproducible_and_in_scale():
    for seed in (0, 42, 123456, 2**32 - 1):
        a = generate_melody(seed)
        assert a == generate_melody(seed)
        pitches = dict(SCALES)[a.scale]
        assert all(n.pitch in pitches for n in a.notes)


def test_melody_to_dict_uses_wire_keys():
    payload = generate_melody(42, duration=6).to_dict()
    assert payload["totalDuration"] == 6.0
    assert set(payload["notes"][0]) == {"pitch", "startTime", "duration"}


def test_pitch_to_midi():
    assert pitch_to_midi("A4") == 69
    assert pitch_to_midi("C4") == 60
    assert pitch_to_midi("F#4") == 66
    assert pitch_to_midi("C#5") == 73
    assert pitch_to_midi("Bb3") == 58
    assert midi_to_hz(69) == 440.0
    with pytest.raises(ValueError):
        pitch_to_midi("H2")


def test_render_melody_length_and_level():
    audio = render_melody(generate_melody(42))
    assert audio.size == int(4.5 * PREVIEW_SR)
    peak = float(abs(audio).max())
    assert 0.79 < peak <= 0.8 + 1e-6


def test_wav_preview_round_trips_through_soundfile():
    data, sr = sf.read(io.BytesIO(melody_wav_bytes(generate_melody(42))))
    assert sr == PREVIEW_SR
    assert data.ndim == 1
    assert len(data) == int(4.5 * PREVIEW_SR)


def test_midi_export():
    melody = generate_melody(42)
    mf = melody_to_midi(melody)
    ons = [m for m in mf.tracks[0] if m.type == "note_on"]
    offs = [m for m in mf.tracks[0] if m.type == "note_off"]
    assert len(ons) == len(offs) == 16
    assert [m.note for m in ons] == [pitch_to_midi(n.pitch) for n in melody.notes]
    assert mf.length == pytest.approx(4.0)


def test_midi_bytes_parse_back():
    mf = mido.MidiFile(file=io.BytesIO(melody_midi_bytes(generate_melody(3))))
    assert mf.ticks_per_beat == 480
    assert sum(1 for m in mf.tracks[0] if m.type == "note_on") == 16
