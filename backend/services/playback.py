import io
import logging
import math
import re

import mido
import numpy as np
import soundfile as sf

from songbank.melody import Melody

logger = logging.getLogger(__name__)

PREVIEW_SR = 22050
MIDI_BPM = 120
MIDI_TICKS_PER_BEAT = 480
MIDI_VELOCITY = 90

# Browser player voice: triangle oscillator with a short pluck envelope.
ATTACK = 0.05
DECAY = 0.1
SUSTAIN = 0.3
RELEASE = 0.5

_PITCH_RE = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)$")
_SEMITONES = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}


def pitch_to_midi(pitch: str) -> int:
    m = _PITCH_RE.match(pitch.strip())
    if not m:
        raise ValueError(f"Unrecognised pitch name: {pitch!r}")
    letter, accidental, octave = m.groups()
    semitone = _SEMITONES[letter.upper()]
    if accidental == "#":
        semitone += 1
    elif accidental == "b":
        semitone -= 1
    return 12 * (int(octave) + 1) + semitone


def midi_to_hz(note: int) -> float:
    return 440.0 * (2.0 ** ((note - 69) / 12.0))


def _triangle(t: np.ndarray, hz: float) -> np.ndarray:
    phase = hz * t - np.floor(hz * t)
    return (4.0 * np.abs(phase - 0.5) - 1.0).astype(np.float32)


def _note_envelope(t: np.ndarray, hold: float) -> np.ndarray:
    env = np.zeros_like(t, dtype=np.float32)

    mask_a = t < ATTACK
    env[mask_a] = t[mask_a] / ATTACK

    mask_d = (t >= ATTACK) & (t < ATTACK + DECAY)
    td = (t[mask_d] - ATTACK) / DECAY
    env[mask_d] = 1.0 + (SUSTAIN - 1.0) * td

    mask_s = (t >= ATTACK + DECAY) & (t < hold)
    env[mask_s] = SUSTAIN

    # Release starts from whatever level the gate closed at.
    gate_level = float(np.interp(hold, [0.0, ATTACK, ATTACK + DECAY], [0.0, 1.0, SUSTAIN]))
    mask_r = t >= hold
    tr = (t[mask_r] - hold) / RELEASE
    env[mask_r] = gate_level * np.clip(1.0 - tr, 0.0, 1.0)
    return env


def render_melody(melody: Melody, sr: int = PREVIEW_SR) -> np.ndarray:
    tail = RELEASE
    total = max(melody.total_duration, max((n.start_time + n.duration for n in melody.notes), default=0.0)) + tail
    out = np.zeros(int(math.ceil(total * sr)), dtype=np.float32)

    for note in melody.notes:
        hz = midi_to_hz(pitch_to_midi(note.pitch))
        length = note.duration + RELEASE
        t = np.arange(int(length * sr), dtype=np.float32) / float(sr)
        voice = _triangle(t, hz) * _note_envelope(t, note.duration)
        start_idx = int(round(note.start_time * sr))
        end_idx = min(out.size, start_idx + voice.size)
        if end_idx > start_idx:
            out[start_idx:end_idx] += voice[: end_idx - start_idx]

    peak = float(np.max(np.abs(out))) if out.size else 0.0
    if peak > 0:
        out = out / peak * 0.8
    return out.astype(np.float32)


def melody_wav_bytes(melody: Melody, sr: int = PREVIEW_SR) -> bytes:
    buffer = io.BytesIO()
    sf.write(buffer, render_melody(melody, sr), sr, format="WAV", subtype="PCM_16")
    return buffer.getvalue()


def _seconds_to_ticks(seconds: float) -> int:
    beats = seconds * MIDI_BPM / 60.0
    return int(round(beats * MIDI_TICKS_PER_BEAT))


def melody_to_midi(melody: Melody) -> mido.MidiFile:
    mf = mido.MidiFile(ticks_per_beat=MIDI_TICKS_PER_BEAT)
    track = mido.MidiTrack()
    mf.tracks.append(track)
    track.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(MIDI_BPM), time=0))
    track.append(mido.MetaMessage("track_name", name=melody.scale, time=0))

    events = []
    for note in melody.notes:
        number = pitch_to_midi(note.pitch)
        events.append((_seconds_to_ticks(note.start_time), 1, number))
        events.append((_seconds_to_ticks(note.start_time + note.duration), 0, number))
    # note_off sorts before note_on at the same tick
    events.sort()

    last_tick = 0
    for tick, is_on, number in events:
        msg_type = "note_on" if is_on else "note_off"
        track.append(mido.Message(msg_type, note=number, velocity=MIDI_VELOCITY if is_on else 0, time=tick - last_tick))
        last_tick = tick

    end_tick = _seconds_to_ticks(melody.total_duration)
    track.append(mido.MetaMessage("end_of_track", time=max(0, end_tick - last_tick)))
    return mf


def melody_midi_bytes(melody: Melody) -> bytes:
    buffer = io.BytesIO()
    melody_to_midi(melody).save(file=buffer)
    return buffer.getvalue()

