"""
Melody generation: one scale pick, then 16 evenly spaced notes.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .rng import make_rng

NOTE_COUNT = 16
NOTE_SPACING = 0.25
NOTE_DURATION = 0.2
DEFAULT_DURATION = 4.0

# Each scale spans one octave, tonic to tonic.
SCALES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("C major", ("C4", "D4", "E4", "F4", "G4", "A4", "B4", "C5")),
    ("A minor", ("A3", "B3", "C4", "D4", "E4", "F4", "G4", "A4")),
    ("D major", ("D4", "E4", "F#4", "G4", "A4", "B4", "C#5", "D5")),
)


@dataclass(frozen=True)
class Note:
    pitch: str
    start_time: float
    duration: float


@dataclass
class Melody:
    scale: str
    notes: List[Note] = field(default_factory=list)
    total_duration: float = DEFAULT_DURATION

    def to_dict(self) -> Dict:
        return {
            "scale": self.scale,
            "notes": [
                {"pitch": n.pitch, "startTime": n.start_time, "duration": n.duration}
                for n in self.notes
            ],
            "totalDuration": self.total_duration,
        }


def generate_melody(item_seed: int, duration: float = DEFAULT_DURATION) -> Melody:
    rng = make_rng(item_seed)
    scale_name, pitches = rng.choice(SCALES)
    notes = [
        Note(pitch=rng.choice(pitches), start_time=NOTE_SPACING * k, duration=NOTE_DURATION)
        for k in range(NOTE_COUNT)
    ]
    return Melody(scale=scale_name, notes=notes, total_duration=float(duration))
