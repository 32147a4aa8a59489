# --------------------------------------------------------------------------
# THEORY TOOLBOX: MUSIC21-BACKED HELPERS
# --------------------------------------------------------------------------
"""
Scale, roman numeral, chord and MIDI helpers used by the cadence engine.

Note names use the library spelling: an upper-case letter followed by ``#``
for sharps or ``b`` for flats (``"C#"``, ``"Bb"``). music21 spells flats with
``-`` (``"B-"``), so every helper converts at its boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from music21 import chord, key, pitch, roman, scale

from .errors import CollaboratorError, ConfigurationError


class ChordQuality(str, Enum):
    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"


@dataclass(frozen=True)
class RomanNumeral:
    """Roman-numeral classification of a diatonic triad."""
    degree: int  # 1..7
    figure: str  # 'V', 'ii', 'viio'
    quality: ChordQuality


SCALE_CLASSES = {
    "ionian": scale.MajorScale,
    "major": scale.MajorScale,
    "dorian": scale.DorianScale,
    "phrygian": scale.PhrygianScale,
    "lydian": scale.LydianScale,
    "mixolydian": scale.MixolydianScale,
    "aeolian": scale.MinorScale,
    "minor": scale.MinorScale,
    "locrian": scale.LocrianScale,
}

_TRIAD_INTERVALS = {
    ChordQuality.MAJOR: ("M3", "P5"),
    ChordQuality.MINOR: ("m3", "P5"),
    ChordQuality.DIMINISHED: ("m3", "d5"),
}


# ==========================================================================
# NOTE NAME CONVERSION
# ==========================================================================

def to_music21_name(note_name: str) -> str:
    """Convert 'Bb' / 'bb' / 'C#4' into music21 spelling ('B-', 'B-', 'C#4')."""
    name = (note_name or "").strip()
    if not name:
        raise ConfigurationError("empty note name")
    return name[0].upper() + name[1:].replace("b", "-")


def from_music21_name(name: str) -> str:
    """Convert a music21 pitch name ('B-') back to library spelling ('Bb')."""
    return name.replace("-", "b")


def _scale_for(key_name: str, mode: str):
    try:
        scale_class = SCALE_CLASSES[mode.lower()]
    except KeyError:
        raise ConfigurationError(f"unknown scale: {mode}")
    return scale_class(to_music21_name(key_name))


# ==========================================================================
# TOOL 1: Scale Notes
# ==========================================================================

def scale_notes(key_name: str, mode: str) -> List[str]:
    """
    Return the seven diatonic note names of ``key_name`` in ``mode``.

    Args:
        key_name (str): Tonic, e.g. 'C', 'F#', 'Bb'.
        mode (str): One of the names in SCALE_CLASSES.

    Returns:
        List[str]: Degrees 1..7 in order, e.g. ['C', 'D', 'E', 'F', 'G', 'A', 'B'].
    """
    sc = _scale_for(key_name, mode)

    # One octave from the tonic; the upper tonic repeats the first name
    notes = []
    for p in sc.pitches:
        name = from_music21_name(p.name)
        if name not in notes:
            notes.append(name)

    if len(notes) != 7:
        raise CollaboratorError(f"expected 7 scale notes for {key_name} {mode}, got {notes}")
    return notes


# ==========================================================================
# TOOL 2: Roman Numeral Classification
# ==========================================================================

_KEY_MODES = {"ionian": "major", "aeolian": "minor"}


def _key_for(key_name: str, mode: str) -> key.Key:
    mode = mode.lower()
    return key.Key(to_music21_name(key_name), _KEY_MODES.get(mode, mode))


def stacked_triad(notes: List[str]) -> chord.Chord:
    """
    Build a root-position chord from three note names, each voice placed
    above the previous one so music21 reads no inversion.
    """
    pitches = []
    for name in notes:
        p = pitch.Pitch(to_music21_name(name))
        p.octave = pitches[-1].octave if pitches else 4
        if pitches and p.ps <= pitches[-1].ps:
            p.octave += 1
        pitches.append(p)
    return chord.Chord(pitches)


def roman_label(key_name: str, mode: str, note_name: str) -> RomanNumeral:
    """
    Classify the diatonic triad built on ``note_name`` within a key and mode.

    The triad is analyzed with music21's roman numeral analysis, so the
    figure is upper-case for major, lower-case for minor and lower-case
    with a trailing 'o' for diminished.

    Raises:
        CollaboratorError: ``note_name`` is not one of the scale's notes, or
                           music21 cannot classify its triad.
    """
    notes = scale_notes(key_name, mode)
    wanted = from_music21_name(to_music21_name(note_name))
    if wanted not in notes:
        raise CollaboratorError(f"note {note_name} is not in {key_name} {mode}: {notes}")

    index = notes.index(wanted)
    triad = stacked_triad([notes[(index + step) % 7] for step in (0, 2, 4)])

    try:
        rn = roman.romanNumeralFromChord(triad, _key_for(key_name, mode))
    except roman.RomanNumeralException as e:
        raise CollaboratorError(f"cannot classify {triad.pitchedCommonName} in {key_name} {mode}: {e}")

    try:
        quality = ChordQuality(rn.quality)
    except ValueError:
        raise CollaboratorError(f"unsupported triad quality '{rn.quality}' for {rn.figure}")

    return RomanNumeral(degree=rn.scaleDegree, figure=rn.figure, quality=quality)


# ==========================================================================
# TOOL 3: Chord Tones
# ==========================================================================

def chord_tones(root_note: str, quality: Union[ChordQuality, str]) -> List[str]:
    """
    Return [root, third, fifth] of the triad on ``root_note``.

    Intervals are spelled by music21, so B diminished is ['B', 'D', 'F'] and
    G# major is ['G#', 'B#', 'D#'].
    """
    try:
        quality = ChordQuality(quality)
    except ValueError:
        raise ConfigurationError(f"unknown chord quality: {quality}")

    root = pitch.Pitch(to_music21_name(root_note))
    third, fifth = (root.transpose(name) for name in _TRIAD_INTERVALS[quality])
    return [from_music21_name(p.name) for p in (root, third, fifth)]


# ==========================================================================
# TOOL 4: MIDI Numbers
# ==========================================================================

def to_midi_number(note_with_octave: str) -> int:
    """
    Convert a named pitch with octave ('C4', 'Bb3') to its MIDI number (C4 = 60).

    Raises:
        ConfigurationError: the note carries no octave, or lies outside the
                            MIDI range 0-127.
    """
    p = pitch.Pitch(to_music21_name(note_with_octave))
    if p.octave is None:
        raise ConfigurationError(f"note {note_with_octave} has no octave")

    # Pitch.midi folds out-of-range values back by octaves; ps does not
    number = int(round(p.ps))
    if not 0 <= number <= 127:
        raise ConfigurationError(f"note {note_with_octave} is outside the MIDI range: {number}")
    return number
