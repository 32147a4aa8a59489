#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cadence engine: the chords of perfect, imperfect, half, plagal and deceptive
cadences in any diatonic key and mode.

Usage:
    >>> mc = MusicCadence(octave=4)
    >>> mc.cadence(type="perfect")
    [['G4', 'B4', 'D4'], ['C4', 'E4', 'G4', 'C5']]
    >>> mc.cadence(type="half", leading=2, octave=0)
    [['D', 'F', 'A'], ['G', 'B', 'D']]
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple, Union

from .config import get_config
from .errors import CollaboratorError, ConfigurationError
from .music21_tools import (
    ChordQuality,
    RomanNumeral,
    chord_tones,
    roman_label,
    scale_notes,
    to_midi_number,
)
from .schemas import validate_arguments

logger = logging.getLogger(__name__)

# Scale degree whose diatonic triad is diminished, per mode
DIMINISHED_DEGREES = MappingProxyType({
    "ionian": 7,
    "major": 7,
    "dorian": 6,
    "phrygian": 5,
    "lydian": 4,
    "mixolydian": 3,
    "aeolian": 2,
    "minor": 2,
    "locrian": 1,
})

CADENCE_TYPES = ("perfect", "imperfect", "half", "plagal", "deceptive")
OUTPUT_FORMATS = ("isobase", "midi", "midinum")

Token = Union[str, int]


@dataclass(frozen=True)
class Tone:
    """A chord tone: pitch-class spelling plus an optional octave."""
    name: str
    octave: Optional[int] = None

    def raised(self) -> "Tone":
        """The same pitch class one octave up; no octave stays no octave."""
        if self.octave is None:
            return self
        return Tone(self.name, self.octave + 1)

    def render(self, output_format: str) -> Token:
        """
        Render as a note name ('isobase', 'midi') or MIDI number ('midinum').

        render_chord always gives midinum tones an octave; a Tone built
        directly without one cannot be rendered as a MIDI number.
        """
        if output_format == "midinum":
            if self.octave is None:
                raise ConfigurationError("midinum format requires an octave")
            return to_midi_number(f"{self.name}{self.octave}")

        name = self.name
        if output_format == "midi":
            name = name.replace("#", "s", 1).replace("b", "f", 1)
        elif output_format != "isobase":
            raise ConfigurationError(f"unknown format: {output_format}")

        if self.octave is None:
            return name
        return f"{name}{self.octave}"


# ==========================================================================
# DEGREE SELECTION
# ==========================================================================

def select_degrees(cadence_type: str, leading: int = 1, variation: int = 1) -> Tuple[int, int]:
    """
    Return the (first, second) scale degrees (1-based) of a cadence.

    - perfect:   V -> I
    - plagal:    IV -> I
    - half:      ``leading`` -> V
    - deceptive: V -> VI when ``variation`` is 1, V -> IV otherwise
    - imperfect: VII -> V when ``variation`` is 3, V -> V otherwise
    """
    if not isinstance(leading, int) or not 1 <= leading <= 7:
        raise ConfigurationError(f"unknown leader: {leading}")

    if cadence_type == "perfect":
        return 5, 1
    elif cadence_type == "plagal":
        return 4, 1
    elif cadence_type == "half":
        return leading, 5
    elif cadence_type == "deceptive":
        return 5, (6 if variation == 1 else 4)
    elif cadence_type == "imperfect":
        return (7 if variation == 3 else 5), 5

    raise ConfigurationError(f"unknown cadence: {cadence_type}")


# ==========================================================================
# CHORD RENDERING
# ==========================================================================

def diminished_degree(mode: str) -> int:
    try:
        return DIMINISHED_DEGREES[mode.lower()]
    except (KeyError, AttributeError):
        raise ConfigurationError(f"unknown scale: {mode}")


def chord_quality(mode: str, label: RomanNumeral) -> ChordQuality:
    """Diminished on the mode's diminished degree, else minor or major as labelled."""
    if label.degree == diminished_degree(mode):
        return ChordQuality.DIMINISHED
    if label.quality is ChordQuality.MINOR:
        return ChordQuality.MINOR
    return ChordQuality.MAJOR


def render_chord(
    key_name: str,
    mode: str,
    root_note: str,
    octave: int = 0,
    output_format: str = "isobase",
    closure: bool = False,
) -> List[Token]:
    """
    Build and render the diatonic triad on ``root_note``.

    Args:
        key_name (str): Tonic of the key.
        mode (str): Scale or mode name.
        root_note (str): Chord root, one of the scale's notes.
        octave (int): Octave given to every tone. Under isobase/midi 0 means
                      no octave suffix; under midinum it is used as is.
        output_format (str): 'isobase', 'midi' or 'midinum'.
        closure (bool): Append the lowest tone one octave higher.

    Returns:
        List[Union[str, int]]: Three tokens, four with ``closure``.
    """
    if output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(f"unknown format: {output_format}")
    diminished_degree(mode)

    # 1. Classify the root within the key and derive the quality
    label = roman_label(key_name, mode, root_note)
    quality = chord_quality(mode, label)

    # 2. Build the triad
    names = chord_tones(root_note, quality)

    # 3. Attach octaves; midinum always needs one
    tone_octave = octave if output_format == "midinum" else (octave or None)
    tones = [Tone(name, tone_octave) for name in names]
    if closure:
        tones.append(tones[0].raised())

    return [tone.render(output_format) for tone in tones]


# ==========================================================================
# ENGINE
# ==========================================================================

class MusicCadence:
    """
    Cadence generator holding a default key, scale, octave and format.

    Defaults not given to the constructor come from the CADENCE_* settings in
    :mod:`music_cadence.config`.
    """

    def __init__(
        self,
        key: Optional[str] = None,
        scale: Optional[str] = None,
        octave: Optional[int] = None,
        format: Optional[str] = None,
    ):
        config = get_config()
        self.key = key if key is not None else config["CADENCE_KEY"]
        self.scale = scale if scale is not None else config["CADENCE_SCALE"]
        self.octave = octave if octave is not None else config["CADENCE_OCTAVE"]
        self.format = format if format is not None else config["CADENCE_FORMAT"]

        validate_arguments("get_cadence_chords", {
            "key": self.key,
            "scale": self.scale,
            "octave": self.octave,
            "format": self.format,
        })

    def _arguments(self, tool_name: str, overrides: Dict[str, Any]) -> Dict[str, Any]:
        validate_arguments(tool_name, overrides)
        config = get_config()
        args = {
            "key": self.key,
            "scale": self.scale,
            "octave": self.octave,
            "format": self.format,
            "type": config["CADENCE_TYPE"],
            "leading": config["CADENCE_LEADING"],
            "variation": config["CADENCE_VARIATION"],
        }
        args.update(overrides)
        return args

    def _degree_notes(self, args: Dict[str, Any]) -> List[str]:
        degrees = select_degrees(args["type"], args["leading"], args["variation"])
        diminished_degree(args["scale"])
        notes = scale_notes(args["key"], args["scale"])
        if len(notes) != 7:
            raise CollaboratorError(f"expected 7 scale notes for {args['key']} {args['scale']}, got {notes}")
        logger.debug("%s cadence in %s %s: degrees %s", args["type"], args["key"], args["scale"], degrees)
        return [notes[degree - 1] for degree in degrees]

    def _chords(self, args: Dict[str, Any], roots: List[str]) -> List[List[Token]]:
        chords = []
        for position, root in enumerate(roots):
            chords.append(render_chord(
                args["key"],
                args["scale"],
                root,
                octave=args["octave"],
                output_format=args["format"],
                closure=(args["type"] == "perfect" and position == 1),
            ))

        logger.debug("rendered %s", chords)
        return chords

    def _figures(self, args: Dict[str, Any], roots: List[str]) -> List[str]:
        return [roman_label(args["key"], args["scale"], root).figure for root in roots]

    def cadence(self, **overrides) -> List[List[Token]]:
        """
        Return the two chords of a cadence.

        Keyword arguments override the instance defaults: key, scale, octave,
        format, plus type (default 'perfect'), leading (default 1) and
        variation (default 1).
        """
        args = self._arguments("get_cadence_chords", overrides)
        return self._chords(args, self._degree_notes(args))

    def roman_numerals(self, **overrides) -> List[str]:
        """Return the roman numeral figures of the cadence chords, e.g. ['V', 'I']."""
        args = self._arguments("get_cadence_roman_numerals", overrides)
        return self._figures(args, self._degree_notes(args))

    def describe(self, **overrides) -> str:
        """One-line summary, e.g. 'Perfect cadence in C major: V (G B D) -> I (C E G C)'."""
        args = self._arguments("get_cadence_chords", overrides)
        roots = self._degree_notes(args)
        steps = [
            f"{figure} ({' '.join(str(token) for token in chord)})"
            for figure, chord in zip(self._figures(args, roots), self._chords(args, roots))
        ]
        return f"{args['type'].capitalize()} cadence in {args['key']} {args['scale']}: {' -> '.join(steps)}"


def cadence(**arguments) -> List[List[Token]]:
    """Cadence chords using the configured defaults; see MusicCadence.cadence."""
    return MusicCadence().cadence(**arguments)
