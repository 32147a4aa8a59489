"""
music_cadence: the chords of musical cadences in any diatonic key and mode.
"""

import logging

from .cadence import (
    CADENCE_TYPES,
    DIMINISHED_DEGREES,
    OUTPUT_FORMATS,
    MusicCadence,
    Tone,
    cadence,
    chord_quality,
    render_chord,
    select_degrees,
)
from .errors import CadenceError, CollaboratorError, ConfigurationError
from .music21_tools import ChordQuality, RomanNumeral

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
