"""
Preset loader - built-in and project interval patterns.

Presets can come from:
1. Built-in library (the Chord and Scale constants)
2. Project presets (a YAML file in the user's project)

A project file looks like:

    chords:
      sus4:
        intervals: [P4, M2]
        description: Suspended fourth
    scales:
      harmonic_minor:
        intervals: [M2, m2, M2, M2, m2, A2, m2]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from music_theory_utils.core.chord import Chord
from music_theory_utils.core.note import Note
from music_theory_utils.core.scale import Scale
from music_theory_utils.errors import MusicTheoryError
from music_theory_utils.models.preset import IntervalPattern, PatternKind

logger = logging.getLogger(__name__)

_SECTIONS: dict[PatternKind, str] = {
    PatternKind.CHORD: "chords",
    PatternKind.SCALE: "scales",
}


def _builtin_patterns() -> dict[PatternKind, dict[str, IntervalPattern]]:
    """The shipped chord stacks and modes."""
    chords = {
        "major_triad": (Chord.MAJOR_TRIAD, "Major triad"),
        "minor_triad": (Chord.MINOR_TRIAD, "Minor triad"),
        "diminished_triad": (Chord.DIMINISHED_TRIAD, "Diminished triad"),
        "major_seventh": (Chord.MAJOR_SEVENTH, "Major seventh"),
        "minor_seventh": (Chord.MINOR_SEVENTH, "Minor seventh"),
        "dominant_seventh": (Chord.DOMINANT_SEVENTH, "Dominant seventh"),
        "diminished_seventh": (Chord.DIMINISHED_SEVENTH, "Fully diminished seventh"),
        "half_diminished_seventh": (Chord.HALF_DIMINISHED_SEVENTH, "Half-diminished seventh"),
    }
    scales = {
        "major": (Scale.MAJOR, "Major (ionian)"),
        "ionian": (Scale.IONIAN, "Ionian mode"),
        "dorian": (Scale.DORIAN, "Dorian mode"),
        "phrygian": (Scale.PHRYGIAN, "Phrygian mode"),
        "lydian": (Scale.LYDIAN, "Lydian mode"),
        "mixolydian": (Scale.MIXOLYDIAN, "Mixolydian mode"),
        "minor": (Scale.MINOR, "Natural minor (aeolian)"),
        "aeolian": (Scale.AEOLIAN, "Aeolian mode"),
        "locrian": (Scale.LOCRIAN, "Locrian mode"),
    }
    return {
        PatternKind.CHORD: {
            name: IntervalPattern.from_intervals(name, PatternKind.CHORD, intervals, description)
            for name, (intervals, description) in chords.items()
        },
        PatternKind.SCALE: {
            name: IntervalPattern.from_intervals(name, PatternKind.SCALE, intervals, description)
            for name, (intervals, description) in scales.items()
        },
    }


class PresetLoader:
    """
    Resolves preset names to interval patterns.

    Project presets override built-in presets with the same name.
    """

    def __init__(self, project_path: Path | None = None):
        """
        Initialize the preset loader.

        Args:
            project_path: Path to a project presets YAML file
        """
        self.project_path = project_path
        self._builtin = _builtin_patterns()
        self._cache: dict[PatternKind, dict[str, IntervalPattern]] | None = None

    def list_patterns(self, kind: PatternKind | None = None) -> list[IntervalPattern]:
        """
        List all available presets.

        Args:
            kind: Optional filter (chord or scale)

        Returns:
            Presets sorted by kind, then name
        """
        patterns = self._patterns()
        kinds = [kind] if kind else list(PatternKind)
        return [patterns[k][name] for k in kinds for name in sorted(patterns[k])]

    def get_pattern(self, kind: PatternKind, name: str) -> IntervalPattern | None:
        """
        Get a preset by kind and name.

        Returns:
            The preset if found, None otherwise
        """
        return self._patterns()[kind].get(name)

    def build_chord(self, root: Note, name: str) -> Chord:
        """
        Build a chord on `root` from a chord preset.

        Raises:
            MusicTheoryError: INVALID_INPUT if the preset does not exist
        """
        pattern = self._require(PatternKind.CHORD, name)
        return Chord(root, pattern.to_intervals())

    def build_scale(self, root: Note, name: str) -> Scale:
        """
        Build a scale on `root` from a scale preset.

        Raises:
            MusicTheoryError: INVALID_INPUT if the preset does not exist
        """
        pattern = self._require(PatternKind.SCALE, name)
        return Scale(root, pattern.to_intervals())

    def clear_cache(self) -> None:
        """Forget loaded project presets so the file is read again."""
        self._cache = None

    def _require(self, kind: PatternKind, name: str) -> IntervalPattern:
        pattern = self.get_pattern(kind, name)
        if pattern is None:
            raise MusicTheoryError.invalid_input(
                "name", f"Unknown {kind.value} preset: {name}", value=name
            )
        return pattern

    def _patterns(self) -> dict[PatternKind, dict[str, IntervalPattern]]:
        if self._cache is not None:
            return self._cache

        merged = {kind: dict(patterns) for kind, patterns in self._builtin.items()}
        if self.project_path and self.project_path.exists():
            for kind, patterns in self._load_project_file(self.project_path).items():
                merged[kind].update(patterns)

        self._cache = merged
        return merged

    def _load_project_file(self, path: Path) -> dict[PatternKind, dict[str, IntervalPattern]]:
        """Load presets from a YAML file. Unreadable files are skipped with a warning."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            patterns = self._parse_presets(data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError, AttributeError):
            logger.warning("Failed to load presets from %s", path, exc_info=True)
            return {}

        logger.debug(
            "Loaded %d project preset(s) from %s",
            sum(len(p) for p in patterns.values()),
            path,
        )
        return patterns

    def _parse_presets(self, data: dict[str, Any]) -> dict[PatternKind, dict[str, IntervalPattern]]:
        """Parse presets from YAML data."""
        result: dict[PatternKind, dict[str, IntervalPattern]] = {}
        for kind, section in _SECTIONS.items():
            entries = data.get(section) or {}
            result[kind] = {
                str(name): IntervalPattern(
                    name=str(name),
                    kind=kind,
                    intervals=entry.get("intervals", []),
                    description=entry.get("description", ""),
                )
                for name, entry in entries.items()
            }
        return result
