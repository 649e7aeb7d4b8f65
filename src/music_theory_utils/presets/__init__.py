"""
Preset system - named chord stacks and scale step patterns.

Built-in presets cover the common chords and the diatonic modes.
Project presets are loaded from YAML and override built-ins.
"""

from music_theory_utils.presets.loader import PresetLoader

__all__ = [
    "PresetLoader",
]
