#!/usr/bin/env python3
"""
Command-line entry point for the music theory library.

Examples:
    music-theory note C#4
    music-theory add Db4 m10
    music-theory interval A3 F5
    music-theory chord Ab dominant_seventh --invert 1
    music-theory scale A major --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from music_theory_utils.core.interval import Interval
from music_theory_utils.core.note import Note
from music_theory_utils.errors import MusicTheoryError
from music_theory_utils.models.preset import PatternKind
from music_theory_utils.models.results import (
    ChordResult,
    ErrorResult,
    IntervalResult,
    NoteResult,
    PresetListResult,
    ScaleResult,
)
from music_theory_utils.presets import PresetLoader

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="music-theory",
        description="Spell notes, intervals, chords and scales",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--presets",
        type=Path,
        default=None,
        help="YAML file with project chord/scale presets",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    note = commands.add_parser("note", help="Describe a note")
    note.add_argument("note", help="Note, e.g. 'C#' or 'Bb3'")

    add = commands.add_parser("add", help="Add an interval to a note")
    add.add_argument("note", help="Starting note")
    add.add_argument("interval", help="Interval, e.g. 'M3' or 'P12'")

    interval = commands.add_parser("interval", help="Name the interval between two notes")
    interval.add_argument("lower", help="Lower note")
    interval.add_argument("upper", help="Upper note")

    chord = commands.add_parser("chord", help="Spell a chord from a preset")
    chord.add_argument("root", help="Root note")
    chord.add_argument("name", help="Chord preset, e.g. 'major_triad'")
    chord.add_argument("--invert", type=int, default=0, help="Number of inversions")

    scale = commands.add_parser("scale", help="Spell a scale from a preset")
    scale.add_argument("root", help="Root note")
    scale.add_argument("name", help="Scale preset, e.g. 'dorian'")

    presets = commands.add_parser("presets", help="List chord and scale presets")
    presets.add_argument(
        "--kind",
        choices=[kind.value for kind in PatternKind],
        default=None,
        help="Only list chord or scale presets",
    )

    return parser


def run(args: argparse.Namespace) -> tuple[BaseModel, str]:
    """
    Execute a parsed command.

    Returns:
        The result model and its text rendering
    """
    loader = PresetLoader(project_path=args.presets)

    if args.command == "note":
        note = Note.parse(args.note)
        result = NoteResult.from_note(note)
        return result, f"{result.note} ({result.type}, value {result.value})"

    if args.command == "add":
        note = Note.parse(args.note)
        added = note.add_interval(Interval.parse(args.interval))
        return NoteResult.from_note(added), str(added)

    if args.command == "interval":
        lower, upper = Note.parse(args.lower), Note.parse(args.upper)
        between = lower.interval_to(upper)
        result = IntervalResult.from_notes(lower, upper, between)
        return result, f"{result.interval} ({result.semitones} semitones)"

    if args.command == "chord":
        chord = loader.build_chord(Note.parse(args.root), args.name)
        if args.invert:
            chord = chord.invert(args.invert)
        return ChordResult.from_chord(args.name, chord, args.invert), str(chord)

    if args.command == "scale":
        scale = loader.build_scale(Note.parse(args.root), args.name)
        return ScaleResult.from_scale(args.name, scale), str(scale)

    # presets
    kind = PatternKind(args.kind) if args.kind else None
    patterns = loader.list_patterns(kind)
    text = "\n".join(
        f"{p.kind.value:<6} {p.name:<24} {' '.join(p.intervals)}" for p in patterns
    )
    return PresetListResult(presets=patterns, count=len(patterns)), text


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        result, text = run(args)
    except MusicTheoryError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        if args.json:
            print(ErrorResult.from_error(e).model_dump_json())
        else:
            print(f"error: {e.message}", file=sys.stderr)
        return 1

    print(result.model_dump_json() if args.json else text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
