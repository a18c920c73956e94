"""Pitch module - Composition, lifecycle and export."""

from pitchforge.pitch.composer import PitchComposer, compose
from pitchforge.pitch.lifecycle import TRANSITIONS, apply_action, can_transition, save_edit
from pitchforge.pitch.export import render_html

__all__ = [
    "PitchComposer",
    "compose",
    "TRANSITIONS",
    "apply_action",
    "can_transition",
    "save_edit",
    "render_html",
]
