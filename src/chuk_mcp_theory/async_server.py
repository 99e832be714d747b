#!/usr/bin/env python3
"""
Async Music Theory MCP Server using chuk-mcp-server

This server exposes a stateless music theory engine as MCP tools. Every
tool is a pure lookup or calculation over the built-in catalogs of
intervals, scales, chord types and progressions; the only state is the
per-session selected key and any progressions saved to the project.

The server provides tools for:
- Note names, frequencies and intervals
- Scales and scale membership
- Chord construction and diatonic harmony
- Chord identification and key detection
- Progressions, pivot chords and modulation advice
- Exporting progressions to MIDI files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.engine import TheoryEngine
from chuk_mcp_theory.progressions import ProgressionLoader
from chuk_mcp_theory.session import SelectionStore
from chuk_mcp_theory.tools import (
    register_analysis_tools,
    register_chord_tools,
    register_harmony_tools,
    register_note_tools,
    register_scale_tools,
    register_session_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory")

# Paths - use standard project structure under the project directory
BASE_PATH = Path(os.environ.get("CHUK_THEORY_PROJECT_DIR") or Path.cwd())
PROGRESSIONS_DIR = BASE_PATH / "progressions"
OUTPUT_DIR = BASE_PATH / "output"

# Shared state
engine = TheoryEngine()
progression_loader = ProgressionLoader(project_path=PROGRESSIONS_DIR)
selections = SelectionStore()

# Register all tools
note_tools = register_note_tools(mcp, engine)
scale_tools = register_scale_tools(mcp, engine, selections)
chord_tools = register_chord_tools(mcp, engine, selections)
analysis_tools = register_analysis_tools(mcp, engine)
harmony_tools = register_harmony_tools(mcp, engine, progression_loader, selections, OUTPUT_DIR)
session_tools = register_session_tools(mcp, selections)

# Export tool functions for direct access
theory_note_info = note_tools["theory_note_info"]
theory_note_to_frequency = note_tools["theory_note_to_frequency"]
theory_frequency_to_note = note_tools["theory_frequency_to_note"]
theory_interval = note_tools["theory_interval"]
theory_list_intervals = note_tools["theory_list_intervals"]

theory_list_scales = scale_tools["theory_list_scales"]
theory_scale_notes = scale_tools["theory_scale_notes"]
theory_note_in_scale = scale_tools["theory_note_in_scale"]

theory_list_chords = chord_tools["theory_list_chords"]
theory_build_chord = chord_tools["theory_build_chord"]
theory_diatonic_chords = chord_tools["theory_diatonic_chords"]

theory_identify_chord = analysis_tools["theory_identify_chord"]
theory_detect_key = analysis_tools["theory_detect_key"]

theory_list_progressions = harmony_tools["theory_list_progressions"]
theory_build_progression = harmony_tools["theory_build_progression"]
theory_save_progression = harmony_tools["theory_save_progression"]
theory_pivot_chords = harmony_tools["theory_pivot_chords"]
theory_suggest_modulation = harmony_tools["theory_suggest_modulation"]
theory_export_progression_midi = harmony_tools["theory_export_progression_midi"]

theory_set_key = session_tools["theory_set_key"]
theory_get_key = session_tools["theory_get_key"]

logger.info("CHUK Theory MCP Server initialized")
logger.info(f"  Progressions dir: {PROGRESSIONS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
