"""
Harmony tools - MCP tools for progressions, pivot chords and modulation.

Progressions resolve through the ProgressionLoader, so project YAML
files under the progressions directory are usable by name alongside
the built-in catalog.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from chuk_mcp_theory.compiler import progression_to_midi, save_midi
from chuk_mcp_theory.constants import FILE_KEY_PATTERN, ErrorMessages, SuccessMessages
from chuk_mcp_theory.engine import TheoryEngine
from chuk_mcp_theory.models.progression import ProgressionDefinition
from chuk_mcp_theory.progressions import ProgressionLoader
from chuk_mcp_theory.session import DEFAULT_SESSION, SelectionStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_harmony_tools(
    mcp: ChukMCPServer,
    engine: TheoryEngine,
    loader: ProgressionLoader,
    selections: SelectionStore,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register progression and modulation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The theory engine
        loader: Progression loader (built-ins plus project files)
        selections: Session key selections (defaults for root/scale)
        output_dir: Directory for exported MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def _resolve_steps(
        progression: str,
        root: str | None,
        scale_type: str | None,
        use_sevenths: bool | None,
        session: str,
    ) -> tuple[str, str, bool, list[Any] | None]:
        selected = selections.get(session)
        template = loader.get_progression(progression)
        root = root or selected.root
        if scale_type is None:
            scale_type = "naturalMinor" if template.key_type == "minor" else selected.scale_type
        if use_sevenths is None:
            use_sevenths = selected.use_sevenths
        steps = engine.build_progression(template, root, scale_type, use_sevenths)
        return root, scale_type, use_sevenths, steps

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_progressions() -> str:
        """
        List available chord progressions.

        Includes the built-in catalog and any project progressions.

        Returns:
            JSON string with progression keys, names and key types

        Example:
            theory_list_progressions()
        """
        try:
            entries = loader.list_progressions()
            return json.dumps(
                {
                    "status": "success",
                    "progressions": [e.model_dump(mode="json", exclude_none=True) for e in entries],
                    "count": len(entries),
                }
            )
        except Exception as e:
            logger.exception("Failed to list progressions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_progressions"] = theory_list_progressions

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_progression(
        progression: str,
        root: str | None = None,
        scale_type: str | None = None,
        use_sevenths: bool | None = None,
        session: str = DEFAULT_SESSION,
    ) -> str:
        """
        Build a chord progression in a key.

        When scale_type is omitted, minor-keyed progressions (andalusian,
        deepHouse...) use naturalMinor and the rest use the session scale.

        Args:
            progression: Progression key, e.g. 'popCanon', 'jazzII_V_I'
            root: Key root (defaults to the session key)
            scale_type: Scale type with a diatonic pattern
            use_sevenths: Seventh chords instead of triads (defaults to the session key)
            session: Session whose key supplies the defaults

        Returns:
            JSON string with one chord per step

        Example:
            theory_build_progression(progression="popCanon", root="G")
        """
        try:
            root, scale_type, use_sevenths, steps = _resolve_steps(
                progression, root, scale_type, use_sevenths, session
            )
            if steps is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.DIATONIC_UNAVAILABLE.format(
                            scale_type=scale_type
                        ),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "progression": progression,
                    "root": root,
                    "scale_type": scale_type,
                    "use_sevenths": use_sevenths,
                    "chords": [s.model_dump(mode="json") for s in steps],
                    "symbols": [s.chord.name for s in steps],
                }
            )
        except Exception as e:
            logger.exception("Failed to build progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_progression"] = theory_build_progression

    @mcp.tool  # type: ignore[arg-type]
    async def theory_save_progression(
        name: str,
        degrees: list[int],
        display_name: str | None = None,
        description: str = "",
        key_type: Literal["major", "minor"] = "major",
    ) -> str:
        """
        Save a custom progression to the project.

        The progression becomes available to the other harmony tools
        under its key, replacing any built-in with the same key.

        Args:
            name: Progression key (letters, digits, '-' and '_')
            degrees: Scale degrees 1-7, e.g. [1, 6, 2, 5]
            display_name: Human-readable name (defaults to the key)
            description: Optional description
            key_type: 'major' or 'minor'

        Returns:
            JSON string with the saved file path

        Example:
            theory_save_progression(name="turnaround", degrees=[1, 6, 2, 5])
        """
        try:
            if not FILE_KEY_PATTERN.match(name):
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_FILE_KEY.format(name=name)}
                )

            definition = ProgressionDefinition(
                name=display_name or name,
                degrees=degrees,
                description=description,
                key_type=key_type,
            )
            path = loader.save_to_project(name, definition)
            return json.dumps(
                {
                    "status": "success",
                    "progression": name,
                    "path": str(path),
                    "definition": definition.model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to save progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_save_progression"] = theory_save_progression

    @mcp.tool  # type: ignore[arg-type]
    async def theory_pivot_chords(
        root_a: str,
        scale_a: str,
        root_b: str,
        scale_b: str,
        use_sevenths: bool = False,
    ) -> str:
        """
        Find chords shared by two keys.

        Args:
            root_a: First key root
            scale_a: First key scale type
            root_b: Second key root
            scale_b: Second key scale type
            use_sevenths: Compare seventh chords instead of triads

        Returns:
            JSON string with each shared chord and its role in both keys

        Example:
            theory_pivot_chords(root_a="C", scale_a="major", root_b="G", scale_b="major")
        """
        try:
            pivots = engine.find_pivot_chords(root_a, scale_a, root_b, scale_b, use_sevenths)
            return json.dumps(
                {
                    "status": "success",
                    "pivot_chords": [p.model_dump(mode="json") for p in pivots],
                    "count": len(pivots),
                }
            )
        except Exception as e:
            logger.exception("Failed to find pivot chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_pivot_chords"] = theory_pivot_chords

    @mcp.tool  # type: ignore[arg-type]
    async def theory_suggest_modulation(
        from_root: str,
        from_scale: str,
        to_root: str,
        to_scale: str,
    ) -> str:
        """
        Suggest how to modulate between two keys.

        Describes the key relationship, lists up to three pivot chords
        and the techniques that suit the distance.

        Args:
            from_root: Current key root
            from_scale: Current key scale type
            to_root: Target key root
            to_scale: Target key scale type

        Returns:
            JSON string with relationship, pivot chords and techniques

        Example:
            theory_suggest_modulation(
                from_root="C", from_scale="major", to_root="A", to_scale="naturalMinor"
            )
        """
        try:
            suggestion = engine.suggest_modulation(from_root, from_scale, to_root, to_scale)
            return json.dumps(
                {"status": "success", "modulation": suggestion.model_dump(mode="json")}
            )
        except Exception as e:
            logger.exception("Failed to suggest modulation")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_suggest_modulation"] = theory_suggest_modulation

    @mcp.tool  # type: ignore[arg-type]
    async def theory_export_progression_midi(
        progression: str,
        root: str | None = None,
        scale_type: str | None = None,
        use_sevenths: bool | None = None,
        tempo: int = 120,
        beats_per_chord: float = 4,
        output_name: str | None = None,
        session: str = DEFAULT_SESSION,
    ) -> str:
        """
        Export a progression as a MIDI file of block chords.

        Args:
            progression: Progression key
            root: Key root (defaults to the session key)
            scale_type: Scale type with a diatonic pattern
            use_sevenths: Seventh chords instead of triads
            tempo: Tempo in BPM (default 120)
            beats_per_chord: Length of each chord in beats (default 4)
            output_name: Optional output filename (without .mid extension)
            session: Session whose key supplies the defaults

        Returns:
            JSON string with the output file path

        Example:
            theory_export_progression_midi(progression="popCanon", root="D", tempo=96)
        """
        try:
            if output_name is not None and not FILE_KEY_PATTERN.match(output_name):
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_FILE_KEY.format(name=output_name),
                    }
                )

            root, scale_type, use_sevenths, steps = _resolve_steps(
                progression, root, scale_type, use_sevenths, session
            )
            if steps is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.DIATONIC_UNAVAILABLE.format(
                            scale_type=scale_type
                        ),
                    }
                )

            mid = progression_to_midi(
                steps,
                tempo_bpm=tempo,
                beats_per_chord=beats_per_chord,
                track_name=f"{progression} in {root} {scale_type}",
            )
            stem = output_name or f"{progression}_{root.replace('#', 's')}"
            output_path = save_midi(mid, output_dir / f"{stem}.mid")

            logger.info("Exported %s to %s", progression, output_path)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.MIDI_EXPORTED.format(
                        progression=progression, path=output_path
                    ),
                    "path": str(output_path),
                    "chords": [s.chord.name for s in steps],
                    "tempo": tempo,
                    "ticks_per_beat": mid.ticks_per_beat,
                }
            )
        except Exception as e:
            logger.exception("Failed to export progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_export_progression_midi"] = theory_export_progression_midi

    return tools
