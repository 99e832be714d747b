"""
Tests for MCP tools.

Tests the MCP tool implementations for notes, scales, chords, analysis,
harmony and session key selection.
"""

import json
from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_theory.engine import TheoryEngine
from chuk_mcp_theory.progressions import ProgressionLoader
from chuk_mcp_theory.session import SelectionStore


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def engine() -> TheoryEngine:
    """A theory engine."""
    return TheoryEngine()


@pytest.fixture
def selections() -> SelectionStore:
    """An empty selection store."""
    return SelectionStore()


@pytest.fixture
def harmony_tools(temp_dir: Path, engine: TheoryEngine, selections: SelectionStore) -> dict:
    """Harmony tools writing into a temporary project."""
    from chuk_mcp_theory.tools.harmony import register_harmony_tools

    loader = ProgressionLoader(temp_dir / "progressions")
    return register_harmony_tools(
        MockMCPServer("test"), engine, loader, selections, temp_dir / "output"
    )


class TestNoteTools:
    """Tests for note tools."""

    @pytest.fixture
    def tools(self, engine: TheoryEngine) -> dict:
        from chuk_mcp_theory.tools.notes import register_note_tools

        return register_note_tools(MockMCPServer("test"), engine)

    def test_registers_on_server(self, engine: TheoryEngine) -> None:
        """Tools are registered with the server by name."""
        from chuk_mcp_theory.tools.notes import register_note_tools

        mcp = MockMCPServer("test")
        tools = register_note_tools(mcp, engine)
        assert set(tools) == set(mcp.tools)
        assert "theory_interval" in mcp.tools

    @pytest.mark.asyncio
    async def test_note_info(self, tools: dict) -> None:
        """Note info includes MIDI and frequency."""
        data = json.loads(await tools["theory_note_info"](note="Bb3"))
        assert data["status"] == "success"
        assert data["note"]["name"] == "A#"
        assert data["note"]["flat_name"] == "Bb"
        assert data["note"]["midi"] == 58

    @pytest.mark.asyncio
    async def test_note_to_frequency(self, tools: dict) -> None:
        """A4 is 440 Hz."""
        data = json.loads(await tools["theory_note_to_frequency"](note="A", octave=4))
        assert data["frequency"] == 440.0

    @pytest.mark.asyncio
    async def test_frequency_to_note(self, tools: dict) -> None:
        """Frequency lookup reports the nearest pitched note."""
        data = json.loads(await tools["theory_frequency_to_note"](frequency=220.0))
        assert data["note"] == "A"
        assert data["nearest"] == "A3"
        assert data["cents"] == 0.0

    @pytest.mark.asyncio
    async def test_invalid_frequency(self, tools: dict) -> None:
        """Invalid frequencies return an error payload."""
        data = json.loads(await tools["theory_frequency_to_note"](frequency=-5.0))
        assert data["status"] == "error"
        assert "Invalid frequency" in data["message"]

    @pytest.mark.asyncio
    async def test_interval_reduced(self, tools: dict) -> None:
        """Without octaves the interval is reduced."""
        data = json.loads(await tools["theory_interval"](note_a="C", note_b="G"))
        assert data["interval"]["name"] == "Perfect 5th"
        assert data["interval"]["total_semitones"] is None

    @pytest.mark.asyncio
    async def test_interval_compound(self, tools: dict) -> None:
        """With octaves the span is kept."""
        data = json.loads(
            await tools["theory_interval"](note_a="C", note_b="C", octave_a=3, octave_b=4)
        )
        assert data["interval"]["name"] == "Octave"
        assert data["interval"]["total_semitones"] == 12

    @pytest.mark.asyncio
    async def test_invalid_note(self, tools: dict) -> None:
        """Invalid names return an error payload."""
        data = json.loads(await tools["theory_interval"](note_a="C", note_b="H"))
        assert data["status"] == "error"
        assert "Invalid note name" in data["message"]

    @pytest.mark.asyncio
    async def test_list_intervals(self, tools: dict) -> None:
        """13 intervals are listed."""
        data = json.loads(await tools["theory_list_intervals"]())
        assert data["count"] == 13


class TestScaleAndChordTools:
    """Tests for scale and chord tools."""

    @pytest.fixture
    def tools(self, engine: TheoryEngine, selections: SelectionStore) -> dict:
        from chuk_mcp_theory.tools.chords import register_chord_tools
        from chuk_mcp_theory.tools.scales import register_scale_tools

        mcp = MockMCPServer("test")
        tools = register_scale_tools(mcp, engine, selections)
        tools.update(register_chord_tools(mcp, engine, selections))
        return tools

    @pytest.mark.asyncio
    async def test_list_scales(self, tools: dict) -> None:
        """18 scales are listed."""
        data = json.loads(await tools["theory_list_scales"]())
        assert data["count"] == 18

    @pytest.mark.asyncio
    async def test_scale_notes(self, tools: dict) -> None:
        """Scale notes for an explicit key."""
        data = json.loads(await tools["theory_scale_notes"](root="E", scale_type="naturalMinor"))
        assert data["scale"]["notes"] == ["E", "F#", "G", "A", "B", "C", "D"]

    @pytest.mark.asyncio
    async def test_scale_notes_from_session(
        self, tools: dict, selections: SelectionStore
    ) -> None:
        """Omitted root and scale come from the session key."""
        selections.set("D", "dorian")
        data = json.loads(await tools["theory_scale_notes"]())
        assert data["scale"]["name"] == "D Dorian"

    @pytest.mark.asyncio
    async def test_unknown_scale(self, tools: dict) -> None:
        """Unknown scales return an error payload."""
        data = json.loads(await tools["theory_scale_notes"](root="C", scale_type="nope"))
        assert data["status"] == "error"
        assert "Unknown scale type" in data["message"]

    @pytest.mark.asyncio
    async def test_note_in_scale(self, tools: dict) -> None:
        """Membership accepts flats."""
        data = json.loads(
            await tools["theory_note_in_scale"](note="Eb", root="Bb", scale_type="major")
        )
        assert data["in_scale"] is True

    @pytest.mark.asyncio
    async def test_list_chords(self, tools: dict) -> None:
        """16 chord types are listed."""
        data = json.loads(await tools["theory_list_chords"]())
        assert data["count"] == 16

    @pytest.mark.asyncio
    async def test_build_chord(self, tools: dict) -> None:
        """Chord construction with frequencies."""
        data = json.loads(
            await tools["theory_build_chord"](root="A", chord_type="minor7", octave=3)
        )
        assert data["chord"]["name"] == "Am7"
        assert data["chord"]["frequencies"][0]["frequency"] == 220.0

    @pytest.mark.asyncio
    async def test_unknown_chord(self, tools: dict) -> None:
        """Unknown chord types return an error payload."""
        data = json.loads(await tools["theory_build_chord"](root="C", chord_type="mystery"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_diatonic_chords(self, tools: dict) -> None:
        """Seven chords for a key."""
        data = json.loads(await tools["theory_diatonic_chords"](root="C", scale_type="major"))
        assert [c["chord"]["name"] for c in data["chords"]] == [
            "C",
            "Dm",
            "Em",
            "F",
            "G",
            "Am",
            "Bdim",
        ]

    @pytest.mark.asyncio
    async def test_diatonic_sevenths_from_session(
        self, tools: dict, selections: SelectionStore
    ) -> None:
        """The session's seventh preference applies when omitted."""
        selections.set("A", "naturalMinor", use_sevenths=True)
        data = json.loads(await tools["theory_diatonic_chords"]())
        assert data["use_sevenths"] is True
        assert data["chords"][0]["chord"]["name"] == "Am7"

    @pytest.mark.asyncio
    async def test_diatonic_unavailable(self, tools: dict) -> None:
        """Scales without a pattern return an error payload."""
        data = json.loads(await tools["theory_diatonic_chords"](root="C", scale_type="blues"))
        assert data["status"] == "error"
        assert "not available" in data["message"]


class TestAnalysisTools:
    """Tests for identification and key detection tools."""

    @pytest.fixture
    def tools(self, engine: TheoryEngine) -> dict:
        from chuk_mcp_theory.tools.analysis import register_analysis_tools

        return register_analysis_tools(MockMCPServer("test"), engine)

    @pytest.mark.asyncio
    async def test_identify_names(self, tools: dict) -> None:
        """Exhaustive identification of names."""
        data = json.loads(await tools["theory_identify_chord"](notes=["E", "G", "C"]))
        assert data["identified"] is True
        assert data["result"]["name"] == "C"

    @pytest.mark.asyncio
    async def test_identify_fast_path(self, tools: dict) -> None:
        """Fast path identification of frequencies."""
        data = json.loads(
            await tools["theory_identify_chord"](
                notes=[261.63, 329.63, 392.0], strategy="fast_path"
            )
        )
        assert data["result"]["name"] == "Major Triad"
        assert data["result"]["stability"] == "Consonant"

    @pytest.mark.asyncio
    async def test_identify_unknown(self, tools: dict) -> None:
        """No match is a successful Unknown result."""
        data = json.loads(await tools["theory_identify_chord"](notes=["C", "C#", "D"]))
        assert data["status"] == "success"
        assert data["identified"] is False
        assert data["result"]["name"] == "Unknown"

    @pytest.mark.asyncio
    async def test_identify_bad_strategy(self, tools: dict) -> None:
        """Unknown strategies return an error payload."""
        data = json.loads(
            await tools["theory_identify_chord"](notes=["C", "E", "G"], strategy="magic")
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_detect_key(self, tools: dict) -> None:
        """Key candidates, best first."""
        data = json.loads(
            await tools["theory_detect_key"](notes=["G", "A", "B", "C", "D", "E", "F#"], limit=3)
        )
        assert data["count"] == 3
        assert data["candidates"][0]["key"] == "G Major (Ionian)"

    @pytest.mark.asyncio
    async def test_detect_key_too_few(self, tools: dict) -> None:
        """A single pitch class gives no candidates."""
        data = json.loads(await tools["theory_detect_key"](notes=["C"]))
        assert data["status"] == "success"
        assert data["candidates"] == []

    @pytest.mark.asyncio
    async def test_detect_key_negative_limit(self, tools: dict) -> None:
        """A negative limit returns no candidates."""
        data = json.loads(
            await tools["theory_detect_key"](notes=["C", "E", "G", "B"], limit=-1)
        )
        assert data["status"] == "success"
        assert data["candidates"] == []


class TestHarmonyTools:
    """Tests for progression and modulation tools."""

    @pytest.mark.asyncio
    async def test_list_progressions(self, harmony_tools: dict) -> None:
        """Built-in progressions are listed."""
        data = json.loads(await harmony_tools["theory_list_progressions"]())
        assert data["count"] == 8

    @pytest.mark.asyncio
    async def test_build_progression(self, harmony_tools: dict) -> None:
        """Pop canon in G."""
        data = json.loads(
            await harmony_tools["theory_build_progression"](progression="popCanon", root="G")
        )
        assert data["symbols"] == ["G", "D", "Em", "C"]

    @pytest.mark.asyncio
    async def test_minor_progression_defaults_to_minor(self, harmony_tools: dict) -> None:
        """Minor-keyed progressions default to natural minor."""
        data = json.loads(
            await harmony_tools["theory_build_progression"](progression="deepHouse1", root="A")
        )
        assert data["scale_type"] == "naturalMinor"
        assert data["symbols"] == ["Am", "F", "C", "G"]

    @pytest.mark.asyncio
    async def test_unknown_progression(self, harmony_tools: dict) -> None:
        """Unknown progressions return an error payload."""
        data = json.loads(
            await harmony_tools["theory_build_progression"](progression="nope", root="C")
        )
        assert data["status"] == "error"
        assert "Unknown progression" in data["message"]

    @pytest.mark.asyncio
    async def test_save_and_use_progression(self, harmony_tools: dict, temp_dir: Path) -> None:
        """A saved progression is listed and buildable."""
        data = json.loads(
            await harmony_tools["theory_save_progression"](
                name="turnaround", degrees=[1, 6, 2, 5], display_name="Turnaround"
            )
        )
        assert data["status"] == "success"
        assert (temp_dir / "progressions" / "turnaround.yaml").exists()

        listed = json.loads(await harmony_tools["theory_list_progressions"]())
        assert "turnaround" in [p["key"] for p in listed["progressions"]]

        built = json.loads(
            await harmony_tools["theory_build_progression"](progression="turnaround", root="C")
        )
        assert built["symbols"] == ["C", "Am", "Dm", "G"]

    @pytest.mark.asyncio
    async def test_save_rejects_bad_key(self, harmony_tools: dict) -> None:
        """Progression keys must be file-safe."""
        data = json.loads(
            await harmony_tools["theory_save_progression"](name="../escape", degrees=[1])
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_save_rejects_bad_degree(self, harmony_tools: dict) -> None:
        """Degrees outside 1-7 return an error payload."""
        data = json.loads(
            await harmony_tools["theory_save_progression"](name="bad", degrees=[1, 9])
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_pivot_chords(self, harmony_tools: dict) -> None:
        """Shared chords between C and G major."""
        data = json.loads(
            await harmony_tools["theory_pivot_chords"](
                root_a="C", scale_a="major", root_b="G", scale_b="major"
            )
        )
        assert data["count"] == 4

    @pytest.mark.asyncio
    async def test_suggest_modulation(self, harmony_tools: dict) -> None:
        """Modulation advice for a half-step move."""
        data = json.loads(
            await harmony_tools["theory_suggest_modulation"](
                from_root="C", from_scale="major", to_root="C#", to_scale="major"
            )
        )
        modulation = data["modulation"]
        assert modulation["relationship"] == "Half step away (dramatic!)"
        assert modulation["relationship_kind"] == "half_step"
        assert "Chromatic bass line leading to new key" in modulation["techniques"]

    @pytest.mark.asyncio
    async def test_export_midi(self, harmony_tools: dict, temp_dir: Path) -> None:
        """Exported progressions are valid MIDI files."""
        data = json.loads(
            await harmony_tools["theory_export_progression_midi"](
                progression="fifties", root="F#", tempo=100
            )
        )
        assert data["status"] == "success"
        path = Path(data["path"])
        assert path == temp_dir / "output" / "fifties_Fs.mid"
        assert data["chords"] == ["F#", "D#m", "B", "C#"]

        loaded = MidiFile(str(path))
        tempo = next(m for m in loaded.tracks[0] if m.type == "set_tempo")
        assert tempo.tempo == int(60_000_000 / 100)

    @pytest.mark.asyncio
    async def test_export_midi_output_name(self, harmony_tools: dict, temp_dir: Path) -> None:
        """An explicit output name is used."""
        data = json.loads(
            await harmony_tools["theory_export_progression_midi"](
                progression="blues12", root="A", output_name="shuffle"
            )
        )
        assert data["path"] == str(temp_dir / "output" / "shuffle.mid")

    @pytest.mark.asyncio
    async def test_export_midi_rejects_path_in_output_name(
        self, harmony_tools: dict, temp_dir: Path
    ) -> None:
        """Output names cannot leave the output directory."""
        for output_name in ["../escaped", "nested/take1", "take 1"]:
            data = json.loads(
                await harmony_tools["theory_export_progression_midi"](
                    progression="popCanon", root="C", output_name=output_name
                )
            )
            assert data["status"] == "error"
            assert "Invalid name" in data["message"]

        assert list(temp_dir.rglob("*.mid")) == []

    @pytest.mark.asyncio
    async def test_build_progression_ignores_paths(
        self, harmony_tools: dict, temp_dir: Path
    ) -> None:
        """A progression name with a path does not read files outside the project."""
        (temp_dir / "outside.yaml").write_text("name: Outside\ndegrees: [1, 2]\n")
        (temp_dir / "progressions").mkdir()

        data = json.loads(
            await harmony_tools["theory_build_progression"](progression="../outside", root="C")
        )
        assert data["status"] == "error"


class TestSessionTools:
    """Tests for key selection tools."""

    @pytest.fixture
    def tools(self, selections: SelectionStore) -> dict:
        from chuk_mcp_theory.tools.session import register_session_tools

        return register_session_tools(MockMCPServer("test"), selections)

    @pytest.mark.asyncio
    async def test_default_key(self, tools: dict) -> None:
        """C major until set."""
        data = json.loads(await tools["theory_get_key"]())
        assert data["key"] == {"root": "C", "scale_type": "major", "use_sevenths": False}

    @pytest.mark.asyncio
    async def test_set_key(self, tools: dict) -> None:
        """Setting a key is visible to later reads."""
        data = json.loads(await tools["theory_set_key"](root="Eb", scale_type="natural-minor"))
        assert data["status"] == "success"
        assert data["message"] == "Selected key Eb naturalMinor."

        data = json.loads(await tools["theory_get_key"]())
        assert data["key"]["root"] == "Eb"
        assert data["key"]["scale_type"] == "naturalMinor"

    @pytest.mark.asyncio
    async def test_sessions_are_separate(self, tools: dict) -> None:
        """Each session has its own key."""
        await tools["theory_set_key"](root="G", session="a")
        data = json.loads(await tools["theory_get_key"](session="b"))
        assert data["key"]["root"] == "C"

    @pytest.mark.asyncio
    async def test_set_invalid_key(self, tools: dict) -> None:
        """Invalid roots return an error payload."""
        data = json.loads(await tools["theory_set_key"](root="H"))
        assert data["status"] == "error"
