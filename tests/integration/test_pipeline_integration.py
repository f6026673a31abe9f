"""Integration tests for the full load -> convert/analyze -> write pipeline."""

import io
import json
import sys

from loguru import logger
import pytest
import yaml

from textconvert.__main__ import main
from textconvert.core import Config
from textconvert.processing import run_pipeline


class TestConversionPipeline:
    """Test conversions through the pipeline."""

    def test_converts_literal_text_to_stdout(self, capsys) -> None:
        """Converted literal text is written to stdout."""
        run_pipeline(Config(conversion="upperCase", text="hello"))
        assert capsys.readouterr().out == "HELLO"

    def test_converts_stdin(self, capsys, monkeypatch) -> None:
        """Input is read from stdin when no text or files are given."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("abc"))
        run_pipeline(Config(conversion="reverseText"))
        assert capsys.readouterr().out == "cba"

    def test_single_file_to_output_file(self, tmp_path) -> None:
        """A single converted file is written raw."""
        source = tmp_path / "in.txt"
        source.write_text("hello world", encoding="utf-8")
        target = tmp_path / "result.txt"
        run_pipeline(Config(conversion="upperCase", inputs=[str(source)], output=str(target)))
        assert target.read_text(encoding="utf-8") == "HELLO WORLD"

    def test_batch_to_output_directory(self, tmp_path) -> None:
        """Several files are combined into processed-files.txt in the output directory."""
        (tmp_path / "a.txt").write_text("hello world", encoding="utf-8")
        (tmp_path / "b.txt").write_text("foo bar", encoding="utf-8")
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        run_pipeline(
            Config(
                conversion="snakeCase",
                inputs=[str(tmp_path / "a.txt"), str(tmp_path / "b.txt")],
                output=str(out_dir),
            )
        )
        assert (out_dir / "processed-files.txt").read_text(encoding="utf-8") == (
            "=== a.txt ===\nhello_world\n\n=== b.txt ===\nfoo_bar\n\n"
        )

    def test_history_records_each_document(self, tmp_path) -> None:
        """Every converted document adds a history entry."""
        (tmp_path / "a.txt").write_text("one", encoding="utf-8")
        (tmp_path / "b.txt").write_text("two", encoding="utf-8")
        history = run_pipeline(
            Config(
                conversion="upperCase",
                inputs=[str(tmp_path / "a.txt"), str(tmp_path / "b.txt")],
                output=str(tmp_path / "out.txt"),
            )
        )
        assert [entry.output for entry in history] == ["TWO", "ONE"]

    def test_blank_input_not_converted(self, capsys) -> None:
        """Blank input writes nothing."""
        run_pipeline(Config(conversion="upperCase", text="   "))
        assert capsys.readouterr().out == ""

    def test_blank_input_not_in_history(self) -> None:
        """Blank input adds no history entry."""
        assert len(run_pipeline(Config(conversion="upperCase", text="   "))) == 0

    def test_show_history_on_stderr(self, capsys) -> None:
        """Recent conversions are printed to stderr on request."""
        run_pipeline(Config(conversion="upperCase", text="hello", show_history=True))
        assert "Recent Conversions" in capsys.readouterr().err


class TestAnalysisPipeline:
    """Test analysis output formats."""

    SAMPLE = "Hello world. This is a test."

    def test_json_report(self, capsys) -> None:
        """JSON reports use camelCase keys."""
        run_pipeline(Config(analyze=True, text=self.SAMPLE, output_format="json"))
        assert json.loads(capsys.readouterr().out)["averageWordsPerSentence"] == 3.0

    def test_yaml_report(self, capsys) -> None:
        """YAML reports carry the same fields."""
        run_pipeline(Config(analyze=True, text=self.SAMPLE, output_format="yaml"))
        assert yaml.safe_load(capsys.readouterr().out)["sentences"] == 2

    def test_json_report_includes_level(self, capsys) -> None:
        """Reports include the readability level."""
        run_pipeline(Config(analyze=True, text=self.SAMPLE, output_format="json"))
        assert json.loads(capsys.readouterr().out)["readabilityLevel"] == "Very Easy"

    def test_text_report(self, capsys) -> None:
        """Text reports show the complexity rating."""
        run_pipeline(Config(analyze=True, text=self.SAMPLE))
        assert "Complexity:               Simple" in capsys.readouterr().out

    def test_multiple_documents_keyed_by_name(self, tmp_path, capsys) -> None:
        """Structured reports for several files are keyed by file name."""
        (tmp_path / "a.txt").write_text("One two.", encoding="utf-8")
        (tmp_path / "b.md").write_text("Three.", encoding="utf-8")
        run_pipeline(
            Config(
                analyze=True,
                inputs=[str(tmp_path / "a.txt"), str(tmp_path / "b.md")],
                output_format="json",
            )
        )
        assert sorted(json.loads(capsys.readouterr().out)) == ["a.txt", "b.md"]

    def test_conversion_and_analysis_together(self, capsys) -> None:
        """Both sections are written when both are requested."""
        run_pipeline(Config(conversion="upperCase", analyze=True, text=self.SAMPLE))
        assert capsys.readouterr().out.startswith("HELLO WORLD. THIS IS A TEST.\n" + "=" * 60)

    def test_structured_output_carries_conversion(self, capsys) -> None:
        """JSON output holds the converted text beside the analysis."""
        run_pipeline(
            Config(conversion="upperCase", analyze=True, output_format="json", text="hi there.")
        )
        assert json.loads(capsys.readouterr().out)["converted"] == "HI THERE."

    def test_structured_output_nests_analysis(self, capsys) -> None:
        """YAML output nests the report under its own key."""
        run_pipeline(
            Config(conversion="upperCase", analyze=True, output_format="yaml", text="hi there.")
        )
        assert yaml.safe_load(capsys.readouterr().out)["analysis"]["words"] == 2

    def test_structured_output_per_document(self, tmp_path, capsys) -> None:
        """Each document keeps its own converted text."""
        (tmp_path / "a.txt").write_text("one.", encoding="utf-8")
        (tmp_path / "b.txt").write_text("two.", encoding="utf-8")
        run_pipeline(
            Config(
                conversion="upperCase",
                analyze=True,
                inputs=[str(tmp_path / "a.txt"), str(tmp_path / "b.txt")],
                output_format="json",
            )
        )
        assert json.loads(capsys.readouterr().out)["b.txt"]["converted"] == "TWO."


class TestListing:
    """Test the conversion listing."""

    def test_lists_conversions_with_shortcuts(self, capsys) -> None:
        """Listing shows identifiers with their shortcuts."""
        run_pipeline(Config(list_conversions=True))
        assert "Camel Case  [Ctrl+C]" in capsys.readouterr().out


class TestMain:
    """Test the command-line entry point."""

    @pytest.fixture(autouse=True)
    def reset_logger(self):
        """Drop the handlers main() attaches to the captured stderr."""
        yield
        logger.remove()

    def test_main_converts(self, capsys, monkeypatch) -> None:
        """The CLI converts literal text."""
        monkeypatch.setattr(sys, "argv", ["textconvert", "--to", "upperCase", "--text", "hi"])
        main()
        assert capsys.readouterr().out == "HI"

    def test_main_rejects_missing_action(self, monkeypatch) -> None:
        """The CLI exits with a usage error when no action is given."""
        monkeypatch.setattr(sys, "argv", ["textconvert", "--text", "hi"])
        with pytest.raises(SystemExit):
            main()
