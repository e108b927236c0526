"""Tests for the command-line harness."""

import json

from ruletok.__main__ import main
from ruletok.config import TokenizerConfig


def _json_lines(output: str) -> list:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


class TestMain:
    """Tests for main()."""

    def test_comprehensive_with_filter(self, capsys) -> None:
        assert main(["--mode", "comprehensive", "The cat sat on the mat", "--filter", "--json"]) == 0
        results = _json_lines(capsys.readouterr().out)
        assert results == [{"source": "argument", "mode": "comprehensive", "tokens": ["cat", "sat", "mat"]}]

    def test_text_without_mode_runs_all_tokenizers(self, capsys) -> None:
        """Test that plain text as the only argument is tokenized by every tokenizer."""
        assert main(["some text", "--json"]) == 0
        results = _json_lines(capsys.readouterr().out)
        assert [(r["source"], r["mode"]) for r in results] == [
            ("argument", "simple"),
            ("argument", "advanced"),
            ("argument", "comprehensive"),
            ("argument", "codes"),
        ]
        assert results[2]["tokens"] == ["some", "text"]

    def test_all_modes_on_sample(self, capsys) -> None:
        """Test that the default run covers every tokenizer on the sample sentence."""
        assert main(["--json"]) == 0
        results = _json_lines(capsys.readouterr().out)
        assert [r["mode"] for r in results] == ["simple", "advanced", "comprehensive", "codes"]
        assert all(r["source"] == "sample" for r in results)
        assert results[3]["tokens"][:3] == [84, 104, 101]

    def test_input_files(self, tmp_path, capsys) -> None:
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        first.write_text("One two", encoding="utf-8")
        second.write_text("Three", encoding="utf-8")
        assert main(["--mode", "simple", "--json", "--input-file", str(first), "--input-file", str(second)]) == 0
        results = _json_lines(capsys.readouterr().out)
        assert [(r["source"], r["tokens"]) for r in results] == [
            ("first.txt", ["One", "two"]),
            ("second.txt", ["Three"]),
        ]

    def test_stop_words_file(self, tmp_path, capsys) -> None:
        stop_file = tmp_path / "stop.txt"
        stop_file.write_text("Cat\n\nmat\n", encoding="utf-8")
        assert main(["--mode", "comprehensive", "the cat sat on the mat", "--filter", "--json",
                     "--stop-words-file", str(stop_file)]) == 0
        results = _json_lines(capsys.readouterr().out)
        assert results[0]["tokens"] == ["the", "sat", "on", "the"]

    def test_config_dir(self, tmp_path, capsys) -> None:
        TokenizerConfig(rules=[r"\d+"]).save_pretrained(str(tmp_path))
        assert main(["--mode", "comprehensive", "a1 b22", "--json", "--config-dir", str(tmp_path)]) == 0
        results = _json_lines(capsys.readouterr().out)
        assert results[0]["tokens"] == ["1", "22"]

    def test_missing_config_dir_fails(self, tmp_path) -> None:
        assert main(["--mode", "comprehensive", "text", "--config-dir", str(tmp_path / "nope")]) == 1

    def test_missing_input_file_fails(self, tmp_path) -> None:
        assert main(["--mode", "simple", "--input-file", str(tmp_path / "nope.txt")]) == 1
