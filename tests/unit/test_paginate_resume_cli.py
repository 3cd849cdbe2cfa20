"""
Unit tests for the paginate_resume CLI script.
"""

import importlib.util
import json
from pathlib import Path
from unittest.mock import patch

import pytest

SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "paginate_resume.py"


@pytest.fixture
def cli(monkeypatch):
    """Load the script as a module with logging setup disabled."""
    spec = importlib.util.spec_from_file_location("paginate_resume", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "setup_logging", lambda *args, **kwargs: None)

    def run(*argv):
        monkeypatch.setattr("sys.argv", ["paginate_resume.py", *argv])
        return module.main()

    return run


class TestPaginateResumeCLI:
    """Tests for main()."""

    def test_sample_prints_partition(self, cli, capsys):
        exit_code = cli("--sample")

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Pages: 2 (11 blocks)" in out
        assert "Page 2: 2 block(s)" in out

    def test_json_output(self, cli, capsys):
        exit_code = cli("--sample", "--json", "--page-size", "Letter")

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["layout"]["pageSize"] == "Letter"
        assert [len(p["blocks"]) for p in data["pages"]] == [8, 3]

    def test_resume_file(self, cli, capsys, tmp_path, empty_resume):
        path = tmp_path / "resume.json"
        path.write_text(empty_resume.model_dump_json(by_alias=True))

        exit_code = cli("--resume", str(path))

        assert exit_code == 0
        assert "Pages: 1 (1 blocks)" in capsys.readouterr().out

    def test_missing_file_exits_1(self, cli, capsys, tmp_path):
        exit_code = cli("--resume", str(tmp_path / "missing.json"))

        assert exit_code == 1
        assert "Resume file not found" in capsys.readouterr().err

    def test_invalid_format_exits_2(self, cli, capsys, tmp_path, sample_resume):
        data = sample_resume.model_dump(by_alias=True, mode="json")
        data["format"]["margins"] = {"top": 500, "right": 20, "bottom": 500, "left": 20}
        path = tmp_path / "resume.json"
        path.write_text(json.dumps(data))

        exit_code = cli("--resume", str(path))

        assert exit_code == 2
        assert "Invalid format" in capsys.readouterr().err

    def test_pdf_export(self, cli, capsys, tmp_path):
        out_path = tmp_path / "resume.pdf"

        with patch("src.api.pdf_export.ResumePDFExporter.export_to_pdf", return_value=b"%PDF-1.4") as mock_export:
            exit_code = cli("--sample", "--pdf", str(out_path), "--template", "modern")

        assert exit_code == 0
        assert out_path.read_bytes() == b"%PDF-1.4"
        assert mock_export.call_args.args[1] == "modern"

    def test_pdf_export_failure_exits_3(self, cli, capsys, tmp_path):
        from src.api.pdf_export import PDFExportError

        with patch(
            "src.api.pdf_export.ResumePDFExporter.export_to_pdf",
            side_effect=PDFExportError("PDF service unavailable"),
        ):
            exit_code = cli("--sample", "--pdf", str(tmp_path / "resume.pdf"))

        assert exit_code == 3
        assert "PDF export failed" in capsys.readouterr().err
