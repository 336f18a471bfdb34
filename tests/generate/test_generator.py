# tests/generate/test_generator.py
"""
Generator pipeline tests - sinks, filtering, per-entry failure isolation
"""

import importlib.util
import io

import pytest

from richerror import RichError
from richerror.core.errors import codes
from richerror.generate import StdoutSink, run_generation


def import_generated(path):
    spec = importlib.util.spec_from_file_location(f"generated_{path.stem}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestDirectoryOutput:
    def test_writes_module_and_package_init(self, tmp_path, write_catalog, not_found_entry):
        out_dir = tmp_path / "out"

        report = run_generation(write_catalog([not_found_entry]), out_dir=out_dir, error_package="AppErrors")

        package = out_dir / "apperrors"
        assert (package / "__init__.py").exists()
        assert (package / "notfound.py").exists()
        assert report.ok
        assert report.generated == ["NotFound"]
        assert report.outputs == [str(package / "notfound.py")]
        assert "# Error package: AppErrors" in (package / "notfound.py").read_text(encoding="utf-8")

    def test_generated_module_is_importable(self, tmp_path, write_catalog, not_found_entry):
        run_generation(write_catalog([not_found_entry]), out_dir=tmp_path)

        module = import_generated(tmp_path / "errors" / "notfound.py")
        err = module.new_not_found_error("42")

        assert module.ERR_CODE_NOT_FOUND == "NotFound"
        assert module.is_not_found_error(err)
        assert err.get_metadata_item("id") == ("42", True)

    def test_rerun_overwrites(self, tmp_path, write_catalog, not_found_entry):
        path = write_catalog([not_found_entry])
        run_generation(path, out_dir=tmp_path)
        target = tmp_path / "errors" / "notfound.py"
        target.write_text("stale", encoding="utf-8")

        run_generation(path, out_dir=tmp_path)

        assert target.read_text(encoding="utf-8") != "stale"


class TestStdoutOutput:
    def test_stdout_keyword_prints_code(self, tmp_path, monkeypatch, capsys, write_catalog, not_found_entry):
        monkeypatch.chdir(tmp_path)
        catalog = write_catalog([not_found_entry])

        report = run_generation(catalog, out_dir="stdout")

        out = capsys.readouterr().out
        assert "************** NotFound Error Code **************" in out
        assert "def new_not_found_error(" in out
        assert report.outputs == ["<stdout>"]
        assert not (tmp_path / "errors").exists()
        assert not (tmp_path / "stdout").exists()

    def test_explicit_stream_sink(self, write_catalog, not_found_entry):
        stream = io.StringIO()

        run_generation(write_catalog([not_found_entry]), sink=StdoutSink(stream))

        assert "ERR_CODE_NOT_FOUND = 'NotFound'" in stream.getvalue()


class TestFiltering:
    def test_include_tags(self, tmp_path, write_catalog, not_found_entry):
        catalog = write_catalog([not_found_entry, {"code": "DbDown", "tags": ["db"]}, {"code": "Untagged"}])

        report = run_generation(catalog, out_dir=tmp_path, include_tags="db")

        assert report.total == 3
        assert report.matched == 1
        assert report.generated == ["DbDown"]
        assert sorted(p.name for p in (tmp_path / "errors").iterdir()) == ["__init__.py", "dbdown.py"]

    def test_exclude_tags(self, tmp_path, write_catalog, not_found_entry):
        catalog = write_catalog([not_found_entry, {"code": "DbDown", "tags": ["db"]}, {"code": "Untagged"}])

        report = run_generation(catalog, out_dir=tmp_path, exclude_tags=["HTTP"])

        assert report.generated == ["DbDown", "Untagged"]


class TestFailureIsolation:
    def test_bad_entry_is_skipped_and_run_continues(self, tmp_path, write_catalog):
        catalog = write_catalog([
            {"code": "First"},
            {"code": "Broken", "metaData": [{"name": "class"}]},
            {"code": "Last"},
        ])

        report = run_generation(catalog, out_dir=tmp_path)

        assert report.generated == ["First", "Last"]
        assert not report.ok
        assert [(s.code, s.error_code) for s in report.skipped] == [("Broken", codes.TEMPLATE_EXECUTION_FAILED)]
        assert not (tmp_path / "errors" / "broken.py").exists()
        assert report.to_dict()["skipped"][0]["code"] == "Broken"

    def test_invalid_source_is_skipped(self, tmp_path, write_catalog):
        catalog = write_catalog([{"code": "BadType", "metaData": [{"name": "ids", "dataType": "List["}]}])

        report = run_generation(catalog, out_dir=tmp_path)

        assert report.generated == []
        assert report.skipped[0].error_code == codes.SOURCE_VALIDATION_FAILED

    def test_write_failure_is_skipped(self, tmp_path, write_catalog):
        (tmp_path / "errors" / "blocked.py").mkdir(parents=True)
        catalog = write_catalog([{"code": "Blocked"}, {"code": "Fine"}])

        report = run_generation(catalog, out_dir=tmp_path)

        assert report.generated == ["Fine"]
        assert report.skipped[0].error_code == codes.OUTPUT_WRITE_FAILED
        assert (tmp_path / "errors" / "fine.py").exists()

    def test_load_failure_aborts(self, tmp_path):
        with pytest.raises(RichError) as excinfo:
            run_generation(tmp_path / "missing.json", out_dir=tmp_path)

        assert excinfo.value.code == codes.CATALOG_LOAD_FAILED
        assert not (tmp_path / "errors").exists()

    def test_unusable_output_directory_aborts(self, tmp_path, write_catalog, not_found_entry):
        (tmp_path / "errors").write_text("not a directory", encoding="utf-8")

        with pytest.raises(RichError) as excinfo:
            run_generation(write_catalog([not_found_entry]), out_dir=tmp_path)

        assert excinfo.value.code == codes.OUTPUT_WRITE_FAILED

    def test_stdout_encoding_failure_is_skipped(self, write_catalog):
        stream = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
        catalog = write_catalog([
            {"code": "Accent", "message": "résumé missing"},
            {"code": "Plain", "message": "plain missing"},
        ])

        report = run_generation(catalog, sink=StdoutSink(stream))

        assert report.generated == ["Plain"]
        assert [(s.code, s.error_code) for s in report.skipped] == [("Accent", codes.OUTPUT_WRITE_FAILED)]

    def test_closed_stream_is_skipped(self, write_catalog, not_found_entry):
        stream = io.StringIO()
        stream.close()

        report = run_generation(write_catalog([not_found_entry]), sink=StdoutSink(stream))

        assert report.generated == []
        assert report.skipped[0].error_code == codes.OUTPUT_WRITE_FAILED


class TestOutputPaths:
    def test_code_cannot_escape_package_directory(self, tmp_path, write_catalog):
        out_dir = tmp_path / "out"
        catalog = write_catalog([{"code": "../../Escape"}])

        report = run_generation(catalog, out_dir=out_dir)

        assert report.outputs == [str(out_dir / "errors" / "escape.py")]
        assert not (tmp_path / "escape.py").exists()
        assert sorted(p.name for p in (out_dir / "errors").iterdir()) == ["__init__.py", "escape.py"]

    def test_code_without_name_characters_is_skipped(self, tmp_path, write_catalog):
        report = run_generation(write_catalog([{"code": "../.."}, {"code": "Fine"}]), out_dir=tmp_path)

        assert report.generated == ["Fine"]
        assert report.skipped[0].error_code == codes.TEMPLATE_EXECUTION_FAILED
