import io
import json
import logging

import pytest

from prcheck.main import EXAMPLE_PR, REPORT_HEADER, main


@pytest.fixture(autouse=True)
def console_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PRCHECK_LOGGER_BACKEND", "console")
    monkeypatch.setenv("PRCHECK_LOGGER_NAME", "prcheck-main-test")
    yield
    logging.getLogger("prcheck-main-test").handlers.clear()


class TestMain:
    def test_prints_header_and_report(self) -> None:
        out = io.StringIO()

        exit_code = main(out)

        assert exit_code == 0
        header, body = out.getvalue().split("\n", 1)
        assert header == REPORT_HEADER
        report = json.loads(body)
        assert report["prNumber"] == 123
        assert [check["name"] for check in report["checks"]] == [
            "Title Format",
            "Changed Lines",
            "File Types",
        ]
        assert report["timestamp"].endswith("Z")

    def test_report_is_indented_two_spaces(self) -> None:
        out = io.StringIO()

        main(out)

        body = out.getvalue()
        assert '\n  "timestamp": ' in body
        assert "\n  \"checks\": [\n    {\n      \"name\"" in body

    def test_writes_to_stdout_by_default(self, capsys) -> None:
        main()

        captured = capsys.readouterr()
        assert captured.out.startswith(f"{REPORT_HEADER}\n{{")
        assert "Generated PR check report" not in captured.out

    def test_example_pr(self) -> None:
        assert EXAMPLE_PR.number == 123
        assert EXAMPLE_PR.title == "feat(api): 添加用户认证功能"
        assert EXAMPLE_PR.files == ("src/auth.js", "src/utils.js", "README.md")
