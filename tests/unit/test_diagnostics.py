"""
Unit tests for full diagnostic-line parsing.
Each stage may fail independently without discarding what earlier stages found.
"""
import pytest
from diagtask.parsing import (
    DiagnosticLine,
    PositionInfo,
    WarningMessage,
    WarningTask,
    parse_diagnostic_line,
    parse_diagnostics,
)

VALID_LINE = 'path/to/file.log:123:456: warning: s#{"queue": "TESTAPI", "summary": "Create a task"}#s'


class TestValidLines:
    """Lines where every stage matches."""

    def test_valid_log_line(self):
        result = parse_diagnostic_line(VALID_LINE)
        assert result.path == "path/to/file.log"
        assert result.position.line == 123
        assert result.position.column == 456
        assert result.position.classified == WarningMessage(WarningTask(summary="Create a task", queue="TESTAPI"))

    def test_no_whitespace_parses_identically(self):
        compact = 'path/to/file.log:123:456:warning:s#{"queue": "TESTAPI", "summary": "Create a task"}#s'
        assert parse_diagnostic_line(compact) == parse_diagnostic_line(VALID_LINE)

    def test_task_property(self):
        result = parse_diagnostic_line(VALID_LINE)
        assert result.task.task_queue() == "TESTAPI"
        assert result.task.task_summary() == "Create a task"
        assert result.task.warning_message_after_created() == ""

    def test_absolute_path(self):
        result = parse_diagnostic_line('/var/log/build.log:1:2: warning: s#{"queue": "Q", "summary": "S"}#s')
        assert result.path == "/var/log/build.log"
        assert result.task == WarningTask(summary="S", queue="Q")

    def test_text_after_payload_is_ignored(self):
        result = parse_diagnostic_line('a.log:1:2: warning: s#{"queue": "Q", "summary": "S"}#s [-Wtask]')
        assert result.task == WarningTask(summary="S", queue="Q")

    def test_reparse_is_structurally_equal(self):
        assert parse_diagnostic_line(VALID_LINE) == parse_diagnostic_line(VALID_LINE)
        assert parse_diagnostic_line(VALID_LINE) is not parse_diagnostic_line(VALID_LINE)


class TestLocationStage:
    """The outermost stage: everything before the first colon."""

    @pytest.mark.parametrize("line", ["invalid format", "", "no colon at all"])
    def test_no_colon_means_no_result(self, line):
        assert parse_diagnostic_line(line) is None

    def test_path_only(self):
        result = parse_diagnostic_line("file.log:")
        assert result == DiagnosticLine(path="file.log", position=None)
        assert result.task is None

    def test_path_is_not_trimmed(self):
        result = parse_diagnostic_line("  spaced path .log:1:2:")
        assert result.path == "  spaced path .log"

    def test_path_stops_at_first_colon(self):
        result = parse_diagnostic_line("C:\\build\\out.log:1:2:")
        assert result.path == "C"


class TestPositionStage:
    """line:column: block after the path."""

    def test_missing_position(self):
        result = parse_diagnostic_line('file.log: warning: s#{"queue": "Q", "summary": "S"}#s')
        assert result.path == "file.log"
        assert result.position is None

    def test_position_without_message(self):
        result = parse_diagnostic_line("file.log:10:20:")
        assert result.position == PositionInfo(line=10, column=20, classified=None)

    def test_tool_prefix_before_position_is_tolerated(self):
        result = parse_diagnostic_line('file.log: cc1 10:20: warning: s#{"queue": "Q", "summary": "S"}#s')
        assert result.position.line == 10
        assert result.position.column == 20
        assert result.task == WarningTask(summary="S", queue="Q")

    def test_overflowing_line_number(self):
        result = parse_diagnostic_line("file.log:99999999999999999999999:1: warning: s#{}#s")
        assert result.path == "file.log"
        assert result.position is None


class TestClassifierStage:
    """Keyword recognition plus payload decoding; both must succeed."""

    def test_missing_warning_keyword(self):
        line = 'path/to/file.log:123:456: s#{"queue": "TESTAPI", "summary": "Create a task"}#s'
        result = parse_diagnostic_line(line)
        assert result.position.line == 123
        assert result.position.classified is None

    @pytest.mark.parametrize("keyword", ["error", "Warning", "WARNING", "warnings", "", "note"])
    def test_unrecognised_keyword(self, keyword):
        line = f'f.log:1:2: {keyword}: s#{{"queue": "Q", "summary": "S"}}#s'
        result = parse_diagnostic_line(line)
        assert result.position is not None
        assert result.position.classified is None

    def test_missing_queue(self):
        result = parse_diagnostic_line('path/to/file.log:123:456: warning: s#{"summary": "Create a task"}#s')
        assert result.position is not None
        assert result.position.classified is None

    def test_missing_delimiters(self):
        line = 'path/to/file.log:123:456: warning: {"queue": "TESTAPI", "summary": "Create a task"}'
        result = parse_diagnostic_line(line)
        assert result.position is not None
        assert result.position.classified is None

    def test_plain_message_without_payload(self):
        result = parse_diagnostic_line("path/to/file.log:123:456:warning: some message")
        assert result.position is not None
        assert result.position.classified is None

    def test_empty_delimiters(self):
        result = parse_diagnostic_line("path/to/file.log:123:456:warning: s##s")
        assert result.position is not None
        assert result.position.classified is None

    def test_invalid_json_body(self):
        result = parse_diagnostic_line("path/to/file.log:1:2: warning: s#{not json}#s")
        assert result.position is not None
        assert result.position.classified is None


class TestParseDiagnostics:
    """Multi-line convenience wrapper."""

    def test_mixed_lines(self):
        text = (
            "Build started\n"
            f"{VALID_LINE}\n"
            "other.log:5:6: error: something broke\n"
        )
        results = parse_diagnostics(text)
        assert len(results) == 2
        assert results[0].task == WarningTask(summary="Create a task", queue="TESTAPI")
        assert results[1].path == "other.log"
        assert results[1].task is None

    def test_empty_input(self):
        assert parse_diagnostics("") == []


class TestHostileInput:
    """Oversized or pathological lines degrade to None instead of raising."""

    def test_huge_line_number_keeps_path(self):
        result = parse_diagnostic_line("file.log:" + "9" * 5000 + ":1: warning: s#{}#s")
        assert result == DiagnosticLine(path="file.log", position=None)

    def test_deeply_nested_payload(self):
        line = "f.log:1:2: warning: s#" + "[" * 100000 + "]" * 100000 + "#s"
        result = parse_diagnostic_line(line)
        assert result.position.line == 1
        assert result.position.classified is None

    def test_unclosed_marker_on_long_line(self):
        line = "f.log:1:2: warning: s#" + "x" * 200000
        result = parse_diagnostic_line(line)
        assert result.position is not None
        assert result.position.classified is None

    def test_long_path_without_position(self):
        result = parse_diagnostic_line("a" * 100000 + ":" + "b" * 100000)
        assert result.path == "a" * 100000
        assert result.position is None
