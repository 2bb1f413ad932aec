"""End-to-end tests for the Linter facade."""

from pathlib import Path

import pytest

from nslint.config import LinterConfig
from nslint.findings.models import DiagnosticKind
from nslint.linter import Linter, detect_calls, lint

FIXTURE = Path(__file__).parent / "fixtures" / "NSLocalizedStringFixture.swift"


@pytest.fixture
def linter():
    return Linter()


def test_valid_implicit_type(linter):
    source = 'let string = NSLocalizedString("key1", bundle: .module, value: "value1", comment: "comment1")'
    assert linter.lint(source, file_name="test.swift") == []


def test_valid_explicit_type(linter):
    source = 'let str = NSLocalizedString("key2", bundle: Bundle.module, value: "value2", comment: "comment2")'
    assert linter.lint(source, file_name="test.swift") == []


def test_valid_implicit_multiline_with_trivia(linter):
    source = (
        "let str = NSLocalizedString(\n"
        '  "key3",\n'
        "  bundle: /* be sure to get the string from the Package */ .module  , // easy to forget\n"
        '  value: "value3",\n'
        '  comment: "comment3"\n'
        ")"
    )
    assert linter.lint(source, file_name="test.swift") == []
    calls = linter.detect_calls(source, file_name="test.swift")
    assert len(calls) == 1
    assert calls[0].kind is DiagnosticKind.VALID


def test_missing_bundle(linter):
    source = 'let str = NSLocalizedString("key", value: "value", comment: "comment1")'
    result = linter.lint(source, file_name="test.swift")
    assert len(result) == 1
    assert str(result[0]) == (
        "test.swift:1:11: error: Missing parameter `bundle:`\n"
        'let str = NSLocalizedString("key", value: "value", comment: "comment1")\n'
        "          ^"
    )


def test_dont_detect_commented_lines(linter):
    source = '// let str = NSLocalizedString("key", value: "value", comment: "comment1")'
    assert linter.lint(source, file_name="test.swift") == []


def test_invalid_main_bundle(linter):
    source = 'let str = NSLocalizedString("key", bundle: .main, value: "value", comment: "comment")'
    result = linter.lint(source, file_name="test.swift")
    assert len(result) == 1
    assert str(result[0]) == (
        "test.swift:1:36: error: Incorrect value for parameter `bundle:`\n"
        f"{source}\n"
        + " " * 35
        + "^"
    )


def test_unsupported_complex_expression(linter):
    source = (
        'let str = NSLocalizedString("key", bundle: GetKlass("Bundle").module, '
        'value: "value", comment: "comment")'
    )
    result = linter.lint(source, file_name="test.swift")
    assert len(result) == 1
    assert result[0].kind is DiagnosticKind.INVALID_REQUIRED_ARGUMENT_VALUE
    assert result[0].location.column == 36


def test_complex_code_with_failures(linter):
    source = FIXTURE.read_text()
    result = linter.detect_calls(source, file_name="NSLocalizedStringFixture.swift")

    assert len(result) == 4
    assert str(result[0]) == (
        "NSLocalizedStringFixture.swift:9:12: note: Valid call\n"
        '  let s1 = NSLocalizedString("key1", bundle: .module, value: "value1", comment: "comment1")\n'
        "           ^"
    )
    assert str(result[1]) == (
        "NSLocalizedStringFixture.swift:11:12: error: Missing parameter `bundle:`\n"
        '  let s2 = NSLocalizedString("key2", value: "value2", comment: "comment2")\n'
        "           ^"
    )
    assert str(result[2]) == (
        "NSLocalizedStringFixture.swift:13:38: error: Incorrect value for parameter `bundle:`\n"
        '  let s3 = NSLocalizedString("key3", bundle: .main, value: "value3", comment: "comment3")\n'
        "                                     ^"
    )
    assert str(result[3]) == (
        "NSLocalizedStringFixture.swift:15:16: note: Valid call\n"
        "  let format = NSLocalizedString(\n"
        "               ^"
    )


def test_lint_is_detect_calls_without_valid(linter):
    source = FIXTURE.read_text()
    all_calls = linter.detect_calls(source, "Fixture.swift")
    assert linter.lint(source, "Fixture.swift") == [c for c in all_calls if c.kind is not DiagnosticKind.VALID]


def test_no_target_function_detects_nothing(linter):
    assert linter.detect_calls('let s = String(localized: "key")\n') == []


class TestSpecScenarios:
    """One-line scenarios against a short target name."""

    config = LinterConfig(function_name="F")

    def test_missing(self):
        calls = Linter(self.config).detect_calls('let s = F("k", value: "v", comment: "c")')
        assert [(c.kind, c.location.column) for c in calls] == [
            (DiagnosticKind.MISSING_REQUIRED_ARGUMENT, 9)
        ]

    def test_incorrect(self):
        calls = Linter(self.config).detect_calls('let s = F("k", bundle: .main, value: "v", comment: "c")')
        assert [(c.kind, c.location.column) for c in calls] == [
            (DiagnosticKind.INVALID_REQUIRED_ARGUMENT_VALUE, 16)
        ]

    def test_valid(self):
        source = 'let s = F("k", bundle: .module, value: "v", comment: "c")'
        calls = Linter(self.config).detect_calls(source)
        assert [(c.kind, c.location.column) for c in calls] == [(DiagnosticKind.VALID, 9)]
        assert Linter(self.config).lint(source) == []


def test_default_display_name():
    calls = detect_calls('let s = NSLocalizedString("k", comment: "c")')
    assert calls[0].location.file == "<stdin>"


def test_module_level_lint():
    assert lint('let s = NSLocalizedString("k", bundle: .module, comment: "c")') == []


def test_lint_file(tmp_path, linter):
    swift_file = tmp_path / "Strings.swift"
    swift_file.write_text('let s = NSLocalizedString("k", comment: "c")\n')
    result = linter.lint_file(swift_file)
    assert len(result) == 1
    assert result[0].location.file == str(swift_file)
    assert linter.detect_calls_in_file(str(swift_file)) == result


def test_lint_file_missing_raises(linter):
    with pytest.raises(FileNotFoundError):
        linter.lint_file(Path("/nonexistent/Strings.swift"))
