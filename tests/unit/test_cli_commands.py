import io
import json
import logging

import pytest
from rich.console import Console

from hardinspect.cli.commands import (
    EXIT_CHECK_FAILED,
    EXIT_ERROR,
    EXIT_OK,
    AnalyzeCommand,
    Command,
    CommandContext,
    VersionCommand,
    configure_logging_levels,
)
from hardinspect.cli.commands.analyze_command import build_check_overrides
from hardinspect.cli.presenter import CHECK_TITLES
from hardinspect.config import Config
from hardinspect.domain import (
    FortificationLevel,
    HardeningVerdict,
    HasBindNow,
    HasNXStack,
    HasRelRO,
    IsPIE,
    StackProtection,
)
from hardinspect.exceptions import ParseError
from hardinspect.schemas.hardening import HardeningReport, InputType
from hardinspect.utils.logger import get_logger

NOT_PIE_VERDICT = HardeningVerdict(
    pie=IsPIE.NOT_PIE,
    nx_stack=HasNXStack.YES,
    stack_protector=StackProtection.YES,
    fortify=FortificationLevel.ALL,
    relro=HasRelRO.YES,
    bind_now=HasBindNow.YES,
)


class _DummyCommand(Command):
    def execute(self, args):
        return args.get("code", 0)


class _FakeInspector:
    failures: dict[str, Exception] = {}

    def __init__(self, filename, config=None):
        if filename in self.failures:
            raise self.failures[filename]
        self.filename = filename

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def analyze(self):
        return HardeningReport.from_verdict(NOT_PIE_VERDICT, self.filename, InputType.ELF)


@pytest.fixture
def fake_inspector(monkeypatch):
    monkeypatch.setattr(
        "hardinspect.cli.commands.analyze_command.HardeningInspector", _FakeInspector
    )
    _FakeInspector.failures = {}
    return _FakeInspector


def _make_context(tmp_path, **kwargs):
    return CommandContext(
        console=Console(file=io.StringIO(), no_color=True, highlight=False, width=200),
        logger=get_logger(),
        config=Config(str(tmp_path / "config.json")),
        verbose=kwargs.get("verbose", False),
        quiet=kwargs.get("quiet", False),
        color=kwargs.get("color", False),
    )


def _output(context):
    return context.console.file.getvalue()


def test_configure_logging_levels():
    configure_logging_levels(verbose=False, quiet=True)
    assert logging.getLogger("hardinspect").level == logging.ERROR
    configure_logging_levels(verbose=True, quiet=False)
    assert logging.getLogger("hardinspect").level == logging.INFO
    configure_logging_levels(verbose=False, quiet=False)
    assert logging.getLogger("hardinspect").level == logging.WARNING


def test_command_context_create():
    context = CommandContext.create(verbose=True, color=True)
    assert context.verbose is True
    assert context.color is True
    assert context.config is None


def test_command_default_context_and_config(tmp_path):
    command = _DummyCommand()
    assert isinstance(command.context, CommandContext)
    assert command.execute({"code": 3}) == 3

    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"checks": {"ignore_pie": True}}))
    assert command._get_config(str(path)).ignored_checks == ["pie"]

    command.context = _make_context(tmp_path)
    assert command._get_config() is command.context.config


def test_version_command(tmp_path):
    context = _make_context(tmp_path)
    assert VersionCommand(context).execute({}) == EXIT_OK
    output = _output(context)
    assert "hardinspect version 1.0.0" in output
    assert "License: GPL-3.0" in output


def test_version_lists_checks_in_report_order(tmp_path):
    context = _make_context(tmp_path)
    VersionCommand(context).execute({})
    lines = _output(context).splitlines()

    start = lines.index("Checks:") + 1
    listed = [line.split()[0] for line in lines[start : start + len(CHECK_TITLES)]]
    assert listed == list(CHECK_TITLES)
    assert f"  {'fortify':<16} Fortify Source functions" in lines
    assert lines[-1].startswith("Inputs: ELF executables")
    assert "ar archives of relocatable objects" in lines[-1]


def test_build_check_overrides():
    assert build_check_overrides({}) == {}
    assert build_check_overrides({"ignore_pie": True, "ignore_relro": False, "color": True}) == {
        "checks": {"ignore_pie": True},
        "output": {"color": True},
    }


def test_analyze_bad_check_fails(tmp_path, fake_inspector):
    context = _make_context(tmp_path)
    assert AnalyzeCommand(context).execute({"files": ["a.out"]}) == EXIT_CHECK_FAILED
    assert " Position Independent Executable: no, normal executable!\n" in _output(context)


def test_analyze_ignored_check_passes(tmp_path, fake_inspector):
    context = _make_context(tmp_path)
    exit_code = AnalyzeCommand(context).execute({"files": ["a.out"], "ignore_pie": True})
    assert exit_code == EXIT_OK
    assert "no, normal executable! (ignored)" in _output(context)


def test_analyze_ignore_from_config_file(tmp_path, fake_inspector):
    path = tmp_path / "lenient.json"
    path.write_text(json.dumps({"checks": {"ignore_pie": True}}))
    context = _make_context(tmp_path)
    assert AnalyzeCommand(context).execute({"files": ["a.out"], "config": str(path)}) == EXIT_OK


def test_analysis_error_wins_and_later_files_still_run(tmp_path, fake_inspector):
    fake_inspector.failures["broken"] = ParseError("not an ELF object (bad magic)")
    context = _make_context(tmp_path)

    exit_code = AnalyzeCommand(context).execute({"files": ["broken", "a.out"], "ignore_pie": True})

    assert exit_code == EXIT_ERROR
    output = _output(context)
    assert "broken: error: not an ELF object (bad magic)" in output
    assert "a.out:" in output


def test_invalid_config_is_an_error(tmp_path, fake_inspector):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"output": {"json_indent": -4}}))
    context = _make_context(tmp_path)
    assert AnalyzeCommand(context).execute({"files": ["a.out"], "config": str(path)}) == EXIT_ERROR


def test_json_output_to_file(tmp_path, fake_inspector):
    fake_inspector.failures["missing"] = ValueError("File validation failed: missing")
    output_file = tmp_path / "report.json"
    context = _make_context(tmp_path)

    exit_code = AnalyzeCommand(context).execute(
        {"files": ["a.out", "missing"], "output_json": True, "output": str(output_file)}
    )

    assert exit_code == EXIT_ERROR
    assert _output(context) == ""
    entries = json.loads(output_file.read_text())
    assert entries[0]["filename"] == "a.out"
    assert entries[0]["pie"] == "not_pie"
    assert entries[1] == {
        "available": False,
        "error": "File validation failed: missing",
        "filename": "missing",
        "timestamp": entries[1]["timestamp"],
    }


def test_output_file_without_json_flag_keeps_console_report(tmp_path, fake_inspector):
    output_file = tmp_path / "report.json"
    context = _make_context(tmp_path)

    AnalyzeCommand(context).execute({"files": ["a.out"], "output": str(output_file)})

    assert "a.out:" in _output(context)
    assert json.loads(output_file.read_text())[0]["input_type"] == "elf"


def test_json_output_to_stdout(tmp_path, fake_inspector, capsys):
    context = _make_context(tmp_path)
    AnalyzeCommand(context).execute({"files": ["a.out"], "output_json": True})
    entries = json.loads(capsys.readouterr().out)
    assert entries[0]["stack_protector"] == "yes"
