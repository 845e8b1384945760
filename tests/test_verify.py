import subprocess
from pathlib import Path

import pytest

from exlings.exercise import Exercise, Mode, temp_file
from exlings.verify import (
    ExerciseFailed,
    VerificationError,
    prompt_for_completion,
    test as run_tests,
    verify,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


class FakeToolchain:
    def __init__(self, compile_code=0, run_code=0, stdout=b"", stderr=b"",
                 compile_stderr=b""):
        self.compile_code = compile_code
        self.run_code = run_code
        self.stdout = stdout
        self.stderr = stderr
        self.compile_stderr = compile_stderr
        self.calls = []

    def __call__(self, args, **kwargs):
        args = list(args)
        self.calls.append(args)
        if args[0] in ("rustc", "cargo"):
            if "-o" in args:
                Path(args[args.index("-o") + 1]).write_text("")
            return subprocess.CompletedProcess(args, self.compile_code, b"",
                                               self.compile_stderr)
        return subprocess.CompletedProcess(args, self.run_code, self.stdout, self.stderr)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NO_EMOJI", raising=False)
    return tmp_path


def make(workdir, name, text, mode=Mode.COMPILE):
    (workdir / f"{name}.rs").write_text(text, encoding="utf-8")
    return Exercise(name=name, path=Path(f"{name}.rs"), mode=mode, hint="")


def test_verify_all_success(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain())
    exercises = [
        make(workdir, "compSuccess", FINISHED),
        make(workdir, "testSuccess", FINISHED, Mode.TEST),
    ]
    verify(exercises, False)
    out = capsys.readouterr().out
    assert "Successfully ran compSuccess.rs!" in out
    assert "Successfully tested testSuccess.rs" in out
    assert not Path(temp_file()).exists()


def test_verify_stops_at_pending_exercise(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(stdout=b"program says hi"))
    pending = make(workdir, "pending_exercise", PENDING)
    with pytest.raises(VerificationError) as info:
        verify([pending], False)
    assert info.value.exercise is pending
    out = capsys.readouterr().out
    assert "Output:" in out
    assert "program says hi" in out
    assert "The code is compiling!" in out
    assert "I AM NOT DONE" in out


def test_verify_stops_at_first_failure(workdir, monkeypatch, capsys):
    fake = FakeToolchain(compile_code=1, compile_stderr=b"syntax problem")
    monkeypatch.setattr(subprocess, "run", fake)
    first = make(workdir, "compFailure", FINISHED)
    second = make(workdir, "compSuccess", FINISHED)
    with pytest.raises(VerificationError) as info:
        verify([first, second], False)
    assert info.value.exercise is first
    assert all("compSuccess.rs" not in call for call in fake.calls)
    out = capsys.readouterr().out
    assert "Compiling of compFailure.rs failed!" in out
    assert "syntax problem" in out


def test_verify_run_failure(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run",
                        FakeToolchain(run_code=101, stderr=b"thread panicked"))
    exercise = make(workdir, "crashes", FINISHED)
    with pytest.raises(VerificationError):
        verify([exercise], False)
    out = capsys.readouterr().out
    assert "Ran crashes.rs with errors" in out
    assert "thread panicked" in out


def test_verify_clippy_only_compiles(workdir, monkeypatch, capsys):
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    fake = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", fake)
    verify([make(workdir, "clippy1", FINISHED, Mode.CLIPPY)], False)
    assert "Successfully compiled clippy1.rs!" in capsys.readouterr().out
    assert all(call[0] in ("rustc", "cargo") for call in fake.calls)


def test_test_does_not_prompt(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain())
    run_tests(make(workdir, "pending_test_exercise", PENDING, Mode.TEST), False)
    out = capsys.readouterr().out
    assert "Successfully tested pending_test_exercise.rs" in out
    assert "I AM NOT DONE" not in out


def test_test_verbose_shows_output(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run",
                        FakeToolchain(stdout=b"THIS TEST TOO SHALL PASS"))
    exercise = make(workdir, "testSuccess", FINISHED, Mode.TEST)
    run_tests(exercise, True)
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out
    run_tests(exercise, False)
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out


def test_test_failure_raises(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run",
                        FakeToolchain(run_code=101, stdout=b"assertion failed"))
    with pytest.raises(ExerciseFailed):
        run_tests(make(workdir, "testNotPassed", FINISHED, Mode.TEST), False)
    out = capsys.readouterr().out
    assert "Testing of testNotPassed.rs failed!" in out
    assert "assertion failed" in out


def test_prompt_for_done_exercise(workdir, capsys):
    assert prompt_for_completion(make(workdir, "done", FINISHED), "anything") is True
    assert capsys.readouterr().out == ""


def test_prompt_for_pending_test_exercise(workdir, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    exercise = make(workdir, "pending", PENDING, Mode.TEST)
    assert prompt_for_completion(exercise, None) is False
    out = capsys.readouterr().out
    assert "~*~ The code is compiling, and the tests pass! ~*~" in out
    assert "Output:" not in out
    assert " 3 |  // I AM NOT DONE" in out.splitlines()