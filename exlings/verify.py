"""Check exercises in order and prompt the learner about pending ones."""

from __future__ import annotations

from typing import Iterable

from .exercise import CompiledExercise, CompileError, Exercise, Mode
from .ui import Spinner, blue, bold, no_emoji, success, warn


class ExerciseFailed(Exception):
    """An exercise failed to compile, run or pass its tests."""


class VerificationError(Exception):
    """Verification stopped at an exercise that is not done."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"{exercise} is not done yet")
        self.exercise = exercise


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise VerificationError at the first not done."""
    for exercise in exercises:
        try:
            match exercise.mode:
                case Mode.TEST:
                    done = _compile_and_test(exercise, interactive=True, verbose=verbose)
                case Mode.COMPILE:
                    done = _compile_and_run_interactively(exercise)
                case Mode.CLIPPY:
                    done = _compile_only(exercise)
        except ExerciseFailed:
            done = False
        if not done:
            raise VerificationError(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run an exercise's tests; raise ExerciseFailed if they fail."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise, spinner: Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except CompileError as error:
        spinner.finish_and_clear()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(error.output.stderr)
        raise ExerciseFailed(str(exercise)) from error


def _compile_only(exercise: Exercise) -> bool:
    with Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner):
            pass
        spinner.finish_and_clear()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            spinner.set_message(f"Running {exercise}...")
            output = compiled.run()
        spinner.finish_and_clear()

    if not output.success:
        warn(f"Ran {exercise} with errors")
        print(output.stdout)
        print(output.stderr)
        raise ExerciseFailed(str(exercise))

    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with Spinner(f"Testing {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            output = compiled.run()
        spinner.finish_and_clear()

    if output.success:
        if verbose:
            print(output.stdout)
        success(f"Successfully tested {exercise}")
        return prompt_for_completion(exercise, None) if interactive else True

    warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
    print(output.stdout)
    raise ExerciseFailed(str(exercise))


def _separator() -> str:
    return bold("=" * 20)


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done():
        return True

    emojiless = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if emojiless
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    print()
    if emojiless:
        print(f"~*~ {success_message} ~*~")
    else:
        print(f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(f"or jump into the next one by removing the {bold('`I AM NOT DONE`')} comment:")
    print()
    for context_line in state.context:
        text = bold(context_line.line) if context_line.important else context_line.line
        number = blue(bold(f"{context_line.number:>2}"))
        print(f"{number} {blue('|')}  {text}")

    return False