"""Build and run a single exercise."""

from __future__ import annotations

from .exercise import CompileError, Exercise, Mode
from .ui import Spinner, success, warn
from .verify import ExerciseFailed, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Run one exercise; raise ExerciseFailed if it fails.

    Test exercises show the harness output only when verbose is set.
    """
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except CompileError as error:
            spinner.finish_and_clear()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(error.output.stderr)
            raise ExerciseFailed(str(exercise)) from error

        with compiled:
            spinner.set_message(f"Running {exercise}...")
            output = compiled.run()
        spinner.finish_and_clear()

    print(output.stdout)
    if output.success:
        success(f"Successfully ran {exercise}")
        return
    print(output.stderr)
    warn(f"Ran {exercise} with errors")
    raise ExerciseFailed(str(exercise))