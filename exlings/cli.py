"""Command-line interface: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import subprocess
import sys
import threading
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .run import run
from .ui import no_emoji
from .verify import ExerciseFailed, VerificationError, verify

VERSION = "4.6.0"
INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
WATCH_DIR = "./exercises"
POLL_INTERVAL = 1.0
DEBOUNCE = 2.0

_BANNER = r"""
       welcome to...
   +-----------------------------+
   |   e x l i n g s             |
   |   small exercises, big fun  |
   +-----------------------------+
"""

_FINISH_ART = r"""
+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+--------------------------  ------------------------+
                          \/                         
     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   
   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ 
   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ 
 ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ 
   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ 
     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   
       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     
         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       
           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         
             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           
           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         
         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       
       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     
       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     
           ▒▒  ▒▒                      ▒▒  ▒▒         
"""

_WATCH_HELP = """Commands available to you in watch mode:
  hint  - prints the current exercise's hint
  clear - clears the screen
  quit  - quits watch mode
  help  - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


class ExerciseNotFound(LookupError):
    """No exercise matches the requested name."""


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad arguments."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = _Parser(
        prog="exlings",
        description="A collection of small exercises to get you used to writing and reading code",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("verify", help="Verifies all exercises according to the recommended order")
    commands.add_parser("watch", help="Reruns `verify` when files were edited")
    run_parser = commands.add_parser("run", help="Runs/Tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser("hint", help="Returns a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")
    list_parser = commands.add_parser("list", help="Lists the exercises available")
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        default=None,
        help="provide a string to match exercise names; comma separated patterns are acceptable",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="display only exercises not yet solved"
    )
    list_parser.add_argument(
        "-s", "--solved", action="store_true", help="display only exercises that have been solved"
    )
    return parser


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Find an exercise by name; "next" means the first one not done yet."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def rustc_exists() -> bool:
    """Whether the compiler can be started."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


def _write(text: str) -> None:
    try:
        sys.stdout.write(text)
        sys.stdout.flush()
    except BrokenPipeError:
        raise SystemExit(0)
    except OSError:
        raise SystemExit(1)


def list_exercises(
    exercises: Iterable[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> int:
    """Print the exercises with their status; return how many are done."""
    exercises = list(exercises)
    if not paths and not names:
        _write(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}\n")
    patterns = [p for p in (filter or "").lower().split(",") if p.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches = any(p in exercise.name or p in fname for p in patterns)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and (matches or filter is None):
            if paths:
                line = fname
            elif names:
                line = exercise.name
            else:
                line = f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
            _write(line + "\n")
    total = len(exercises)
    percentage = f"{done_count / total * 100:.2f}" if total else "NaN"
    _write(f"Progress: You completed {done_count} / {total} exercises ({percentage} %).\n")
    return done_count


def _clear_screen() -> None:
    print("\x1bc")


class _Hint:
    """The hint of the exercise that failed last, shared with the watch shell."""

    def __init__(self, text: str):
        self._text = text
        self._lock = threading.Lock()

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text

    def get(self) -> str:
        with self._lock:
            return self._text


def _watch_shell(hint: _Hint, should_quit: threading.Event) -> None:
    while True:
        try:
            line = sys.stdin.readline()
        except (OSError, ValueError) as error:
            print(f"error reading command: {error}")
            return
        if line == "":
            return
        command = line.strip()
        if command == "hint":
            print(hint.get())
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            should_quit.set()
            print("Bye!")
        elif command == "help":
            print(_WATCH_HELP)
        else:
            print(f"unknown command: {command}")


def _spawn_watch_shell(hint: _Hint, should_quit: threading.Event) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview "
        "of the commands you can use here."
    )
    threading.Thread(target=_watch_shell, args=(hint, should_quit), daemon=True).start()


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: "queue.Queue[Path]"):
        super().__init__()
        self._changes = changes

    def _record(self, event) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event) -> None:
        self._record(event)

    def on_modified(self, event) -> None:
        self._record(event)


def _next_changes(changes: "queue.Queue[Path]") -> list[Path]:
    """Wait briefly for a change, then gather the burst that follows it."""
    try:
        first = changes.get(timeout=POLL_INTERVAL)
    except queue.Empty:
        return []
    burst = [first]
    while True:
        try:
            burst.append(changes.get(timeout=DEBOUNCE))
        except queue.Empty:
            return list(dict.fromkeys(burst))


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = suffix.parts
    if not tail:
        return True
    return len(tail) <= len(path.parts) and path.parts[-len(tail):] == tail


def _pending_after_change(filepath: Path, exercises: list[Exercise]) -> Iterator[Exercise]:
    def edited(exercise: Exercise) -> bool:
        return _ends_with(filepath, exercise.path)

    return itertools.chain(
        itertools.dropwhile(lambda e: not edited(e), exercises),
        (e for e in exercises if not e.looks_done() and not edited(e)),
    )


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify the exercises, then re-verify whenever an exercise file changes."""
    exercises = list(exercises)
    changes: queue.Queue[Path] = queue.Queue()
    should_quit = threading.Event()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), WATCH_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
        except VerificationError as error:
            hint = _Hint(error.exercise.hint)
        else:
            return WatchStatus.FINISHED
        _spawn_watch_shell(hint, should_quit)
        while True:
            for path in _next_changes(changes):
                if path.suffix == ".rs" and path.exists():
                    filepath = path.resolve()
                    _clear_screen()
                    try:
                        verify(_pending_after_change(filepath, exercises), verbose)
                    except VerificationError as error:
                        hint.set(error.exercise.hint)
                    else:
                        return WatchStatus.FINISHED
            if should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _print_finished() -> None:
    emoji = "★" if no_emoji() else "🎉"
    print(f"{emoji} All exercises completed! {emoji}")
    print(_FINISH_ART)
    print("We hope you enjoyed learning about the various aspects of the language!")
    print("If you noticed any issues, please don't hesitate to report them to our repo.")
    print("You can also contribute your own exercises to help the greater community!")
    print()
    print("Before reporting an issue or contributing, please read our contributing guidelines.")


def main(argv: list[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(_BANNER)

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the exlings directory")
        print("Try `cd exlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install the compiler, check the README.")
        return 1

    exercises = load_exercises(INFO_FILE)
    verbose = args.nocapture

    match args.command:
        case None:
            print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
            return 0
        case "list":
            list_exercises(
                exercises,
                paths=args.paths,
                names=args.names,
                filter=args.filter,
                unsolved=args.unsolved,
                solved=args.solved,
            )
            return 0
        case "run" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except ExerciseNotFound as error:
                print(error)
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            try:
                run(exercise, verbose)
            except ExerciseFailed:
                return 1
            return 0
        case "verify":
            try:
                verify(exercises, verbose)
            except VerificationError:
                return 1
            return 0
        case "watch":
            try:
                status = watch(exercises, verbose)
            except OSError as error:
                print(f"Error: Could not watch your progress. Error message was {error!r}.")
                print(
                    "Most likely you've run out of disk space or your "
                    "'inotify limit' has been reached."
                )
                return 1
            if status is WatchStatus.FINISHED:
                _print_finished()
            else:
                print("We hope you're enjoying learning!")
                print(
                    "If you want to continue working on the exercises at a later point, "
                    "you can simply run `exlings watch` again"
                )
            return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())