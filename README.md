# exlings

`exlings` is a command-line companion for working through a course of small
exercises. Each exercise is a source file. `exlings` compiles it, runs it or
runs its tests. It tells you when an exercise passes, shows its hint on request
and keeps track of your progress.

## Installation

```
pip install .
```

The exercises are built with `rustc`, so it must be on your `PATH`. Lint-style
exercises also need `cargo clippy`. Before it runs any subcommand, `exlings`
checks that `rustc --version` works. If it does not, `exlings` exits with
status 1.

## The exercise directory

Run `exlings` from the directory that holds the course. That directory must
contain an `info.toml` file that lists the exercises in their recommended
order:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."
```

`mode` takes one of three values:

- `compile`: the file is built and the program is run.
- `test`: the file is built as a test harness and the tests are run.
- `clippy`: the file is built. Then `cargo clippy` runs with `-D warnings`, so
  every warning counts as an error. To do this, `exlings` writes
  `./exercises/clippy/Cargo.toml` for the exercise.

Built binaries are written to temporary files named `./temp_<pid>_ThreadId<n>`
in the current directory. They are removed once they have been run.

An exercise counts as solved once it builds and passes and its source no longer
contains the `// I AM NOT DONE` marker. Until you delete that marker, `verify`
stops at the exercise. It then shows the lines around the marker and asks you
to remove it when you are ready to move on.

If `info.toml` is missing, `exlings` prints a reminder to change into the
course directory and exits with status 1.

## Commands

```
exlings                  # print the welcome banner and the contents of default_out.txt
exlings -v               # print the version
exlings verify           # check every exercise in order and stop at the first unsolved one
exlings watch            # like verify, then re-check whenever a file under ./exercises changes
exlings run NAME         # build and run (or test) one exercise
exlings run next         # run the first exercise that is not solved yet
exlings hint NAME        # print the hint for one exercise
exlings list             # table of all exercises with their status
```

`--nocapture` goes before the subcommand. It shows the output of test
exercises, for example `exlings --nocapture run NAME`.

`run` does not ask about the `I AM NOT DONE` marker. It only reports whether
the exercise builds and passes.

### Listing

`exlings list` takes these options:

- `-p`, `--paths`: print only the paths of the exercises.
- `-n`, `--names`: print only the names of the exercises.
- `-f`, `--filter PATTERNS`: show only exercises whose name or path contains
  one of the comma-separated patterns. The patterns are lower-cased before
  matching.
- `-u`, `--unsolved`: show only exercises that are not yet solved.
- `-s`, `--solved`: show only exercises that are already solved.

The list always ends with a progress line such as
`Progress: You completed 3 / 10 exercises (30.00 %).`

### Watch mode

`exlings watch` first verifies every exercise. After that it waits for `.rs`
files under `./exercises` to be created or changed. When one changes, it checks
the edited exercise and the exercises after it again, followed by any earlier
exercises that are still unsolved. While it is running, you can type these
commands:

- `hint`: print the hint for the exercise that is currently failing.
- `clear`: clear the screen.
- `quit`: leave watch mode.
- `help`: list these commands.

## Environment

Set `NO_EMOJI` to any value to replace the emoji in messages with plain ASCII
markers. Colours and the progress spinner are used only when the output is a
terminal.

## Exit status

| Situation                                                    | Status |
|--------------------------------------------------------------|--------|
| The command succeeded                                        | 0      |
| Invalid command-line arguments                               | 1      |
| Not in a course directory, or `rustc` is missing             | 1      |
| An exercise failed to build, run or pass its tests           | 1      |
| `verify` stopped at an exercise that is not solved           | 1      |
| No exercise has the given name, or none is left for `next`   | 1      |
| Watch mode could not watch `./exercises`                     | 1      |

## Library use

The modules can also be imported:

- `exlings.exercise`: `load_exercises(path)` reads an `info.toml` into
  `Exercise` objects. `Exercise.compile()` returns a `CompiledExercise`, or
  raises `CompileError`. `Exercise.state()` returns a `State` whose `context`
  holds the `ContextLine`s around the marker. `Exercise.looks_done()` reports
  whether the marker is gone.
- `exlings.verify`: `verify(exercises, verbose)` raises `VerificationError` at
  the first exercise that is not done. `test(exercise, verbose)` raises
  `ExerciseFailed`.
- `exlings.run`: `run(exercise, verbose)` raises `ExerciseFailed` when the
  exercise fails.
- `exlings.cli`: `main(argv)`, `find_exercise`, `list_exercises` and `watch`
  are the building blocks of the command.

The `exlings.lessons` subpackage holds worked solutions to the course
material, grouped by topic:

- `basics`: variables, functions, conditionals and strings.
- `collections_`: dictionaries and lists.
- `errors` and `advanced_errors`: parse errors and custom error types.
- `testing`: small functions to practise writing tests against.
- `iterators`: cons lists, iterators, fallible division and counting.
- `concurrency`: threads sharing data and polling background work.
- `generics`: generic containers, report cards and `append_bar`.
- `datatypes`: enums, structs, primitive values and optional values.
- `ownership`: passing lists around, module-level names and variadic helpers.

## What is not included

The lessons subpackage has no worked solutions for the type-conversion topic.
This covers byte and character counting, parsing people from text, building
colours from integer triples, and averaging. The command-line tool does not
depend on any lesson and works the same without them.

## Running the tests

```
pip install .[test]
pytest
```