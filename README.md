# katarun

`katarun` is a Python library for working with a course of small Rust
exercises: it reads the course's exercise list, compiles an exercise, runs it
or its tests, and tells whether the exercise is still marked as unfinished. It
can also write a `rust-project.json` so rust-analyzer understands the exercise
files. Alongside, `katarun.lessons` holds worked Python solutions to many of the
course's exercises.

The Rust toolchain (`rustc`, and `cargo` for lint exercises) must be on your
`PATH` for compiling and running. Python 3.11 or later is required; there are no
third-party dependencies.

## A course directory

A course directory holds an `info.toml` file listing the exercises in their
recommended order, and an `exercises/` directory with the sources. Each
`[[exercises]]` entry must have:

- `name`: the exercise's name,
- `path`: the path of its source file,
- `mode`: `compile`, `test` or `clippy`,
- `hint`: help text.

An entry missing any of these makes `load_exercises` raise `ValueError`.

## Exercises: `katarun.exercise`

```python
from katarun.exercise import load_exercises, ExerciseError

exercises = load_exercises("info.toml")
exercise = exercises[0]

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except ExerciseError as err:
    print(err.output.stderr)

for line in exercise.state():
    marker = ">" if line.important else " "
    print(f"{marker}{line.number:>3} {line.line}")
```

- `Mode` is `COMPILE`, `TEST` or `CLIPPY`.
- `Exercise(name, path, mode, hint)`; `str(exercise)` is its path.
- `Exercise.compile()` builds the exercise with `rustc` (edition 2021, with
  `--test` in test mode) into a temporary binary in the current directory, and
  returns a `CompiledExercise`. In clippy mode it writes
  `./exercises/clippy/Cargo.toml`, builds the binary, runs `cargo clean`, then
  `cargo clippy` with warnings denied. A failed build raises `ExerciseError`,
  whose `output` is an `ExerciseOutput` with `stdout` and `stderr`; a tool that
  cannot be started raises `RuntimeError`.
- `CompiledExercise.run()` runs the binary (with `--show-output` for tests) and
  returns an `ExerciseOutput`, or raises `ExerciseError` on a non-zero exit.
  `close()`, or leaving its `with` block, removes the binary.
- `Exercise.state()` returns the lines around the first `// I AM NOT DONE`
  marker (two before and two after) as `ContextLine` values with `line`,
  `number` and `important`; an empty list means the marker is gone.
  `looks_done()` is true when that list is empty.
- `temp_file()` gives the temporary binary's path for the current process and
  thread; `clean()` removes it.

## rust-analyzer: `katarun.project`

```python
from katarun.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

`get_sysroot_src()` uses `RUST_SRC_PATH` if set, otherwise asks
`rustc --print sysroot` and points at its `lib/rustlib/src/rust/library`.
`exercises_to_json()` adds a `Crate` (edition 2021, `cfg` of `test`) for every
`.rs` file below the directory; `add_path()` adds a single one. `to_dict()`
gives the JSON structure and `write_to_disk()` writes it.

## Terminal output: `katarun.ui`

`warn(message)` and `success(message)` print red and green status lines;
`bold()` and `blue()` style text; `emoji(fancy, plain)` picks the plain form
when `NO_EMOJI` is set or stdout cannot encode the emoji. Colours are used on a
terminal, never when `NO_COLOR` is set, and always when `CLICOLOR_FORCE` is set
to something other than `0`.

## Worked solutions: `katarun.lessons`

- `basics`: `calculate_price_of_apples`, `bigger`, `foo_if_fizz`,
  `animal_habitat`, `is_even`, `sale_price`, `square`.
- `quizzes`: `transformer` applying `Command`s (`CommandKind.UPPERCASE`, `TRIM`,
  `APPEND`) to strings, and `ReportCard` with numeric or letter grades.
- `people`: `Person.default()`, the lenient `Person.from_text()` and the strict
  `Person.parse()`, which raises `ParsePersonError` with a `PersonErrorKind`.
- `errors`: `generate_nametag_text`, `parse_int`, `total_cost`,
  `PositiveNonzeroInteger` raising `CreationError`, and `parse_pos_nonzero`
  raising `ParsePosNonzeroError`.
- `iterators`: word capitalisation, `divide` with `NotDivisibleError` and
  `DivideByZeroError`, `result_with_list`, `list_of_results`, `factorial`, and
  counting `Progress` values in mappings.
- `baskets`: `fruit_basket`, `build_scores_table` returning `Team`s, `vec_loop`,
  `vec_map`.
- `records`: `Package`, a `State` driven by `Move`, `Echo`, `ChangeColor` and
  `Quit` messages, and a generic `Wrapper`.
- `text`: `trim_me`, `compose_me`, `replace_me`, `append_bar` for strings and
  lists, `Licensed` software, and `maybe_icecream`.

## What this package does not do

There is no command-line program. The package does not verify a whole course
in order, watch files for changes, show progress bars, list exercises with
their status, print hints on request, or reset an exercise; these are left to
the code that uses the library. Among the worked solutions there is none for
the colour and type-conversion exercises.