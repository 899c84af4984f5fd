# rustlings

Building blocks for working through small Rust exercises: terminal output
helpers, a generator for the `rust-project.json` file that rust-analyzer reads,
and worked Python answers to many of the exercises.

## Installation

```
pip install .
```

The package has no runtime dependencies. Install the `test` extra to run the
test suite with pytest.

## Terminal output: `rustlings.ui`

- `styled(text, *styles)` wraps text in ANSI codes for the styles `"bold"`,
  `"red"`, `"green"` and `"blue"`. It raises `ValueError` for any other style
  name. Colour is off when `NO_COLOR` is set, forced on when `CLICOLOR_FORCE`
  is set to something other than `0`, and otherwise on only when stdout is a
  terminal.
- `warn(message)` prints a red message with a warning sign.
- `success(message)` prints a green message with a check mark.
- `no_emoji()` is true when the `NO_EMOJI` environment variable is set. In that
  case `warn` and `success` use `!` and `✓` in place of emoji.
- `Spinner(message)` animates a spinner with a message on stderr while stderr
  is a terminal. Use `set_message` to change the text and `finish_and_clear` to
  stop it. It also works as a context manager.
- `ProgressBar(total, position=0)` counts finished exercises. `advance()` moves
  it one step, and `render()` returns a line such as
  `Progress: [###>---…] 3/10 (30.0 %)`.

## rust-analyzer support: `rustlings.project`

`RustAnalyzerProject` builds the contents of `rust-project.json`:

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()           # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

`exercises_to_json` adds one `Crate` for each `.rs` file below the given
directory. Each crate uses edition 2021, has no deps, and has `cfg` set to
`["test"]`. `to_json()` returns the compact JSON text. `get_sysroot_src` needs
`rustc` on your `PATH` unless `RUST_SRC_PATH` is set.

## Worked answers: `rustlings.lessons`

- `traits`: `append_bar` for strings and lists; `Licensed`, `SomeSoftware`,
  `OtherSoftware` and `compare_license_types`; `Cow` and `abs_all`, which copy
  borrowed data only when a value must change.
- `structures`: colour records, `Order` and `create_order_template`,
  `Package` (rejects weights below 10 grams), the message types
  `ChangeColor`, `Echo`, `Move` and `Quit` processed by `State.process`,
  `Rectangle` (rejects sides that are not positive), `Wrapper`,
  `ReportCard.render` for numeric or letter grades, and a cons list (`Cons`,
  `Nil`).
- `collections`: `fruit_basket`, `build_scores_table`, the capitalisation
  helpers, `factorial`, and the `count_*` functions over `Progress` maps.
- `errors`: `maybe_icecream`, `generate_nametag_text` (raises
  `EmptyNameError`), `total_cost`, `PositiveNonzeroInteger` (raises
  `CreationError`) and `parse_pos_nonzero` (raises `ParsePosNonzeroError`).
- `conversions`: `person_from` (falls back to the default `Person`),
  `parse_person` (raises `ParsePersonError`), `color_from` (raises
  `IntoColorError`), `byte_counter`, `char_counter` and `num_sq`.
- `transformer`: `transformer` applies `Uppercase`, `Trim` or `Append(n)` to
  each string.
- `division`: `divide` raises `NotDivisibleError` or `DivideByZeroError`.
  `result_with_list` and `list_of_results` divide a fixed list of numbers.

## What this package does not do

There is no command-line program. The package does not compile, run, test,
verify or watch exercise files. It does not read an exercise list, track which
exercises are done, show hints, or reset exercises. It also has no worked
answers for the introductory exercises on functions, `if`, vectors and
strings. The `ui` and `project` modules provide the output and rust-analyzer
pieces that such a runner would use.