# rustlings

Worked solutions to a set of small exercises for learning Rust, written in
Python, together with two helpers for working on the exercises: a generator
for the `rust-project.json` file that rust-analyzer reads, and coloured
status lines for the terminal.

## Installation

```
pip install .
```

The only runtime dependency is `rich`. Install the `test` extra to run the
test suite with pytest.

## Reference solutions

The `rustlings.lessons` package holds one module per exercise topic:

- `quizzes`: `calculate_price_of_apples`, `transformer` with `Command` and
  `CommandKind`, and `ReportCard`
- `enums`: the messages `ChangeColor`, `Echo`, `Move` and `Quit`, `Point`,
  `describe`, and a `State` that processes messages
- `errors`: `generate_nametag_text`, `total_cost`, `spend_tokens`,
  `PositiveNonzeroInteger`, `parse_pos_nonzero` and their errors
- `functions`: `call_me`, `sale_price`, `is_even`, `square`
- `generics`: `Wrapper` and `shopping_list`
- `hashmaps`: `fruit_basket`, `fill_fruit_basket`, `build_scores_table`
- `conditionals`: `bigger` and `foo_if_fizz`
- `iterators`: capitalisation helpers, `divide` with `NotDivisibleError`
  and `DivideByZeroError`, `factorial`, and progress counters
- `options`: `maybe_icecream` and `describe_point`
- `primitives`: `greetings`, `classify_char`, `describe_array`,
  `nice_slice`, `describe_cat`, `second`
- `strings`: `current_favorite_color`, `is_a_color_word`, `trim_me`,
  `compose_me`, `replace_me`
- `vecs`: `array_and_vec`, `vec_loop`, `vec_map`
- `smart_pointers`: `offset_sums`, the cons list `Cons`, and the
  clone-on-write `Cow` with `abs_all`
- `structs`: colour records, `Order`, `create_order_template`, `Package`
- `threads`: `run_timed_workers`, `complete_jobs`, `send_tx`, `receive_all`
- `traits`: `append_bar`, `Licensed` software, `compare_license_types`,
  `some_func`

Where an operation cannot succeed, the functions raise an exception rather
than returning an error value:

```python
from rustlings.lessons.quizzes import calculate_price_of_apples
from rustlings.lessons.iterators import divide, NotDivisibleError

calculate_price_of_apples(41)  # 41

try:
    divide(81, 6)
except NotDivisibleError as error:
    print(error.dividend, error.divisor)  # 81 6
```

## rust-analyzer project file

`rustlings.project.RustAnalyzerProject` builds a `rust-project.json` with one
`Crate` per `.rs` file:

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()           # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

`add_path` adds a single file, and `to_json` returns the JSON text without
writing it.

## Status lines

`rustlings.ui.warn` and `rustlings.ui.success` print a red or green line
with a leading mark and return its plain text. When the `NO_EMOJI`
environment variable is set (see `no_emoji`), plain `!` and `✓` marks are
used instead of emoji.

## What this package does not do

There is no command-line program. The package does not compile, run, test
or lint Rust exercises, has no watch mode, gives no hints, and does not read
an exercise list or track which exercises are done.