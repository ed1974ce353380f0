# ingotkit

A small toolbox of general-purpose helpers. It has no dependencies outside the standard library.

- **`ingotkit.text`**: `substr(text, start, end)` returns the part of `text` that begins with `start` and stops just before the first `end` found from there. It returns `None` when either marker is missing.
- **`ingotkit.mathutil`**:
  - `is_odd`, `is_even` and `is_prime` check number properties.
  - `approx_eq` compares numbers, or sequences component by component, within a relative epsilon.
  - `lerp` and `lerp_vec` do linear interpolation.
  - `min_pos`, `max_pos`, `min_neg` and `max_neg` return an `(index, value)` pair or `None`.
  - `normalize`, `unnormalize`, `linear_map` and `linear_map_vec` map values between ranges and regions.
  - A `ValueError` is raised for NaN inputs and for vectors of different lengths.
- **`ingotkit.seqtools`**:
  - `is_unique` checks a collection for duplicates.
  - `min_by` and `max_by` return every item tied for the extreme value. The key function is called as `get_value(item, index)`.
  - `into_map`, `into_list`, `add` and `sub` work with maps that index each object under every part of its hash. You supply that hash as `hash_of(item)`, which returns an iterable of keys.
- **`ingotkit.fsutil`**:
  - `empty_dir` removes a directory's contents and recreates it; the directory is created if it is missing.
  - `remove_files` deletes files with a given extension, recursively.
  - `has_file_with_ext` checks whether a directory directly holds an entry with that extension.
  - Extensions are given without the leading dot.
- **`ingotkit.reactive`**: `ReactiveList` is a list that calls every registered watcher with a copy of its values after each `set`, `push` or `pop`. `watch` returns a function that unregisters the watcher. `get` and `pop` return `None` when there is no item, and `set` raises `IndexError` when the index is out of range.

## Installation

```
pip install ingotkit
```

## Examples

```python
from ingotkit.text import substr
from ingotkit.mathutil import is_prime, lerp, linear_map, min_pos
from ingotkit.seqtools import max_by
from ingotkit.reactive import ReactiveList

substr("SDL2-2.0.12/lib/x86/SDL2.dll", "SDL", "l")   # "SDL2-2.0.12/"
is_prime(97)                                        # True
lerp(0.5, 0.0, 10.0)                                # 5.0
linear_map(5.0, (0.0, 10.0), (0.0, 100.0))          # 50.0
min_pos([-1.0, 3.0, 0.5])                           # (2, 0.5)
max_by(["a", "bb", "cc"], lambda s, i: len(s))      # ["bb", "cc"]

items = ReactiveList([0, 0, 0])
unwatch = items.watch(lambda values: print("now", values))
items.set(0, 1)      # prints: now [1, 0, 0]
items.push(2)        # prints: now [1, 0, 0, 2]
unwatch()
list(items)          # [1, 0, 0, 2]
```

## What it does not include

The package is a library only. It provides no command-line tool. It has no case-style string conversion, such as camelCase to snake_case. It has no vector, range or tree-set types; vectors and ranges are passed as plain tuples and sequences.

## Running the tests

```
pip install -e ".[test]"
pytest
```