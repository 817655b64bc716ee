# codebits

A collection of small, self-contained algorithms and a handful of terminal
games. Everything is plain Python with no third-party dependencies.
Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### `codebits.arrays`

- `is_anagram(s, t)`: whether two strings hold the same characters.
- `first_missing_positive(values)`: smallest positive integer not present.
- `gas_station_start(gas, cost)`: lowest station index from which a circular
  trip succeeds, or `-1`. Raises `ValueError` if the lists differ in length.
- `can_jump(jumps)`: whether the last index is reachable when each value is
  the maximum jump from its position.
- `single_number(nums)`: the element that appears once when all others
  appear twice.
- `two_sum(nums, target)`: `[later_index, earlier_index]` of two numbers
  summing to `target`, or `[]` if there are none.
- `restore_string(s, indices)`: place `s[i]` at position `indices[i]`;
  raises `ValueError` if `indices` is not a permutation.
- `sub_array_ranges(nums)`: sum of (max − min) over all contiguous subarrays.
- `fizz_buzz(n)`: the FizzBuzz sequence from 1 to `n` as strings.

### `codebits.sorting`

All four take any iterable of integers and leave it untouched.

- `bubble_sort(values)`: returns `(sorted_list, comparisons)`, stopping early
  once a pass makes no swap.
- `counting_sort(values)`: for non-negative integers; raises `ValueError`
  on negatives.
- `merge_sort(values)` and `quick_sort(values)`: return a new sorted list.

### `codebits.expressions`

- `precedence(op)`: 3 for `^`, 2 for `*` and `/`, 1 for `+` and `-`, else 0.
- `is_operator(ch)`: true for `^*/+-` and parentheses.
- `infix_to_postfix(expr)`: converts single-character operands, treating all
  operators as left-associative; e.g. `infix_to_postfix("a+b*c")` gives
  `"abc*+"`.
- `is_valid_parentheses(text)`: balanced `()`, `[]` and `{}` check.

### `codebits.numbers`

- `bell_number(n)`: number of partitions of an n-element set.
- `count_coin_change(coins, amount)`: ways to make `amount` from unlimited
  coins, ignoring order.
- `counting_towers(n)`: ways to build a 2 × n tower, modulo 1 000 000 007.
- `fibonacci(n)`: the first `n` Fibonacci numbers, never fewer than `[0, 1]`.
- `reverse_number(n)` and `is_palindrome_number(num)`.
- `square_root(x, max_error=1e-7)`: Newton's method.
- `quadratic_roots(a, b, c)`: both roots, as complex numbers when the
  discriminant is negative; raises `ValueError` if `a` is zero.
- `fast_power(base, exponent)`: exponentiation by repeated squaring.
- `range_add_hash(values, updates)`: applies `(left, right, amount)` range
  additions, then returns `sum(v[i] * 107**i) mod 1 000 000 007`.
- `multiplication_table(n)`: the lines `n * i = ...` for i from 1 to 10.

### `codebits.paths`

- `min_cost_path(cost, m, n)`: cheapest path from `(0, 0)` to `(m, n)` moving
  right, down or diagonally.
- `subset_sums(weights, target)`: every subset of `weights` adding up to
  `target`, as tuples in depth-first order.
- `max_edge_removal(n, edges)`: edges of a tree on nodes `1..n` that can be
  cut leaving only even-sized components.
- `matrix_sum(first, second)`: element-wise sum of two same-shaped matrices.

### `codebits.lengths`

`Length(feet, inches)` is a frozen dataclass with `total_inches()`,
supporting `+` and `-`; `length_from_inches(inches)` builds one from a total
inch count.

```python
from codebits.lengths import Length

print(Length(5, 8) + Length(1, 6))  # 7fts 2inchs
```

### `codebits.caesar`

`encrypt(message, key)` and `decrypt(message, key)` shift ASCII letters
within the alphabet, keeping case and leaving other characters alone.

### `codebits.hangman`

`decrypt_word(code)` recovers a word from the obfuscated list `WORDS`;
`render_body(mistakes)` draws the gallows; `HangmanGame(word)` tracks a round,
with `guess(letter)`, `progress`, `wrong_letters`, `won`, `lost` and
`finished`.

### `codebits.tic_tac_toe`

`Board` holds nine cells numbered 0 to 8, with `place(position, mark)`
(raising `ValueError` on an invalid move), `winner()`, `is_full()` and
`render()`.

### `codebits.guess`

`play(secret, guesses)` returns the number of guesses taken to hit `secret`,
raising `ValueError` if they run out first.

## Commands

| Command              | What it does                                |
|----------------------|---------------------------------------------|
| `codebits-lengths`   | add or subtract two feet-and-inch lengths   |
| `codebits-caesar`    | Caesar cipher encryption and decryption     |
| `codebits-hangman`   | a game of hangman with six allowed mistakes |
| `codebits-tictactoe` | two-player tic-tac-toe on a 3×3 board       |
| `codebits-guess`     | guess a number between 1 and 100            |

Each command prompts for its input interactively. `codebits-hangman
--index N` picks word `N` (0–9) instead of a random one, and
`codebits-guess --seed S` seeds the random number generator.