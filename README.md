# taskbook

An interactive console collection of algorithm exercises: stock spans, Roman
numerals, palindromic linked lists, assembling a note from a set of letters,
FizzBuzz, the middle of a linked list, the k weakest rows of a matrix, steps to
reduce a number to zero, maximum row wealth, a spinning-wheel problem, binary
GCD, continued fractions, Fibonacci numbers modulo *m* (plain and with Pisano
periods), an AVL tree demo, and probability modelling with random ensembles and
Markov chains. Prompts and messages are in Russian.

## Installation

```
pip install .
```

## Running

```
taskbook
```

The program prints a numbered menu of 19 tasks. Type the number of a task and
answer its prompts; after a task finishes the menu is shown again. Typing `0`,
or any other number outside the menu, quits with exit status 0. If input cannot
be read or converted (for example, a menu choice that is not a non-negative
integer), the error is printed to standard error and the program exits with
status 1.

Matrices are entered one row per line, with values separated by spaces, and
finished with an empty line.

## Using it as a library

The solutions are plain functions and classes:

```python
from taskbook.leetcode import roman_to_int, fizz_buzz, k_weakest_rows
from taskbook.number_theory import gcd, fib_mod_pisano, find_chained_fraction_numbers
from taskbook.matrix import Matrix
from taskbook.avl_tree import insert, find, count

roman_to_int("MMXXIII")            # 2023
fizz_buzz(17)[14]                  # "FizzBuzz"
gcd(14, 8)                         # 2
fib_mod_pisano(2816213588, 30524)  # 10249

m = Matrix.from_rows([[1, 0, 0, 0], [1, 1, 1, 1], [1, 0, 0, 0], [1, 0, 0, 0]])
k_weakest_rows(m, 2)               # [0, 2]

tree = None
for key in (16, 17, 15, 1, 20):
    tree = insert(tree, key)
find(tree, 15), count(tree)        # (True, 5)
```

Modules:

- `taskbook.leetcode` — `roman_to_int`, `can_construct`, `fizz_buzz`,
  `middle_node`, `k_weakest_rows`, `number_of_steps`, `maximum_wealth`.
- `taskbook.number_theory` — `gcd`, `find_chained_fraction_numbers`,
  `fib_mod`, `get_pisano_period`, `fib_mod_pisano`.
- `taskbook.stock_span` — `simple_stock_span` and `stack_stock_span`; pass
  `debug=True` to print each step.
- `taskbook.wheel` — `can_point_to_zero(n, x, p)`.
- `taskbook.linked_list` — `ListNode`, `make_single_linked_list`,
  `is_palindrome`.
- `taskbook.matrix` — `Matrix` (`from_rows`, `filled`, `parse_from_lines`,
  `size`) and `read_matrix`.
- `taskbook.avl_tree` — `AVLNode` and the functions `height`, `insert`,
  `remove`, `find`, `count`, which accept `None` as an empty tree and return
  the new root.
- `taskbook.bst` — `BinarySearchTree` and `BSTNode`.
- `taskbook.random_ensemble` — `RandomEnsemble`; `taskbook.markov_chain` —
  `MarkovChain`. Both take an optional `random.Random` instance so results can
  be reproduced, and count how often each value was drawn in `frequencies`.
- `taskbook.tools` — parsing and console input helpers (`parse`,
  `parse_many`, `read`, `read_many`, `bounded_int`).

## Errors

All error classes derive from `ValueError`, except `NotCompiledError`:

- `taskbook.tools.InputError` — input that cannot be read or converted.
- `taskbook.matrix.MatrixError` — rows that do not form a rectangular matrix.
- `taskbook.random_ensemble.EnsembleError` — an incomplete ensemble or
  probabilities that do not sum to 1 within 0.0001;
  `NotCompiledError` (a `RuntimeError`) when an ensemble is used before
  `compile()`.
- `taskbook.markov_chain.MarkovChainError` — mismatched, empty or non-square
  transition data, or a start state out of range.
- `taskbook.bst.DuplicateValueError` — inserting a value already in a
  `BinarySearchTree`.

## Limitations

The `taskbook` command takes no options other than `--help`; everything is
entered through the interactive prompts. Nothing is saved between runs. The
transition matrix of a `MarkovChain` is not checked for rows summing to 1.

## Tests

```
pip install .[test]
pytest
```