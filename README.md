# kernelkit

Small, readable reference implementations of numeric kernels, written in plain
Python over lists of floats:

- **Softmax** in three forms: `naive_softmax` (raw exponentials, may overflow),
  `safe_softmax` (subtracts the maximum first) and `online_softmax` (finds the
  maximum and the normaliser in a single pass). Two functions combine the
  online softmax with a weighted sum: `online_softmax_dot` does the weighted
  sum as a second pass, `online_softmax_dot_fused` folds it into the running
  loop.
- **Element-wise addition** of vectors (`vector_add`) and of flat row-major
  matrices (`init_matrix`, `matrix_add`, `format_matrix`).
- **Block reduction**: `block_sums` sums fixed-size blocks, and `check`
  compares two results within a tolerance.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Library use

```python
from kernelkit.softmax import safe_softmax, online_softmax, online_softmax_dot_fused
from kernelkit.arrays import vector_add, init_matrix, matrix_add, block_sums, check

probs = online_softmax([2.3, 5.6, 8.5, 1.2, 0.1])
same = safe_softmax([2.3, 5.6, 8.5, 1.2, 0.1])
weighted = online_softmax_dot_fused([2.3, 5.6, 8.5, 1.2, 0.1],
                                    [1.1, 2.2, 3.3, 4.4, 5.5])

total = vector_add([1.0, 2.0], [3.0, 4.0])        # [4.0, 6.0]
grid = matrix_add(init_matrix(4, 4), init_matrix(4, 4))  # sixteen 2.0 values

sums = block_sums([1.0] * 1024, 256)              # [256.0, 256.0, 256.0, 256.0]
ok = check(sums, [256.0] * 4, 0.005)              # True
```

Notes on behaviour:

- `safe_softmax` and `online_softmax` return `[]` for empty input.
- `online_softmax_dot` and `online_softmax_dot_fused` raise `ValueError` when
  values and weights differ in length, and return `0.0` for empty input.
- `vector_add`, `matrix_add` and `check` raise `ValueError` when their operands
  differ in length.
- `init_matrix` and `format_matrix` raise `ValueError` for negative
  dimensions; `format_matrix` also when the list does not hold `nx * ny`
  elements. Each row is printed between two lines of dashes.
- `block_sums` raises `ValueError` for a block size that is not positive; a
  short last block is summed as it is.
- `check` passes when no element of `expected` is larger than the matching
  element of `actual` by more than the tolerance (default `0.005`). It is
  one-sided: an `actual` value far above `expected` still passes.
- `format_vector` joins values with spaces, each shown with six significant
  digits.

## Commands

```
kernelkit-softmax
```

Prints the sample input `2.3 5.6 8.5 1.2 0.1`, the result of each of the three
softmax variants, and the two weighted sums against the weights
`1.1 2.2 3.3 4.4 5.5`, labelled `default dot product` and
`optimal dot product`.

```
kernelkit-arrays matrix [--nx N] [--ny N]
```

Builds two matrices of ones (1024 by 1024 unless given), adds them and prints
the result row by row. Expect a great deal of output at the default size.

```
kernelkit-arrays reduce [--size N] [--block-size N]
```

Sums a vector of ones (32 × 1024 × 1024 elements unless given) in blocks of 256,
sums it again in the same blocks with `math.fsum`, compares the two with
`check` and prints whether the result is correct. The exit status is 0 when it
is, 1 when it is not. Invalid sizes are reported as usage errors.

## What this package does not do

Everything runs on the CPU in pure Python lists. There is no device or GPU
execution, no array library backend and no attention to speed; at the default
sizes the `kernelkit-arrays` commands take a while. The functions are meant as
clear references to check other implementations against.