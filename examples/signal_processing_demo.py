"""Example: Matrices and signal processing with sigmat

Demonstrates matrix literals, element-wise arithmetic, filtering,
convolution, resampling and Toeplitz matrices.
"""

import numpy as np

import sigmat as sm
from sigmat import Matrix


def example_matrix_basics():
    """Example: building, indexing and printing matrices."""
    print("=" * 60)
    print("Example 1: Matrix basics")
    print("=" * 60)

    a = Matrix("[1 2 3; 4 5 6]")
    print(f"a =\n{a}")
    print(f"shape: {a.shape}, element (1, 2): {a[1, 2]}")
    print(f"linear element 3 (column-major): {a[3]}")

    b = a * 2 - 1
    print(f"a * 2 - 1 =\n{b}")
    print(f"a @ a.T =\n{a @ a.T}")
    print(f"row 1: {a.row(1)}, column 2: {a.col(2)}")
    print(f"minor without (0, 0):\n{a.shrink(0, 0)}")
    print()


def example_filtering():
    """Example: smoothing a noisy step with a one-pole low-pass filter."""
    print("=" * 60)
    print("Example 2: IIR filtering")
    print("=" * 60)

    rng = np.random.default_rng(42)
    step = np.r_[np.zeros(10), np.ones(30)] + 0.1 * rng.standard_normal(40)
    x = Matrix.from_array(step.reshape(-1, 1))

    alpha = 0.2
    y = sm.filter([alpha], [1.0, alpha - 1.0], x)

    print(f"input  (last 5): {np.round(x.to_numpy().ravel()[-5:], 3)}")
    print(f"output (last 5): {np.round(y.to_numpy().ravel()[-5:], 3)}")
    print()


def example_convolution():
    """Example: convolution and the equivalent convolution matrix."""
    print("=" * 60)
    print("Example 3: Convolution")
    print("=" * 60)

    h = Matrix("[1; 2; 1]")
    x = Matrix("[1; 0; -1; 2]")

    y = sm.conv(h, x)
    c = sm.convmtx(h, x.size)
    print(f"conv(h, x) = {y.T}")
    print(f"convmtx(h, 4) =\n{c}")
    print(f"convmtx(h, 4) @ x = {(c @ x).T}")
    print()


def example_resampling_and_toeplitz():
    """Example: up/down-sampling and an autocorrelation Toeplitz matrix."""
    print("=" * 60)
    print("Example 4: Resampling and Toeplitz matrices")
    print("=" * 60)

    x = Matrix("[1 2 3 4]")
    up = sm.upsample(x, 2)
    print(f"upsample(x, 2)   = {up}")
    print(f"downsample(.., 2) = {sm.downsample(up, 2)}")

    r = Matrix("[1 0.5 0.25]")
    print(f"toeplitz(r) =\n{sm.toeplitz(r)}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Signal processing - sigmat examples")
    print("=" * 60 + "\n")

    example_matrix_basics()
    example_filtering()
    example_convolution()
    example_resampling_and_toeplitz()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
