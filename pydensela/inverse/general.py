"""
General inverse and determinant of arbitrary M x N matrices.

    inv(dst, a, calc_det) -> determinant

- square, non-singular: LU with partial pivoting, solve A·X = I;
  the determinant is the signed product of the pivots
- square singular, or rectangular: SVD pseudo-inverse (see _pseudo)

For square input the returned determinant is the LU determinant, which is
zero, or within rounding of zero, exactly when the matrix is singular.
Rectangular input has no determinant; 0.0 is returned by convention.

Singularity is judged relative to the largest pivot (see _lu), and the
pseudo-inverse drops singular values relative to the largest one. A matrix
with a scale spread beyond about 1/eps is therefore inverted as rank
deficient: inv of diag(1e20, 1) returns diag(1e-20, 0), not diag(1e-20, 1).
Rescale such input first if the exact inverse is wanted.
"""

from pydensela.core.validation import check_finite, check_shape, check_square
from pydensela.inverse._lu import lu_factorize, lu_inverse
from pydensela.inverse._pseudo import pseudo_inverse
from pydensela.matrix.dense import Matrix, check_matrix


def inv(dst: Matrix, a: Matrix, calc_det: bool) -> float:
    """
    Inverse (square, non-singular) or pseudo-inverse (otherwise) of a.

    Args:
        dst: Output matrix pre-sized to N x M
        a: Input M x N matrix (not modified)
        calc_det: If True, return the determinant of a square a

    Returns:
        The determinant if calc_det and a is square, else 0.0

    Raises:
        DimensionError: If dst is not N x M
        ValidationError: If a contains NaN/Inf
        ConvergenceError: If the SVD of the pseudo-inverse path does not converge

    Example:
        >>> a = Matrix.from_nested([[1, 2], [3, 2]])
        >>> ai = Matrix.zeros(2, 2)
        >>> inv(ai, a, True)
        -4.0
    """
    check_matrix(dst, 'dst')
    check_matrix(a, 'a')
    check_shape(dst.shape, (a.N, a.M), 'dst')
    check_finite(a.data, 'a')

    arr = a.as_array()
    determinant = 0.0
    if a.is_square:
        factors = lu_factorize(arr)
        if calc_det:
            determinant = factors.determinant
        if not factors.singular:
            dst.assign(lu_inverse(factors))
            return determinant

    ai, _ = pseudo_inverse(arr)
    dst.assign(ai)
    return determinant


def det(a: Matrix) -> float:
    """
    Determinant of a square matrix from its LU factorization.

    Raises:
        DimensionError: If a is not square
        ValidationError: If a contains NaN/Inf
    """
    check_matrix(a, 'a')
    check_square(a.shape, 'a')
    check_finite(a.data, 'a')
    return lu_factorize(a.as_array()).determinant
