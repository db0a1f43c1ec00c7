"""
Tests for the Backend protocol: every shipped backend satisfies it.
"""

import numpy as np
import pytest

from pydensela.core import Backend, Result
from pydensela.inverse.backends import (
    ClosedFormBackend,
    LUBackend,
    PseudoInverseBackend,
)
from pydensela.matrix import Matrix
from pydensela.svd.backends import JacobiSVDBackend, LAPACKSVDBackend


BACKENDS = [
    (ClosedFormBackend(), "cpu_closed_form"),
    (LUBackend(), "cpu_lu"),
    (PseudoInverseBackend(), "cpu_svd_pinv"),
    (LAPACKSVDBackend(), "cpu_lapack_svd"),
    (JacobiSVDBackend(), "cpu_jacobi_svd"),
]


class TestBackendProtocol:

    @pytest.mark.parametrize("backend, name", BACKENDS)
    def test_is_backend(self, backend, name):
        assert isinstance(backend, Backend)
        assert backend.name == name

    @pytest.mark.parametrize("backend, name", BACKENDS)
    def test_solve_returns_result(self, backend, name):
        result = backend.solve(Matrix.from_nested([[4.0, 1.0], [1.0, 3.0]]))
        assert isinstance(result, Result)
        assert result.backend_name == name
        assert result.info["rank"] == 2
        assert "total_seconds" in result.timing

    def test_plain_object_is_not_backend(self):
        assert not isinstance(object(), Backend)

    def test_lu_backend_reports_singular(self):
        result = LUBackend().solve(Matrix.from_array(np.ones((4, 4))))
        assert result.info["singular"] is True
        assert result.info["method"] == "lu_pinv"
        assert result.has_warning("pseudo-inverse")
