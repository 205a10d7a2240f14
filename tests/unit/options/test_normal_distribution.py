import math

import numpy as np
import pytest
from scipy.stats import norm

from option_lab.options import norm_cdf, norm_pdf


@pytest.mark.parametrize("x", np.linspace(-10.0, 10.0, 81))
def test_norm_pdf_matches_closed_form(x: float):
    expected = math.exp(-0.5 * x * x) / math.sqrt(2 * math.pi)
    assert norm_pdf(x) == pytest.approx(expected, abs=1e-12)


@pytest.mark.parametrize("x", np.linspace(-10.0, 10.0, 81))
def test_norm_cdf_matches_reference(x: float):
    assert norm_cdf(x) == pytest.approx(norm.cdf(x), abs=1e-12)


@pytest.mark.parametrize("x", [0.0, 1e-8, 0.3, 1.0, 1.96, 3.5, 8.0])
def test_norm_cdf_symmetry_is_exact(x: float):
    assert norm_cdf(-x) == 1.0 - norm_cdf(x)


def test_norm_functions_accept_arrays():
    xs = np.array([-1.0, 0.0, 1.0])

    cdf = norm_cdf(xs)
    pdf = norm_pdf(xs)

    assert isinstance(cdf, np.ndarray)
    assert cdf == pytest.approx([norm.cdf(-1.0), 0.5, norm.cdf(1.0)])
    assert pdf == pytest.approx(norm.pdf(xs))


def test_norm_scalar_inputs_return_python_floats():
    assert isinstance(norm_cdf(0.25), float)
    assert isinstance(norm_pdf(0.25), float)
    assert norm_cdf(0.0) == 0.5
