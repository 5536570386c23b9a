"""Elementary helpers for complex scalars."""
import numpy as np

I = complex(0.0, 1.0)


def mul_i(z):
    """Return I*z, where I is the imaginary unit."""
    z = complex(z)
    return complex(-z.imag, z.real)


def exp_i(z):
    """Return exp(I*z). Overflow gives inf/nan components, not an error."""
    z = complex(z)
    with np.errstate(over='ignore', invalid='ignore'):
        return complex(np.exp(complex(-z.imag, z.real)))
