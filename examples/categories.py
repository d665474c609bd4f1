import numpy as np
from fpcomponents import FP16, split

# Random values spanning the whole float16 range, plus the special values
A0 = np.random.uniform(-2.0, 2.0, 1024) * 2.0 ** np.random.randint(-26, 17, 1024)
A0 = np.concatenate([A0, [0.0, -0.0, np.inf, -np.inf, np.nan]])

signs, exponents, mantissas = split(A0, FP16)

top = FP16.max_literal_exponent
print("zero      : ", np.count_nonzero((exponents == 0) & (mantissas == 0)))
print("subnormal : ", np.count_nonzero((exponents == 0) & (mantissas != 0)))
print("normal    : ", np.count_nonzero((exponents != 0) & (exponents != top)))
print("infinity  : ", np.count_nonzero((exponents == top) & (mantissas == 0)))
print("nan       : ", np.count_nonzero((exponents == top) & (mantissas != 0)))
print("negative  : ", np.count_nonzero(signs))
