import numpy as np
from fpcomponents import SingleComponents

A0 = np.random.rand(6).astype(np.float32)  # Random array in the range [0,1)

for x in A0:
    c = SingleComponents.from_value(x)
    _, sign, exponent, mantissa = c.try_get_normalized_logical()
    # Each float32 is exactly an odd integer times a power of two.
    print(f"{float(x):>12.9g} = {sign * mantissa} * 2**{exponent} = {c.try_get_normalized_logical().as_fraction()}")
    assert c.to_float().tobytes() == x.tobytes()
