from setuptools import setup

setup(
    name="fpcomponents",
    version="0.1.0",  # Match fpcomponents.version
    description="Sign, exponent and mantissa bit fields of IEEE 754 floating point values",
    install_requires=["numpy>=1.24"],
    extras_require={"test": ["pytest", "hypothesis"]},
    package_data={"fpcomponents": ["py.typed"]},
    packages=["fpcomponents"],
    zip_safe=False,
    python_requires=">=3.8",
)
