from setuptools import setup, find_packages


with open("README.md", encoding="utf-8") as f:
    _long_description = f.read()


setup(
    name="legendre-jax",
    version="0.1.0",
    description="Associated Legendre functions and their derivatives for unnormalized, Schmidt and full normalizations.",
    long_description=_long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["examples", "tests"]),
    python_requires=">=3.9",
    install_requires=[
        "jax",
        "jaxlib",
        "sympy",
        "numpy",
        "attrs",
    ],
    extras_require={
        "dev": [
            "pytest",
            "nox",
        ],
    },
    license="MIT",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
