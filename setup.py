import setuptools

setuptools.setup(
    name="parsek",
    version="0.1.0",
    license="MIT License",
    description="Backtracking parser combinators over an immutable stream",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.7",
    install_requires=["typing_extensions"],
    extras_require={
        "test": ["pytest"],
        "bench": ["pyperf"],
    },
    zip_safe=False,
)
