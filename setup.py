from setuptools import setup, find_packages

setup(
    name="exactalgebra",
    version="1.0",
    description="Exact rational linear algebra with step-by-step row reduction",
    long_description=("Vectors and matrices over the rationals with exact arithmetic, reduction to reduced "
                      "row-echelon form with a replayable trace of elementary row operations, determinants "
                      "and inverses"),
    long_description_content_type="text/plain",
    author="Philipp Schneider",
    author_email="zgddtgt@gmail.com",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["exactalgebra", "exactalgebra.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Intended Audience :: Education", "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3.9", "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "rational arithmetic", "row reduction", "determinant", "matrix inverse"],
    zip_safe=False,
)
