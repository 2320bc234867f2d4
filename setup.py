"""
Setup script for pysatl-stable.

Stable distributions and the univariate families they build on.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-stable",
    version="0.1.0",
    description="Stable distributions with numerically evaluated densities and CMS sampling",
    author="PySATL project",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
