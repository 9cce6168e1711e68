"""
setup.py

Установка решателя треугольного Peg Solitaire.

Использование:
    pip install -e .            # установка
    pip install -e .[test]      # + pytest
    triangle-pegs               # все решения из стандартного начала
"""

from setuptools import setup, find_packages

setup(
    name="triangle_peg_solver",
    version="1.0.0",
    description="Brute-force solver for the 15-hole triangular Peg Solitaire",
    packages=find_packages(include=["core", "solvers", "solutions", "peg_io", "utils"]),
    py_modules=["main"],
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "triangle-pegs=main:main",
        ],
    },
    zip_safe=False,
)
