# setup.py
from setuptools import setup, find_packages

setup(
    name="fatlisp",
    version="0.1.0",
    description="Lexer, parser and evaluator for a small Lisp-like language",
    packages=find_packages(include=["fatlisp", "fatlisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
