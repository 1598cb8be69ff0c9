# setup.py
from setuptools import setup, find_packages

setup(
    name="slisp",
    version="0.1.0",
    description="A small Lisp interpreter with closures, a REPL and a file runner",
    python_requires=">=3.11",
    packages=find_packages(include=["slisp", "slisp.*"]),
    package_data={"slisp": ["prelude/*.lisp"]},
    install_requires=[
        "loguru>=0.7",
        "rich>=13.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": ["pytest>=7.0", "hypothesis>=6.0"],
    },
    entry_points={
        "console_scripts": ["slisp=slisp.cli:app"],
    },
    zip_safe=False,
)
