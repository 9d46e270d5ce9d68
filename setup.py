
from pathlib import Path

from setuptools import setup, find_packages

# Read the version without importing the package and its dependencies
version_ns = {}
exec((Path(__file__).parent / "rangezip" / "version.py").read_text(), version_ns)

setup(
    name="rangezip",
    version=version_ns["__version__"],
    packages=find_packages(include=["rangezip", "rangezip.*"]),
    install_requires=[
        "lark>=1.1.5",
        "typer>=0.9.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rangezip=rangezip.main:app",
        ],
    },
    python_requires=">=3.9",
)
