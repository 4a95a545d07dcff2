"""setuptools setup for simpletimer.

Install for development:
    pip install -e ".[test]"
    pytest
"""

from setuptools import setup, find_packages

setup(
    name="simpletimer",
    version="0.1.0",
    description="Small, simple timer (stopwatch) object",
    packages=find_packages(include=["simpletimer", "simpletimer.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
)
