# setup.py
from setuptools import setup, find_packages

setup(
    name="stepl",
    version="0.1.0",
    description="A small Lisp evaluated by a resumable, single-step state machine",
    packages=find_packages(include=["stepl", "stepl.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
