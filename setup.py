"""
setup.py

Установка Solitaire Cross.

Использование:
    pip install -e .[test]
    solcross --depth 5
"""

from setuptools import setup, find_packages

setup(
    name="solcross",
    version="1.0.0",
    description="Longest jump sequence search for the cross peg solitaire board",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "solcross=main:main",
        ],
    },
    zip_safe=False,
)
