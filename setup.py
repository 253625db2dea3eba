"""
setup.py

Установка Tower of Hanoi.

Использование:
    pip install -e .
    pip install -e .[test]
"""

from setuptools import setup, find_packages

setup(
    name="hanoi_tower",
    version="1.0.0",
    description="Terminal Tower of Hanoi animator",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["game", "main"],
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "hanoi=main:main",
        ],
    },
    zip_safe=False,
)
