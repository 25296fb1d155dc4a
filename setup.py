# setup.py
from setuptools import setup, find_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="A small tree-walking interpreter for a Lisp-family language",
    packages=find_packages(include=["minilisp", "minilisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minilisp-demo=minilisp.__main__:main"],
    },
    zip_safe=False,
)
