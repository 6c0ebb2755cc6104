from setuptools import setup, find_packages

setup(
    name="treapbench",
    version="0.1.0",
    description="Treap versus dynamic array: a randomized BST and its linear-scan baseline",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
