from setuptools import setup


setup(
    name = "bstmap",
    version = "0.1.0",
    description = "In-memory ordered key-value container backed by a binary search tree",
    packages = ["bstmap", "bstmap.tree"],
    python_requires = ">=3.8",
    install_requires = [],
    extras_require = {
        "test": [
            "pytest",
            "hypothesis",
            ],
        },
)
