# setup.py
from setuptools import setup, find_packages

setup(
    name="kappa",
    version="0.1.0",
    description="A small Lisp-family interpreter with build-time slot resolution",
    packages=find_packages(include=["kappa", "kappa.*", "kappa_lsp", "kappa_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "hypothesis>=6",
        ],
    },
    entry_points={
        "console_scripts": [
            "kappa=kappa.__main__:main",
            "kappa-ls=kappa_lsp.server:main",
        ],
    },
    zip_safe=False,
)
