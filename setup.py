# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="minischeme",
    version="0.3.0",
    description="A small Scheme reader and evaluator, with a REPL and language server",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["minischeme", "minischeme.*", "minischeme_lsp", "minischeme_lsp.*"]),
    package_data={"minischeme": ["prelude/*.scm"]},
    install_requires=[
        "pygls>=2.0",
        "lsprotocol>=2023.0.1",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "minischeme=minischeme.repl:main",
            "minischeme-ls=minischeme_lsp.server:main",
        ],
    },
    zip_safe=False,
)
