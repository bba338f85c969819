from setuptools import setup, find_packages

# Name and version live in pyproject.toml so release bumps need only modify that file
setup(
    packages=find_packages(include=["llvmweave", "llvmweave.*"]),
    install_requires=[
        "click>=8.0",
        "pydantic>=2.0",
        "PyYAML>=5.4",
        "rich>=12.0",
        "structlog>=22.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "weave-llvm-src = llvmweave.cli:main",
        ],
    },
)
