from setuptools import find_packages, setup

setup(
    name="txt2link",
    version="0.1.0",
    description="Convert text files holding a path into symlinks to that path",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # Command-line interface
        "rich",  # Terminal output
        "pydantic>=2",  # Configuration model
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "txt2link=txt2link.cli:main",
        ],
    },
)
