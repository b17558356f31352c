from setuptools import find_packages, setup

setup(
    name="md2mdc",
    version="0.1.0",
    description="Convert markdown documentation trees into Cursor .mdc rule files",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI (0.26+ vendors click, breaking click context/exception use)
        "click",  # Context access and usage errors (typer dependency)
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output models
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "md2mdc=md2mdc.cli:main",
        ],
    },
)
