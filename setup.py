from setuptools import find_packages, setup

setup(
    name="wikiverify",
    version="0.1.0",
    description="Verify wikilinks across a tree of markdown documents",
    packages=find_packages(include=["wikiverify", "wikiverify.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # Command line interface (0.26+ vendors its own click)
        "click>=8.2",  # Typer's underlying CLI toolkit (usage errors, context)
        "pydantic>=2",  # Configuration and output schemas
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for CLI outputs
        "PyYAML",  # YAML output for structured results
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "wikiverify=wikiverify.cli:main",
        ],
    },
)
