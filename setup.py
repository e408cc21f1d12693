from setuptools import find_packages, setup

setup(
    name="sigscan",
    version="0.1.0",
    description="Scan directories for files matching known-malicious SHA-1 signatures",
    packages=find_packages(include=["sigscan", "sigscan.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Config and output models
        "typer",  # CLI
        "rich",  # Terminal formatting and progress
        "pyyaml",  # YAML output
        "pygments",  # Highlighted structured output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "sigscan=sigscan.cli:main",
        ],
    },
)
