from setuptools import find_packages, setup

setup(
    name="cdmi-qos",
    version="0.3.0",
    description="CDMI capability and QoS transition engine with a simulated filesystem backend",
    packages=find_packages(include=["cdmiqos", "cdmiqos.*"]),
    include_package_data=True,
    package_data={
        "cdmiqos.res": ["*.json"],
    },
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models
        "typer<0.26",  # CLI (0.26+ vendors its own click, breaking click.get_current_context)
        "click",  # CLI (used directly)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "pymongo",  # MongoDB status store
        "mongomock",  # In-memory MongoDB status store
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
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "qosc=cdmiqos.cli:main",
        ],
    },
)
