from setuptools import setup, find_packages

setup(
    name="rusuku",
    version="0.1.0",
    description="Terminal dashboard with a pausable elapsed-time header and a seamlessly ruled grid",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer",
        "rich",
        "readchar",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "rusuku=rusuku.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
