"""
Setup script for the console-games package.

Installs the three terminal games (Rock-Paper-Scissors-Lizard-Spock,
Tic-Tac-Toe and Twenty-One) together with the `console-games` entry point.
"""

from setuptools import setup, find_packages

setup(
    name="console-games",
    version="1.0.0",
    description="Rock-Paper-Scissors-Lizard-Spock, Tic-Tac-Toe and Twenty-One against the computer",
    author="Console Games Authors",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "console-games=console_games.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Games/Entertainment",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
