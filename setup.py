#!/usr/bin/env python3
"""
Setup script for configexport package.
"""

from setuptools import setup, find_packages

setup(
    name="configexport",
    version="0.3.0",
    description="Export configuration objects together with their dependency closure",
    author="configexport Team",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "configexport=configexport.cli.main:app",
        ],
    },
)
