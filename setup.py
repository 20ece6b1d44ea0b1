"""
wlenv build configuration

Usage:
    pip install -e .            # Library only
    pip install -e ".[test]"    # With the test suite dependencies
"""

from setuptools import setup, find_packages

setup(
    name="wlenv",
    version="0.1.0",
    description="Registry global discovery and binding for Wayland-style clients",
    packages=find_packages(include=["wlenv", "wlenv.*"]),
    install_requires=[
        "loguru>=0.7",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    python_requires=">=3.11",
)
