#!/usr/bin/env python3
"""
Setup script for netdash - live network topology dashboard.

This package polls a topology endpoint, decodes its snapshots into one
in-memory model and drives a force-directed layout per topology.
"""

import os

from setuptools import find_packages, setup


# Read the README file for long description
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "netdash - live network topology dashboard"


setup(
    name="netdash",
    version="1.0.0",
    author="netdash Development Team",
    description="Live dashboard core for named network topologies",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["netdash", "netdash.*"], exclude=["tests*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: System :: Networking :: Monitoring",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        # Core dependencies that are always needed
        "networkx>=3.2.1",
        "numpy>=1.26.3",
        "PyYAML>=6.0.1",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "httpx>=0.27.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.3.4",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="network topology, dashboard, force-directed layout, monitoring",
)
