#!/usr/bin/env python3
"""
jdocminer
=========

Javadoc extraction engine: collects the constructors and methods of Java
classes together with their documented @throws conditions, parameters and
return values, and writes them out as JSON.

For more information, see README.md
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="jdocminer",
    version="1.0.0",
    author="jdocminer Team",
    description="Extract documented exception conditions and parameters from Javadoc comments",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Documentation",
        "Topic :: Software Development :: Testing",
    ],
    python_requires=">=3.10",
    install_requires=[
        "javalang>=0.13.0",
        "beautifulsoup4>=4.12.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "hypothesis>=6.92.0",
        ],
        "dev": [
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.5.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "jdocminer=jdocminer.cli:main",
        ],
    },
)
