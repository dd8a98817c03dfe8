#!/usr/bin/env python3
"""
Setup script for the Multimodal Live Client
"""

import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))

# Read the README file
with open(os.path.join(here, "README.md"), "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Read the requirements file
with open(os.path.join(here, "requirements.txt"), "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

# Get version from environment or default
version = os.getenv("VERSION", "0.1.0")

setup(
    name="multimodal-live-client",
    version=version,
    author="Multimodal Live Client Contributors",
    author_email="contributors@example.com",
    description="Bidirectional streaming client for the Gemini Live API with typed events",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Sound/Audio :: Speech",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Framework :: AsyncIO",
    ],
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.23.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.23.0",
            "pytest-cov>=4.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
            "mypy>=0.991",
        ],
    },
    include_package_data=True,
    keywords=[
        "gemini",
        "live-api",
        "websocket",
        "realtime",
        "streaming",
        "audio",
    ],
    zip_safe=False,
)
