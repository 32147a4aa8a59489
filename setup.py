#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup script for music-cadence
"""

from setuptools import setup, find_packages

# Read the README file
def read_readme():
    with open("README.md", "r", encoding="utf-8") as fh:
        return fh.read()

# Read requirements
def read_requirements():
    with open("requirements.txt", "r", encoding="utf-8") as fh:
        return [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="music-cadence",
    version="1.0.0",
    author="Alicaso",
    author_email="your.email@example.com",
    description="The chords of musical cadences in any diatonic key and mode",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    url="https://github.com/Alicaso/music-cadence",
    packages=find_packages(include=["music_cadence", "music_cadence.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Sound/Audio :: MIDI",
        "Topic :: Education",
    ],
    python_requires=">=3.8",
    install_requires=read_requirements(),
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=21.0",
            "flake8>=3.8",
            "mypy>=0.800",
        ],
    },
    include_package_data=True,
    package_data={
        "music_cadence": ["*.yaml"],
    },
    zip_safe=False,
    keywords="music theory, cadence, chords, roman numerals, midi, music21",
    project_urls={
        "Bug Reports": "https://github.com/Alicaso/music-cadence/issues",
        "Source": "https://github.com/Alicaso/music-cadence",
    },
)
