"""
Setup script for the triwall package.

The rule engine and the terminal frontend need only pydantic and
python-dotenv. The window frontend is an optional extra.
"""

from setuptools import setup, find_packages

setup(
    name="triwall",
    version="1.0.0",
    description="Triwall - a 2 to 4 player wall-building territory game on a triangular board",
    author="Course Staff",
    license="Proprietary",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "pygame": ["pygame>=2.1.0"],
        "test": ["pytest>=7.0"],
        "all": ["pygame>=2.1.0"],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "triwall=triwall.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Board Games",
    ],
)
