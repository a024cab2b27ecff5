"""
Setup script for the CodeHealth package.
"""

from setuptools import setup, find_packages
import os

# Read the README
readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = "Code health metrics for Rust codebases: complexity, nesting and maintainability."

setup(
    name="codehealth",
    version="2.0.0",
    author="CodeHealth Team",
    author_email="codehealth@example.com",
    description="Scans Rust codebases and reports cyclomatic complexity, maintainability and risk metrics",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/codehealth/codehealth",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "tree-sitter>=0.23",
        "tree-sitter-rust>=0.23",
        "pyyaml>=6.0",
        "rich>=13.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "black>=23.0",
            "mypy>=1.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "codehealth=codehealth.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Rust",
        "Topic :: Software Development :: Quality Assurance",
    ],
    keywords="code-quality, static-analysis, cyclomatic-complexity, maintainability, rust, ci",
    project_urls={
        "Bug Reports": "https://github.com/codehealth/codehealth/issues",
        "Source": "https://github.com/codehealth/codehealth",
    },
)
