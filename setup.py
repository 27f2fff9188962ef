"""Setup script for hashkit."""

from pathlib import Path

from setuptools import find_packages, setup


def read_readme():
    """Return the long description, if a README is present."""
    readme = Path(__file__).parent / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="hashkit",
    version="0.1.0",
    description="Digests, salted secure hashes and random security tokens",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(include=["hashkit", "hashkit.*"]),
    install_requires=[
        "blake3>=0.4",
        "click>=8.1",
        "dependency-injector>=4.41",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "hashkit=hashkit.__main__:main",
        ],
    },
)
