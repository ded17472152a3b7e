"""
setuptools setup script for increment-cargo-version.
"""

from setuptools import setup

VERSION = "0.1.0"

setup(
    name="increment-cargo-version",
    version=VERSION,
    description="Increment the patch version in Cargo.toml and Cargo.lock",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=["increment_cargo_version"],
    install_requires=["pyyaml"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "increment-cargo-version=increment_cargo_version.app:main",
        ],
    },
)
