"""
Setup file for google-helpers.
"""

from setuptools import setup, find_packages

setup(
    name="google-helpers",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "google-cloud-storage",
        "google-api-python-client",
        "google-auth",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "httplib2",
        ],
    },
    python_requires=">=3.8",
)
