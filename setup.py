# setup.py
from setuptools import setup, find_packages

setup(
    name="edn",
    version="0.1.0",
    description="Reader, value model and printer for the edn data notation",
    packages=find_packages(include=["edn", "edn.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.22",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    zip_safe=False,
)
