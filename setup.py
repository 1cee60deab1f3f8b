# setup.py
from setuptools import setup, find_packages

setup(
    name="numvec",
    version="1.0.0",
    description="Fixed-size numeric vectors and quaternions on top of NumPy",
    packages=find_packages(include=["numvec", "numvec.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
