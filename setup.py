import sys
from setuptools import setup, find_packages

# Check for minimum Python version if necessary
if sys.version_info < (3, 8):
    sys.exit("Sorry, Python >= 3.8 is required for numtensor.")

# Read README for long description
try:
    with open("README.md", encoding="utf-8") as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = "numtensor: small integer tensors of rank 1 to 5. (README not found)"


setup(
    name="numtensor",
    version="0.1.0", # Keep in sync with the fallback in numtensor/__init__.py
    description="Integer tensors of rank 1 to 5 with reshape, indexing and elementwise arithmetic",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    # Define the Python package structure
    packages=find_packages(), # Automatically find packages (numtensor, numtensor.utils)
    # Runtime dependencies (numpy for random data and array conversion)
    install_requires=["numpy>=1.17"],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=True,
    classifiers=[
        "Development Status :: 3 - Alpha", # Adjust as appropriate
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
)
