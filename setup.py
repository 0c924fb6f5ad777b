import sys
from setuptools import setup, find_packages

# Check for minimum Python version
if sys.version_info < (3, 8):
    sys.exit("Sorry, Python >= 3.8 is required for strided.")

# Read README for long description
try:
    with open("README.md", encoding="utf-8") as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = "strided: a minimal row-major N-dimensional array. (README not found)"


setup(
    name="strided",
    version="0.1.0", # Keep in sync with the fallback in strided/__init__.py
    description="A minimal row-major N-dimensional array with bounds-checked access",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(),
    # The element buffer is a flat numpy float32 array
    install_requires=["numpy>=1.16"],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
)
