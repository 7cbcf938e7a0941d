try:
    from setuptools import setup
except ImportError:
    from distutils.core import setup

from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))
with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="pyDTLZ",
    version="1.0.0",
    description="Python implementation of the DTLZ scalable multi-objective test problems",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/SalvatoreBarone/pyAMOSA",
    author="Salvatore Barone",
    author_email="salvatore.barone@unina.it",
    # https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Intended Audience :: Information Technology",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3.9"
    ],
    keywords="DTLZ multi-objective optimization benchmark test problems",
    packages=["pydtlz"],
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=["numpy", "matplotlib", "click", "tqdm", "json5"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["pydtlz=pydtlz.cli:cli"],
    },
    project_urls={
        "Bug Reports": "https://github.com/SalvatoreBarone/pyAMOSA/issues",
        "Source": "https://github.com/SalvatoreBarone/pyAMOSA",
    },
)
