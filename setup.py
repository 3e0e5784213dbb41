import os
import re
from setuptools import setup, find_packages

DISTNAME = "extremekit"
PACKAGES = find_packages(include=["extremekit", "extremekit.*"])
EXTENSIONS = []
DESCRIPTION = "Short-term extreme value distributions from peaks distributions"
AUTHOR = "extremekit developers"
MAINTAINER_EMAIL = ""
LICENSE = "Revised BSD"
URL = ""
CLASSIFIERS = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Topic :: Scientific/Engineering",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
]
DEPENDENCIES = [
    "numpy>=2.0.0",
    "pandas>=2.2.2",
    "scipy>=1.14.0",
    "xarray>=2024.6.0",
]
EXTRAS = {
    "test": ["pytest"],
}

LONG_DESCRIPTION = """
extremekit is a Python package for estimating the short-term extreme
distribution of a response from the distribution of its peaks.  Given a
peaks distribution and the number of peaks in a short-term period, it
provides:

* Cumulative distribution function of the largest peak
* Probability density function (numerical differentiation)
* Percent point function (bracketed Brent root finding)
* Expected value (adaptive quadrature over a truncated domain)
* Return level values

Installation
------------------------
extremekit requires Python 3.10 or newer along with numpy, scipy, pandas
and xarray. Install from source with ``pip install -e .``, or
``pip install -e .[test]`` to run the test suite with pytest.

Copyright and license
------------------------
The software is distributed under the Revised BSD License.
"""


# get version from __init__.py
file_dir = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(file_dir, "extremekit", "__init__.py")) as f:
    version_file = f.read()
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M)
    if version_match:
        VERSION = version_match.group(1)
    else:
        raise RuntimeError("Unable to find version string.")

setup(
    name=DISTNAME,
    version=VERSION,
    packages=PACKAGES,
    ext_modules=EXTENSIONS,
    description=DESCRIPTION,
    long_description_content_type="text/markdown",
    long_description=LONG_DESCRIPTION,
    author=AUTHOR,
    maintainer_email=MAINTAINER_EMAIL,
    license=LICENSE,
    url=URL,
    classifiers=CLASSIFIERS,
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=DEPENDENCIES,
    extras_require=EXTRAS,
    scripts=[],
    include_package_data=True,
)
