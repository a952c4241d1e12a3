""" ectower build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ectower

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ectower.name,
    version=ectower.__version__,
    license=ectower.__license__,
    author=ectower.__author__,
    author_email=ectower.__author_email__,
    description="Elliptic curves over F_p(i) and an ECDH key exchange demo",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ectower-demo = ectower.demo:main"]},
    keywords=(
        "elliptic-curves finite-fields quadratic-extension polynomials "
        "ecdh diffie-hellman didactic"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
