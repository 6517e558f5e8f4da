""" ecmsg build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecmsg

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecmsg.name,
    version=ecmsg.__version__,
    license=ecmsg.__license__,
    author=ecmsg.__author__,
    author_email=ecmsg.__author_email__,
    description="Elliptic curve key agreement and signatures over NIST P-256",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecmsg": ["data/*.json"]},
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ecmsg=ecmsg.__main__:main"]},
    keywords="cryptography elliptic-curves ecdh ecdsa p-256 secp256r1",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
