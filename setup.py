from setuptools import setup, find_namespace_packages
from os import path

requires = [
    # click has been known to publish non-backwards compatible minors in the past
    "click>=8.0,<9",
    "colorlog~=6.4",
    "pe>=0.3",
    "pydantic~=2.0",
]


# read the contents of your README file
this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

version = "1.0.0"

setup(
    version=version,
    python_requires=">=3.9",  # also update classifiers
    # Meta data
    name="webidl-parser",
    description="Parser for WebIDL dictionary members",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Inmanta",
    author_email="code@inmanta.com",
    license="Apache Software License 2",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Compilers",
        "Programming Language :: Python :: 3.9",
    ],
    keywords="webidl parser",
    # Packaging
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["webidl", "webidl.*"]),
    zip_safe=False,
    include_package_data=True,
    install_requires=requires,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "webidl-member = webidl.app:main",
        ],
    },
)
