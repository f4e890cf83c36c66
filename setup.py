from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="graphwalk",
    version="0.1.0",
    description=(
        "Breadth-first, depth-first and widest-path analysis for weighted"
        " undirected graphs."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"graphwalk.schemas": ["*.json"]},
    python_requires=">=3.9",
    install_requires=["networkx", "PyYAML", "jsonschema"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
    entry_points={"console_scripts": ["graphwalk=graphwalk.cli:main"]},
)
