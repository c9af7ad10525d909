from setuptools import find_packages, setup

# Benchmarks of the square-root operations:
#   python -m tests.benchmarks.main

setup(
    name="int_sqrt",
    version=open("int_sqrt/VERSION.txt").read().strip(),
    include_package_data=False,
    package_data={
        "int_sqrt": ["VERSION.txt"],
    },
    packages=find_packages(include=["int_sqrt", "int_sqrt.*", "tests", "tests.*"]),
    python_requires=">=3.10, <4",
    install_requires=[
        "remerkleable>=0.1.27",
        "rich==13.9.4",
    ],
    extras_require={
        "test": [
            "hypothesis>=6.100.0",
            "pytest>=8.3.4",
        ],
    },
)
