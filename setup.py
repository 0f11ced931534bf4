import os
from setuptools import setup, find_packages

long_description = ""
if os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as readme:
        long_description = readme.read()

setup(
    name="hasura-codegen",
    version="0.1.0",
    description="Template-ready model descriptors derived from a Hasura GraphQL schema.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["hasura_codegen", "hasura_codegen.*"]),
    include_package_data=True,
    install_requires=[
        "graphql-core>=3.2.3",
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "hasura-codegen=hasura_codegen.bin.hasura_codegen:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Code Generators",
    ],
    python_requires=">=3.9",
)
