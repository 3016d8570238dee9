#!/usr/bin/env python

from setuptools import setup

setup(
    name="esmodel",
    version="0.1.0",
    description="Documents and mappings for the Elasticsearch REST API",
    packages=["esmodel"],
    include_package_data=True,
    zip_safe=False,
    keywords=["elasticsearch", "document", "mapping"],
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Topic :: Database",
    ],
    python_requires=">=3.10",
    install_requires=[
        "elasticsearch~=8.6",
        "python-dotenv",
        "pydantic>=2",
        "pydantic-settings",
    ],
    extras_require={
        'dev': [
            'pytest',
            'mypy',
            'flake8',
            'pre-commit',
        ]
    },
    entry_points={
        'console_scripts': [
            'esmodel = esmodel.__main__:main'
        ]
    },
)
